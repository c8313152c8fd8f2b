"""Integration tests for AzureService against a mocked Azure DevOps API."""

import json

import httpx
import pytest

from azure_repo_state.services.azure.azure_service import AzureService
from azure_repo_state.services.azure.models.types import (
    ZERO_OBJECT_ID,
    FileLookupStatus,
    MergeStrategy,
)
from azure_repo_state.services.azure.resolvers.merge_strategy import MERGE_POLICY_TYPE_ID

REPO_ID = "0d0a5c1e-repo"
MAIN_SHA = "f" * 40


class FakeAzureDevOps:
    """Minimal in-memory Azure DevOps REST API."""

    def __init__(self):
        self.refs = [{"name": "refs/heads/main", "objectId": MAIN_SHA}]
        self.files = {
            ("main", "/renovate.json"): '{"extends": ["config:recommended"]}',
            ("main", "/.gitkeep"): b"",
            ("main", "/logo.png"): b"\x89PNG\r\n\x1a\n\xff\xfe",
        }
        self.branches = {"main"}
        self.policies = [
            {
                "id": 1,
                "settings": {
                    "allowNoFastForward": False,
                    "allowSquash": True,
                    "scope": [{"repositoryId": REPO_ID, "refName": "refs/heads/main", "matchKind": "Exact"}],
                },
            },
            {
                "id": 2,
                "settings": {
                    "allowRebase": True,
                    "scope": [{"repositoryId": None, "refName": "refs/heads/release/", "matchKind": "Prefix"}],
                },
            },
        ]
        self.teams = [{"id": f"team-{i}", "name": f"Team {i}"} for i in range(130)]
        self.requests = []

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        params = request.url.params

        if path.endswith("/refs"):
            prefix = "refs/" + params.get("filter", "")
            value = [ref for ref in self.refs if ref["name"].startswith(prefix)]
            return httpx.Response(200, json={"count": len(value), "value": value})

        if path.endswith("/items"):
            branch = params.get("versionDescriptor.version", "main")
            if branch not in self.branches:
                return httpx.Response(404, text=self._wrapped("GitUnresolvableToCommitException"))
            content = self.files.get((branch, params["path"]))
            if content is None:
                return httpx.Response(404, text=self._wrapped("GitItemNotFoundException"))
            if isinstance(content, bytes):
                return httpx.Response(200, content=content)
            return httpx.Response(200, text=content)

        if "/commits/" in path:
            commit_id = path.rsplit("/", 1)[-1]
            return httpx.Response(200, json={"commitId": commit_id, "comment": "Update deps", "parents": []})

        if path.endswith("/_apis/policy/configurations"):
            assert params["policyType"] == MERGE_POLICY_TYPE_ID
            return httpx.Response(200, json={"count": len(self.policies), "value": self.policies})

        if path.endswith("/teams"):
            top, skip = int(params["$top"]), int(params["$skip"])
            value = self.teams[skip:skip + top]
            return httpx.Response(200, json={"count": len(value), "value": value})

        return httpx.Response(404, json={"message": f"unexpected {path}"})

    @staticmethod
    def _wrapped(type_key: str) -> str:
        return json.dumps({"$id": "1", "message": "not found", "typeKey": type_key, "errorCode": 0, "eventId": 3000})


@pytest.fixture
def fake_api():
    """Create the fake Azure DevOps API."""
    return FakeAzureDevOps()


@pytest.fixture
def azure_service(fake_api):
    """Create AzureService wired to the fake API."""
    return AzureService(
        endpoint="https://dev.azure.com/org/",
        token="pat",
        transport=httpx.MockTransport(fake_api.handle),
    )


class TestAzureServiceIntegration:
    """Test AzureService end to end."""

    @pytest.mark.asyncio
    async def test_resolve_branch_object_from_existing_branch(self, azure_service):
        """Test the base object is the tip of the base branch."""
        result = await azure_service.resolve_branch_object(REPO_ID, "renovate/lodash", "main")

        assert result.name == "refs/heads/renovate/lodash"
        assert result.old_object_id == MAIN_SHA

    @pytest.mark.asyncio
    async def test_resolve_branch_object_bootstrap(self, azure_service):
        """Test a missing base branch gives the zero object id."""
        result = await azure_service.resolve_branch_object(REPO_ID, "renovate/lodash", "develop")

        assert result.old_object_id == ZERO_OBJECT_ID

    @pytest.mark.asyncio
    async def test_file_lookup_outcomes(self, azure_service):
        """Test found, missing file and missing branch."""
        found = await azure_service.lookup_file(REPO_ID, "/renovate.json", "refs/heads/main")
        missing_file = await azure_service.lookup_file(REPO_ID, "/package.json", "main")
        missing_branch = await azure_service.lookup_file(REPO_ID, "/renovate.json", "gone")

        assert found.status == FileLookupStatus.FOUND
        assert found.content == '{"extends": ["config:recommended"]}'
        assert missing_file.status == FileLookupStatus.FILE_MISSING
        assert missing_branch.status == FileLookupStatus.BRANCH_MISSING
        assert await azure_service.get_file_content(REPO_ID, "/package.json", "main") is None

    @pytest.mark.asyncio
    async def test_empty_file_is_found(self, azure_service):
        """Test an existing empty file is found with empty content."""
        outcome = await azure_service.lookup_file(REPO_ID, "/.gitkeep", "main")

        assert outcome.status == FileLookupStatus.FOUND
        assert outcome.content == ""
        assert await azure_service.get_file_content(REPO_ID, "/.gitkeep", "main") == ""

    @pytest.mark.asyncio
    async def test_binary_file_is_found(self, azure_service):
        """Test non UTF-8 content is returned with replacement characters."""
        outcome = await azure_service.lookup_file(REPO_ID, "/logo.png", "main")

        assert outcome.status == FileLookupStatus.FOUND
        assert outcome.content.startswith("�PNG")

    @pytest.mark.asyncio
    async def test_get_commit_details(self, azure_service):
        """Test commit details pass through."""
        commit = await azure_service.get_commit_details("abc123", REPO_ID)

        assert commit.commit_id == "abc123"
        assert commit.comment == "Update deps"

    @pytest.mark.asyncio
    async def test_resolve_merge_method(self, azure_service):
        """Test exact and prefix policies and the fallback."""
        assert await azure_service.resolve_merge_method(REPO_ID, "project", "refs/heads/main") == MergeStrategy.SQUASH
        assert (
            await azure_service.resolve_merge_method(REPO_ID, "project", "refs/heads/release/1.0")
            == MergeStrategy.REBASE
        )
        assert (
            await azure_service.resolve_merge_method(REPO_ID, "project", "refs/heads/feature")
            == MergeStrategy.NO_FAST_FORWARD
        )

    @pytest.mark.asyncio
    async def test_list_all_teams(self, azure_service, fake_api):
        """Test all pages of teams are collected."""
        teams = await azure_service.list_all_teams("project")

        assert [team.id for team in teams] == [team["id"] for team in fake_api.teams]
        team_requests = [r for r in fake_api.requests if r.url.path.endswith("/teams")]
        assert [r.url.params["$skip"] for r in team_requests] == ["0", "100"]
