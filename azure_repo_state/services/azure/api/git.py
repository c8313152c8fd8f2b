"""
Azure DevOps Git operations.

Provides access to refs, item text and commits of a repository.
"""

from typing import List, Optional
from urllib.parse import quote

from azure_repo_state.services.azure.api.client import AzureDevOpsAPIClient, ItemTextStream
from azure_repo_state.services.azure.models.types import GitCommitRef, GitRef

# Statuses whose body is handed to the caller for item text; the provider
# reports missing items and branches as a wrapped exception in a 404 body.
ITEM_TEXT_STATUSES = (200, 204, 404)


class GitOperations:
    """Handles Azure DevOps Git API operations."""

    def __init__(self, client: Optional[AzureDevOpsAPIClient] = None):
        """Initialize Git operations.

        Args:
            client: Azure DevOps API client (creates new if not provided)
        """
        self.client = client or AzureDevOpsAPIClient()

    @staticmethod
    def _repository_path(repository_id: str) -> str:
        return f"_apis/git/repositories/{quote(repository_id, safe='')}"

    async def get_refs(
        self,
        repository_id: str,
        filter: Optional[str] = None,
    ) -> List[GitRef]:
        """List refs of a repository.

        Args:
            repository_id: Repository ID or name
            filter: Ref name prefix without the leading "refs/" (e.g. "heads/main")

        Returns:
            Refs in provider order
        """
        items = await self.client.get_list(
            f"{self._repository_path(repository_id)}/refs",
            params={"filter": filter},
        )
        return [GitRef.model_validate(item) for item in items]

    async def get_item_text(
        self,
        repository_id: str,
        path: str,
        version: Optional[str] = None,
        version_type: str = "branch",
        recursion_level: str = "none",
    ) -> Optional[ItemTextStream]:
        """Open the text content of a single item.

        Args:
            repository_id: Repository ID or name
            path: Item path
            version: Version string (branch name without "refs/heads/")
            version_type: Version type ("branch", "commit" or "tag")
            recursion_level: Recursion level ("none" for a single file)

        Returns:
            Open stream owned by the caller, or None when there is no body
        """
        params = {
            "path": path,
            "recursionLevel": recursion_level,
            "includeContent": "true",
            "versionDescriptor.versionType": version_type,
            "versionDescriptor.version": version,
        }
        return await self.client.open_stream(
            f"{self._repository_path(repository_id)}/items",
            params=params,
            allowed_statuses=ITEM_TEXT_STATUSES,
        )

    async def get_commit(self, commit_id: str, repository_id: str) -> GitCommitRef:
        """Get a single commit.

        Args:
            commit_id: Commit object id
            repository_id: Repository ID or name

        Returns:
            Commit details
        """
        response = await self.client.get(
            f"{self._repository_path(repository_id)}/commits/{quote(commit_id, safe='')}"
        )
        return GitCommitRef.model_validate(response)
