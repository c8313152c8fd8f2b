"""
Main Azure DevOps Service - Unified facade for repository state lookups.

This service provides a single entry point for:
- Refs and branch base objects
- File content at a branch
- Commit details
- Merge strategy from branch policies
- Project teams
"""

import logging
from typing import AsyncGenerator, List, Optional

import httpx

from azure_repo_state.services.azure.api.client import AzureDevOpsAPIClient
from azure_repo_state.services.azure.api.core import CoreOperations
from azure_repo_state.services.azure.api.git import GitOperations
from azure_repo_state.services.azure.api.policy import PolicyOperations
from azure_repo_state.services.azure.models.types import (
    BranchObject,
    FileLookupOutcome,
    GitCommitRef,
    GitRef,
    MergeStrategy,
    WebApiTeam,
)
from azure_repo_state.services.azure.resolvers.branch import BranchResolver
from azure_repo_state.services.azure.resolvers.files import FileContentResolver
from azure_repo_state.services.azure.resolvers.merge_strategy import (
    PolicyMergeStrategyResolver,
)
from azure_repo_state.services.azure.resolvers.teams import TeamLister

logger = logging.getLogger(__name__)


class AzureService:
    """
    Unified Azure DevOps service providing repository state lookups.

    This is the main entry point for all Azure DevOps reads made on behalf of
    pull request automation.
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        token: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize Azure DevOps service.

        Args:
            endpoint: Organisation URL (defaults to config)
            token: Personal access token (defaults to config)
            username: Basic auth username (defaults to config)
            password: Basic auth password (defaults to config)
            transport: Optional httpx transport, mainly for tests
        """
        self.api_client = AzureDevOpsAPIClient(
            endpoint=endpoint,
            token=token,
            username=username,
            password=password,
            transport=transport,
        )

        self.git = GitOperations(client=self.api_client)
        self.policies = PolicyOperations(client=self.api_client)
        self.core = CoreOperations(client=self.api_client)

        self.branches = BranchResolver(git=self.git)
        self.files = FileContentResolver(git=self.git)
        self.merge_strategies = PolicyMergeStrategyResolver(policies=self.policies)
        self.teams = TeamLister(core=self.core)

    async def get_refs(
        self, repository_id: str, branch_name: Optional[str] = None
    ) -> List[GitRef]:
        """List refs of a repository.

        Args:
            repository_id: Repository ID
            branch_name: Optional branch or ref name prefix

        Returns:
            Refs in provider order
        """
        return await self.branches.get_refs(repository_id, branch_name)

    async def resolve_branch_object(
        self,
        repository_id: str,
        branch_name: str,
        from_branch: Optional[str] = None,
    ) -> BranchObject:
        """Resolve the base object for a branch.

        Args:
            repository_id: Repository ID
            branch_name: Branch to create or update
            from_branch: Base branch; the default branch when omitted

        Returns:
            BranchObject
        """
        return await self.branches.resolve_branch_object(
            repository_id, branch_name, from_branch
        )

    async def lookup_file(
        self,
        repository_id: str,
        file_path: str,
        branch_name: Optional[str] = None,
    ) -> FileLookupOutcome:
        """Look up a file at a branch.

        Args:
            repository_id: Repository ID
            file_path: Path of the file
            branch_name: Branch name

        Returns:
            FileLookupOutcome
        """
        return await self.files.lookup_file(repository_id, file_path, branch_name)

    async def get_file_content(
        self,
        repository_id: str,
        file_path: str,
        branch_name: Optional[str] = None,
    ) -> Optional[str]:
        """Get the text of a file at a branch.

        Args:
            repository_id: Repository ID
            file_path: Path of the file
            branch_name: Branch name

        Returns:
            File content, or None when the file or branch does not exist
        """
        return await self.files.get_file_content(repository_id, file_path, branch_name)

    async def get_commit_details(self, commit_id: str, repository_id: str) -> GitCommitRef:
        """Get commit details.

        Args:
            commit_id: Commit object id
            repository_id: Repository ID

        Returns:
            GitCommitRef
        """
        logger.debug(f"get_commit_details({commit_id}, {repository_id})")
        return await self.git.get_commit(commit_id, repository_id)

    async def resolve_merge_method(
        self,
        repository_id: str,
        project: str,
        branch_ref: Optional[str] = None,
        default_branch: Optional[str] = None,
    ) -> MergeStrategy:
        """Resolve the merge strategy for a branch.

        Args:
            repository_id: Repository ID
            project: Project ID or name
            branch_ref: Fully qualified target ref
            default_branch: Short name of the default branch

        Returns:
            MergeStrategy
        """
        return await self.merge_strategies.resolve_merge_method(
            repository_id, project, branch_ref, default_branch
        )

    def iter_team_pages(self, project_id: str) -> AsyncGenerator[List[WebApiTeam], None]:
        """Iterate over pages of teams of a project.

        Args:
            project_id: Project ID or name

        Returns:
            Async generator of team pages
        """
        return self.teams.iter_team_pages(project_id)

    async def list_all_teams(self, project_id: str) -> List[WebApiTeam]:
        """Get every team of a project.

        Args:
            project_id: Project ID or name

        Returns:
            All teams in provider order
        """
        return await self.teams.list_all_teams(project_id)
