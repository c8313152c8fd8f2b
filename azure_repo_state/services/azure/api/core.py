"""
Azure DevOps core operations (projects and teams).
"""

from typing import List, Optional
from urllib.parse import quote

from azure_repo_state.services.azure.api.client import AzureDevOpsAPIClient
from azure_repo_state.services.azure.models.types import WebApiTeam


class CoreOperations:
    """Handles Azure DevOps core API operations."""

    def __init__(self, client: Optional[AzureDevOpsAPIClient] = None):
        """Initialize core operations.

        Args:
            client: Azure DevOps API client (creates new if not provided)
        """
        self.client = client or AzureDevOpsAPIClient()

    async def get_teams(
        self,
        project_id: str,
        mine: Optional[bool] = None,
        top: Optional[int] = None,
        skip: Optional[int] = None,
    ) -> List[WebApiTeam]:
        """Get one page of teams of a project.

        Args:
            project_id: Project ID or name
            mine: Only return teams the caller is a member of
            top: Maximum number of teams to return
            skip: Number of teams to skip

        Returns:
            Teams in provider order
        """
        params = {
            "$mine": None if mine is None else str(mine).lower(),
            "$top": top,
            "$skip": skip,
        }
        items = await self.client.get_list(
            f"_apis/projects/{quote(project_id, safe='')}/teams", params=params
        )
        return [WebApiTeam.model_validate(item) for item in items]
