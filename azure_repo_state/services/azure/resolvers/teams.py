"""
Team listing with offset pagination.
"""

import logging
from typing import AsyncGenerator, List, Optional

from azure_repo_state.services.azure.api.core import CoreOperations
from azure_repo_state.services.azure.models.types import WebApiTeam
from common.config.config import AZURE_TEAMS_PAGE_SIZE

logger = logging.getLogger(__name__)


class TeamLister:
    """Lists all teams of a project page by page."""

    def __init__(
        self,
        core: Optional[CoreOperations] = None,
        page_size: int = AZURE_TEAMS_PAGE_SIZE,
    ):
        """Initialize team lister.

        Args:
            core: Core operations (creates new if not provided)
            page_size: Teams requested per page
        """
        self.core = core or CoreOperations()
        self.page_size = page_size

    async def iter_team_pages(self, project_id: str) -> AsyncGenerator[List[WebApiTeam], None]:
        """Yield pages of teams in provider order.

        Each call starts again from the first page. Iteration stops after the
        first page shorter than the page size, which may be empty.

        Args:
            project_id: Project ID or name

        Yields:
            Lists of teams
        """
        skip = 0
        while True:
            teams = await self.core.get_teams(project_id, top=self.page_size, skip=skip)
            logger.debug(f"Fetched {len(teams)} teams of project {project_id} (skip={skip})")
            yield teams
            if len(teams) < self.page_size:
                return
            skip += self.page_size

    async def list_all_teams(self, project_id: str) -> List[WebApiTeam]:
        """Get every team of a project.

        Args:
            project_id: Project ID or name

        Returns:
            All teams, pages concatenated in order
        """
        all_teams: List[WebApiTeam] = []
        async for teams in self.iter_team_pages(project_id):
            all_teams.extend(teams)
        return all_teams
