"""
Azure DevOps policy operations.
"""

import logging
from typing import List, Optional
from urllib.parse import quote

from azure_repo_state.services.azure.api.client import AzureDevOpsAPIClient
from azure_repo_state.services.azure.models.types import PolicyConfiguration

logger = logging.getLogger(__name__)


class PolicyOperations:
    """Handles Azure DevOps policy configuration operations."""

    def __init__(self, client: Optional[AzureDevOpsAPIClient] = None):
        """Initialize policy operations.

        Args:
            client: Azure DevOps API client (creates new if not provided)
        """
        self.client = client or AzureDevOpsAPIClient()

    async def get_policy_configurations(
        self,
        project: str,
        scope: Optional[str] = None,
        policy_type: Optional[str] = None,
    ) -> List[PolicyConfiguration]:
        """List policy configurations of a project.

        Args:
            project: Project ID or name
            scope: Optional scope filter (e.g. "repositoryId:refName")
            policy_type: Optional policy type GUID to filter on

        Returns:
            Policy configurations in provider order
        """
        items = await self.client.get_list(
            f"{quote(project, safe='')}/_apis/policy/configurations",
            params={"scope": scope, "policyType": policy_type},
        )
        logger.debug(f"Fetched {len(items)} policy configurations for project {project}")
        return [PolicyConfiguration.model_validate(item) for item in items]
