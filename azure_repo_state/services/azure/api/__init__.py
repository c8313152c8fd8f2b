"""
Azure DevOps API Module

Handles all Azure DevOps REST API interactions including:
- Git refs, items and commits
- Policy configurations
- Project teams
"""

from azure_repo_state.services.azure.api.client import (
    AzureDevOpsAPIClient,
    AzureDevOpsAPIError,
    ItemTextStream,
)
from azure_repo_state.services.azure.api.core import CoreOperations
from azure_repo_state.services.azure.api.git import GitOperations
from azure_repo_state.services.azure.api.policy import PolicyOperations

__all__ = [
    "AzureDevOpsAPIClient",
    "AzureDevOpsAPIError",
    "ItemTextStream",
    "CoreOperations",
    "GitOperations",
    "PolicyOperations",
]
