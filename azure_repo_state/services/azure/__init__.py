"""
Azure DevOps Service Package

Repository state lookups for pull request automation on Azure DevOps.

Main Components:
- AzureService: Main facade for all lookups
- API Client: Azure DevOps REST API interactions
- Resolvers: Branch, file content, merge strategy and team resolution
"""

from azure_repo_state.services.azure.azure_service import AzureService

__all__ = ["AzureService"]
