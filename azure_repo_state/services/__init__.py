"""
Services package.

Contains the provider services of the repository-state resolver.
"""

from azure_repo_state.services.azure.azure_service import AzureService

__all__ = ["AzureService"]
