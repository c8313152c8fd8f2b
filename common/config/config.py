"""
Configuration module for the Azure DevOps repository-state services.

Values are read from the environment (optionally populated from a .env file)
once at import time and exposed as module-level constants.
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _normalize_endpoint(endpoint: str) -> str:
    """Ensure the organisation URL ends with a single slash."""
    if not endpoint:
        return endpoint
    return endpoint.rstrip("/") + "/"


# Azure DevOps organisation
# e.g. https://dev.azure.com/my-organisation/
AZURE_ENDPOINT = _normalize_endpoint(os.getenv("AZURE_ENDPOINT", ""))

# Authentication: personal access token, or username/password basic auth
AZURE_TOKEN = os.getenv("AZURE_TOKEN")
AZURE_USERNAME = os.getenv("AZURE_USERNAME")
AZURE_PASSWORD = os.getenv("AZURE_PASSWORD")

# REST API settings
AZURE_API_VERSION = os.getenv("AZURE_API_VERSION", "7.0")
AZURE_API_TIMEOUT = float(os.getenv("AZURE_API_TIMEOUT", "150"))
AZURE_API_CONNECT_TIMEOUT = float(os.getenv("AZURE_API_CONNECT_TIMEOUT", "60"))

# Teams listing
AZURE_TEAMS_PAGE_SIZE = int(os.getenv("AZURE_TEAMS_PAGE_SIZE", "100"))
