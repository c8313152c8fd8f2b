"""
Azure DevOps Models Module

Shared types, enums, payload models and schemas for Azure DevOps operations.
"""

from azure_repo_state.services.azure.models.schema import (
    GIT_ITEM_NOT_FOUND,
    GIT_UNRESOLVABLE_TO_COMMIT,
    WrappedException,
    parse_wrapped_exception,
)
from azure_repo_state.services.azure.models.types import (
    ZERO_OBJECT_ID,
    BranchObject,
    FileLookupOutcome,
    FileLookupStatus,
    GitCommitRef,
    GitRef,
    MatchKind,
    MergeStrategy,
    PolicyConfiguration,
    PolicyScope,
    WebApiTeam,
)

__all__ = [
    "GIT_ITEM_NOT_FOUND",
    "GIT_UNRESOLVABLE_TO_COMMIT",
    "WrappedException",
    "parse_wrapped_exception",
    "ZERO_OBJECT_ID",
    "BranchObject",
    "FileLookupOutcome",
    "FileLookupStatus",
    "GitCommitRef",
    "GitRef",
    "MatchKind",
    "MergeStrategy",
    "PolicyConfiguration",
    "PolicyScope",
    "WebApiTeam",
]
