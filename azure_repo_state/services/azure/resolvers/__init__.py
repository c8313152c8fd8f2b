"""
Azure DevOps Resolvers Module

Decision logic on top of the raw API operations:
- Branch base objects
- File content classification
- Merge strategy from branch policies
- Paginated team listing
"""

from azure_repo_state.services.azure.resolvers.branch import BranchResolver
from azure_repo_state.services.azure.resolvers.files import (
    FileContentResolver,
    classify_item_text,
)
from azure_repo_state.services.azure.resolvers.merge_strategy import (
    DEFAULT_MERGE_STRATEGY,
    MERGE_POLICY_TYPE_ID,
    MERGE_STRATEGY_FLAGS,
    PolicyMergeStrategyResolver,
    derive_merge_strategy,
    find_matching_settings,
    is_relevant_scope,
)
from azure_repo_state.services.azure.resolvers.teams import TeamLister

__all__ = [
    "BranchResolver",
    "FileContentResolver",
    "classify_item_text",
    "DEFAULT_MERGE_STRATEGY",
    "MERGE_POLICY_TYPE_ID",
    "MERGE_STRATEGY_FLAGS",
    "PolicyMergeStrategyResolver",
    "derive_merge_strategy",
    "find_matching_settings",
    "is_relevant_scope",
    "TeamLister",
]
