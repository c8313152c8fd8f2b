"""
Merge strategy resolution from branch policies.

The merge strategy policy of a project lists the scopes (repository and ref
rules) it applies to and, in its settings, one boolean flag per allowed
strategy. The strategy for a branch is taken from the first configuration with
a scope matching that branch.
"""

import json
import logging
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple

from azure_repo_state.services.azure.api.policy import PolicyOperations
from azure_repo_state.services.azure.models.types import (
    MatchKind,
    MergeStrategy,
    PolicyConfiguration,
    PolicyScope,
)
from azure_repo_state.services.azure.util import REFS_HEADS_PREFIX

logger = logging.getLogger(__name__)

# Policy type id of "Require a merge strategy"
MERGE_POLICY_TYPE_ID = "fa4e907d-c16b-4a4c-9dfa-4916e5d171ab"

DEFAULT_MERGE_STRATEGY = MergeStrategy.NO_FAST_FORWARD

# Settings flags checked in this order; the first truthy one wins.
MERGE_STRATEGY_FLAGS: Tuple[Tuple[str, MergeStrategy], ...] = (
    ("allowNoFastForward", MergeStrategy.NO_FAST_FORWARD),
    ("allowSquash", MergeStrategy.SQUASH),
    ("allowRebase", MergeStrategy.REBASE),
    ("allowRebaseMerge", MergeStrategy.REBASE_MERGE),
)


def is_relevant_scope(
    scope: PolicyScope,
    repository_id: str,
    branch_ref: Optional[str] = None,
    default_branch: Optional[str] = None,
) -> bool:
    """Check whether a policy scope applies to a branch of a repository.

    Args:
        scope: Policy scope
        repository_id: Repository ID
        branch_ref: Fully qualified target ref; any branch when omitted
        default_branch: Short name of the repository's default branch

    Returns:
        True if the scope matches
    """
    if scope.match_kind == MatchKind.DEFAULT_BRANCH and (
        not branch_ref
        or (default_branch and branch_ref == f"{REFS_HEADS_PREFIX}{default_branch}")
    ):
        return True

    if scope.repository_id is not None and scope.repository_id != repository_id:
        return False

    if not branch_ref:
        return True

    if scope.ref_name is None:
        return False

    if scope.match_kind == MatchKind.EXACT:
        return scope.ref_name == branch_ref

    # plain string prefix, "refs/heads/release" also matches "refs/heads/releaseX"
    return branch_ref.startswith(scope.ref_name)


def find_matching_settings(
    configurations: Iterable[PolicyConfiguration],
    repository_id: str,
    branch_ref: Optional[str] = None,
    default_branch: Optional[str] = None,
) -> Optional[Dict[str, Any]]:
    """Return the settings of the first configuration with a relevant scope.

    Configurations are scanned in provider order.
    """
    for configuration in configurations:
        if any(
            is_relevant_scope(scope, repository_id, branch_ref, default_branch)
            for scope in configuration.scopes
        ):
            return configuration.settings
    return None


def derive_merge_strategy(
    settings: Optional[Dict[str, Any]],
    flag_order: Sequence[Tuple[str, MergeStrategy]] = MERGE_STRATEGY_FLAGS,
) -> MergeStrategy:
    """Derive the merge strategy from policy settings.

    Flag names are compared case-insensitively, so "AllowSquash" and
    "allowSquash" are the same flag.

    Args:
        settings: Matched policy settings, or None
        flag_order: (flag name, strategy) pairs in priority order

    Returns:
        Strategy of the first truthy flag, NoFastForward when there is none
    """
    if not settings:
        return DEFAULT_MERGE_STRATEGY

    try:
        flags = {str(key).lower(): value for key, value in settings.items()}
        for flag_name, strategy in flag_order:
            if flags.get(flag_name.lower()):
                return strategy
    except (AttributeError, TypeError, ValueError) as e:
        logger.debug(f"Could not derive merge strategy from policy settings: {e}")

    return DEFAULT_MERGE_STRATEGY


class PolicyMergeStrategyResolver:
    """Resolves the merge strategy that applies to a target branch."""

    def __init__(self, policies: Optional[PolicyOperations] = None):
        """Initialize merge strategy resolver.

        Args:
            policies: Policy operations (creates new if not provided)
        """
        self.policies = policies or PolicyOperations()

    async def resolve_merge_method(
        self,
        repository_id: str,
        project: str,
        branch_ref: Optional[str] = None,
        default_branch: Optional[str] = None,
        flag_order: Sequence[Tuple[str, MergeStrategy]] = MERGE_STRATEGY_FLAGS,
    ) -> MergeStrategy:
        """Resolve the merge strategy for a branch.

        Args:
            repository_id: Repository ID
            project: Project ID or name
            branch_ref: Fully qualified target ref; any branch when omitted
            default_branch: Short name of the repository's default branch
            flag_order: (flag name, strategy) pairs in priority order

        Returns:
            Merge strategy, NoFastForward when no policy decides it
        """
        logger.debug(
            f"resolve_merge_method(branch_ref={branch_ref}, default_branch={default_branch})"
        )
        configurations = await self.policies.get_policy_configurations(
            project, policy_type=MERGE_POLICY_TYPE_ID
        )
        settings = find_matching_settings(
            configurations, repository_id, branch_ref, default_branch
        )

        logger.debug(
            f"resolve_merge_method(branch_ref={branch_ref}) determining merge method "
            f"from matched policy:\n{json.dumps(settings, indent=4, default=str)}"
        )

        return derive_merge_strategy(settings, flag_order)
