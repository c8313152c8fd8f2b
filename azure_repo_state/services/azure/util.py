"""
Branch name utilities.

Converts between short branch names ("main") and fully qualified ref names
("refs/heads/main") as expected by the different Azure DevOps endpoints.
"""

import logging
from typing import Optional

logger = logging.getLogger(__name__)

REFS_PREFIX = "refs/"
REFS_HEADS_PREFIX = "refs/heads/"


def get_new_branch_name(branch_name: Optional[str] = None) -> Optional[str]:
    """Qualify a branch name with "refs/heads/".

    Args:
        branch_name: Short or fully qualified branch name

    Returns:
        Fully qualified ref name, or None when no branch name was given
        (meaning the default branch)
    """
    if branch_name and not branch_name.startswith(REFS_HEADS_PREFIX):
        return f"{REFS_HEADS_PREFIX}{branch_name}"
    return branch_name or None


def _strip_prefix(branch_path: Optional[str], prefix: str) -> Optional[str]:
    if not branch_path:
        logger.error(f"Cannot strip '{prefix}' from empty branch name ({branch_path})")
        return None
    if not branch_path.startswith(prefix):
        logger.debug(
            f"The ref name should have started with '{prefix}' but it didn't. ({branch_path})"
        )
        return branch_path
    return branch_path[len(prefix):]


def get_branch_name_without_refs_prefix(branch_path: Optional[str]) -> Optional[str]:
    """Strip the leading "refs/" from a ref name ("refs/heads/x" -> "heads/x")."""
    return _strip_prefix(branch_path, REFS_PREFIX)


def get_branch_name_without_refsheads_prefix(branch_path: Optional[str]) -> Optional[str]:
    """Strip the leading "refs/heads/" from a ref name ("refs/heads/x" -> "x")."""
    return _strip_prefix(branch_path, REFS_HEADS_PREFIX)
