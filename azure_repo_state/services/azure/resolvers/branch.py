"""
Branch resolution.

Finds the object a new branch should be created from, falling back to the
all-zero object id when the base branch does not exist yet.
"""

import logging
from typing import List, Optional

from azure_repo_state.services.azure.api.git import GitOperations
from azure_repo_state.services.azure.models.types import (
    ZERO_OBJECT_ID,
    BranchObject,
    GitRef,
)
from azure_repo_state.services.azure.util import (
    get_branch_name_without_refs_prefix,
    get_new_branch_name,
)

logger = logging.getLogger(__name__)


class BranchResolver:
    """Resolves refs and branch base objects of a repository."""

    def __init__(self, git: Optional[GitOperations] = None):
        """Initialize branch resolver.

        Args:
            git: Git operations (creates new if not provided)
        """
        self.git = git or GitOperations()

    async def get_refs(
        self, repository_id: str, branch_name: Optional[str] = None
    ) -> List[GitRef]:
        """List refs of a repository, optionally filtered by a branch prefix.

        Args:
            repository_id: Repository ID
            branch_name: Branch or ref name prefix; all refs when omitted

        Returns:
            Refs in provider order
        """
        logger.debug(f"get_refs({repository_id}, {branch_name})")
        ref_filter = get_branch_name_without_refs_prefix(branch_name) if branch_name else None
        return await self.git.get_refs(repository_id, filter=ref_filter)

    async def resolve_branch_object(
        self,
        repository_id: str,
        branch_name: str,
        from_branch: Optional[str] = None,
    ) -> BranchObject:
        """Resolve the base object for creating or updating a branch.

        When no ref matches the base branch the result carries the all-zero
        object id, which the provider treats as "create with an initial
        commit". Otherwise the first ref in provider order is used; the
        provider may return several refs sharing the prefix.

        Args:
            repository_id: Repository ID
            branch_name: Branch to create or update
            from_branch: Base branch; the default branch when omitted

        Returns:
            BranchObject with the qualified branch name and base object id

        Raises:
            ValueError: If branch_name is empty
        """
        name = get_new_branch_name(branch_name)
        if not name:
            raise ValueError("branch_name is required to resolve a branch object")

        from_branch_name = get_new_branch_name(from_branch)
        refs = await self.get_refs(repository_id, from_branch_name)

        if not refs:
            logger.debug("resolve_branch_object without a valid base branch, so initial commit")
            return BranchObject(name=name, old_object_id=ZERO_OBJECT_ID)

        return BranchObject(name=name, old_object_id=refs[0].object_id)
