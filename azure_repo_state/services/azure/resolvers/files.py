"""
File content resolution.

The provider answers item requests for missing files or unresolvable branches
with a serialised exception in the response body instead of failing the
request, so every body is classified before it is returned as file content.
"""

import logging
from typing import Optional

from azure_repo_state.services.azure.api.git import GitOperations
from azure_repo_state.services.azure.models.schema import (
    GIT_ITEM_NOT_FOUND,
    GIT_UNRESOLVABLE_TO_COMMIT,
    parse_wrapped_exception,
)
from azure_repo_state.services.azure.models.types import FileLookupOutcome
from azure_repo_state.services.azure.util import get_branch_name_without_refsheads_prefix
from common.utils.streams import stream_to_string

logger = logging.getLogger(__name__)


def classify_item_text(
    content: str,
    file_path: Optional[str] = None,
    branch_name: Optional[str] = None,
) -> FileLookupOutcome:
    """Classify a drained item body.

    Args:
        content: Full response body
        file_path: Requested path, for logging
        branch_name: Requested branch, for logging

    Returns:
        FILE_MISSING or BRANCH_MISSING for the two known exception payloads,
        RAW_CONTENT for any other exception payload, FOUND otherwise
    """
    wrapped = parse_wrapped_exception(content)
    if wrapped is None:
        return FileLookupOutcome.found(content)

    if wrapped.type_key == GIT_ITEM_NOT_FOUND:
        logger.warning(f"Unable to find file {file_path}")
        return FileLookupOutcome.file_missing()

    if wrapped.type_key == GIT_UNRESOLVABLE_TO_COMMIT:
        logger.warning(f"Unable to find branch {branch_name}")
        return FileLookupOutcome.branch_missing()

    return FileLookupOutcome.raw_content(content)


class FileContentResolver:
    """Fetches single files at a branch."""

    def __init__(self, git: Optional[GitOperations] = None):
        """Initialize file content resolver.

        Args:
            git: Git operations (creates new if not provided)
        """
        self.git = git or GitOperations()

    async def lookup_file(
        self,
        repository_id: str,
        file_path: str,
        branch_name: Optional[str] = None,
    ) -> FileLookupOutcome:
        """Look up a file at a branch.

        Args:
            repository_id: Repository ID
            file_path: Path of the file
            branch_name: Branch name, with or without "refs/heads/"; the
                default branch when omitted

        Returns:
            FileLookupOutcome describing what was found
        """
        logger.debug(f"lookup_file(file_path={file_path}, branch_name={branch_name})")
        version = get_branch_name_without_refsheads_prefix(branch_name) if branch_name else None
        item = await self.git.get_item_text(
            repository_id,
            file_path,
            version=version,
            version_type="branch",
            recursion_level="none",
        )

        if item is None or not item.readable:
            return FileLookupOutcome.no_content()

        async with item:
            content = await stream_to_string(item)

        return classify_item_text(content, file_path=file_path, branch_name=branch_name)

    async def get_file_content(
        self,
        repository_id: str,
        file_path: str,
        branch_name: Optional[str] = None,
    ) -> Optional[str]:
        """Get the text of a file at a branch.

        Returns:
            File content, or None when the file or branch does not exist
        """
        outcome = await self.lookup_file(repository_id, file_path, branch_name)
        return outcome.content
