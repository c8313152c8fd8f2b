"""Pytest configuration for tests.

Sets up Python path and fixtures for all tests.
"""

import sys
from pathlib import Path
from typing import List, Optional, Union
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add project root to Python path so imports work correctly
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from azure_repo_state.services.azure.models.types import GitRef  # noqa: E402


class FakeItemStream:
    """Stand-in for an open item-text stream."""

    def __init__(
        self,
        chunks: Optional[List[Union[bytes, str]]] = None,
        readable: bool = True,
        error: Optional[Exception] = None,
    ):
        self._chunks = chunks or []
        self._readable = readable
        self._error = error
        self.closed = False

    @property
    def readable(self) -> bool:
        return self._readable and not self.closed

    async def _iterate(self):
        for chunk in self._chunks:
            yield chunk
        if self._error:
            raise self._error

    def __aiter__(self):
        return self._iterate()

    async def aclose(self):
        self.closed = True

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()


@pytest.fixture
def make_stream():
    """Factory for fake item-text streams."""

    def _make(text: Optional[str] = None, **kwargs) -> FakeItemStream:
        chunks = kwargs.pop("chunks", None)
        if chunks is None and text is not None:
            chunks = [text.encode("utf-8")]
        return FakeItemStream(chunks=chunks, **kwargs)

    return _make


@pytest.fixture
def mock_git_operations():
    """Git operations with async API methods mocked out."""
    git = MagicMock()
    git.get_refs = AsyncMock(return_value=[])
    git.get_item_text = AsyncMock(return_value=None)
    git.get_commit = AsyncMock()
    return git


@pytest.fixture
def mock_policy_operations():
    """Policy operations with async API methods mocked out."""
    policies = MagicMock()
    policies.get_policy_configurations = AsyncMock(return_value=[])
    return policies


@pytest.fixture
def mock_core_operations():
    """Core operations with async API methods mocked out."""
    core = MagicMock()
    core.get_teams = AsyncMock(return_value=[])
    return core


@pytest.fixture
def make_ref():
    """Factory for GitRef payloads."""

    def _make(name: str, object_id: str) -> GitRef:
        return GitRef.model_validate({"name": name, "objectId": object_id})

    return _make
