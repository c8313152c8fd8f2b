"""
Shared types and models for Azure DevOps operations.

Provider payloads are pydantic models accepting the camelCase field names used
by the Azure DevOps REST API. Results computed locally are plain dataclasses.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

ZERO_OBJECT_ID = "0000000000000000000000000000000000000000"


class MergeStrategy(IntEnum):
    """Pull request merge strategy, numbered as the provider numbers it."""

    NO_FAST_FORWARD = 1
    SQUASH = 2
    REBASE = 3
    REBASE_MERGE = 4


class MatchKind(str, Enum):
    PREFIX = "Prefix"
    EXACT = "Exact"
    DEFAULT_BRANCH = "DefaultBranch"


class FileLookupStatus(str, Enum):
    FOUND = "found"
    FILE_MISSING = "file_missing"
    BRANCH_MISSING = "branch_missing"
    RAW_CONTENT = "raw_content"
    NO_CONTENT = "no_content"


class AzureModel(BaseModel):
    """Base for provider payloads: camelCase aliases, unknown fields kept."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="allow",
    )


class IdentityRef(AzureModel):
    id: Optional[str] = None
    display_name: Optional[str] = Field(default=None, alias="displayName")
    unique_name: Optional[str] = Field(default=None, alias="uniqueName")


class GitRef(AzureModel):
    name: str
    object_id: str = Field(..., alias="objectId")
    creator: Optional[IdentityRef] = None
    is_locked: Optional[bool] = Field(default=None, alias="isLocked")
    url: Optional[str] = None


class GitUserDate(AzureModel):
    name: Optional[str] = None
    email: Optional[str] = None
    date: Optional[str] = None


class GitCommitRef(AzureModel):
    commit_id: str = Field(..., alias="commitId")
    comment: Optional[str] = None
    author: Optional[GitUserDate] = None
    committer: Optional[GitUserDate] = None
    parents: List[str] = Field(default_factory=list)
    url: Optional[str] = None


class WebApiTeam(AzureModel):
    id: str
    name: str
    description: Optional[str] = None
    url: Optional[str] = None
    project_id: Optional[str] = Field(default=None, alias="projectId")
    project_name: Optional[str] = Field(default=None, alias="projectName")


class PolicyScope(AzureModel):
    """Where a branch policy applies.

    A null repository_id means every repository in the project. Match kinds
    are read case-insensitively; anything that is not Exact or DefaultBranch
    is a prefix match.
    """

    repository_id: Optional[str] = Field(default=None, alias="repositoryId")
    ref_name: Optional[str] = Field(default=None, alias="refName")
    match_kind: MatchKind = Field(default=MatchKind.PREFIX, alias="matchKind")

    @field_validator("match_kind", mode="before")
    @classmethod
    def normalize_match_kind(cls, v: Any) -> MatchKind:
        """Map provider match kind strings onto MatchKind."""
        if isinstance(v, MatchKind):
            return v
        if isinstance(v, str):
            for kind in MatchKind:
                if kind.value.lower() == v.lower():
                    return kind
        return MatchKind.PREFIX


class PolicyType(AzureModel):
    id: str
    display_name: Optional[str] = Field(default=None, alias="displayName")


class PolicyConfiguration(AzureModel):
    id: Optional[int] = None
    is_enabled: bool = Field(default=True, alias="isEnabled")
    is_blocking: bool = Field(default=False, alias="isBlocking")
    type: Optional[PolicyType] = None
    settings: Dict[str, Any] = Field(default_factory=dict)

    @property
    def scopes(self) -> List[PolicyScope]:
        """Scopes listed in the policy settings."""
        return [
            PolicyScope.model_validate(scope)
            for scope in self.settings.get("scope") or []
        ]


@dataclass
class BranchObject:
    name: str
    old_object_id: str


@dataclass(frozen=True)
class FileLookupOutcome:
    """Result of looking up a file at a branch.

    Only FOUND and RAW_CONTENT outcomes carry content.
    """

    status: FileLookupStatus
    content: Optional[str] = None

    @classmethod
    def found(cls, content: str) -> "FileLookupOutcome":
        return cls(FileLookupStatus.FOUND, content)

    @classmethod
    def raw_content(cls, content: str) -> "FileLookupOutcome":
        return cls(FileLookupStatus.RAW_CONTENT, content)

    @classmethod
    def file_missing(cls) -> "FileLookupOutcome":
        return cls(FileLookupStatus.FILE_MISSING)

    @classmethod
    def branch_missing(cls) -> "FileLookupOutcome":
        return cls(FileLookupStatus.BRANCH_MISSING)

    @classmethod
    def no_content(cls) -> "FileLookupOutcome":
        return cls(FileLookupStatus.NO_CONTENT)
