"""Fireline data models — groups, metadata payloads and policy enums."""

from fireline.models.groups import BUILTIN_GROUPS, DEFAULT_GROUPS, Group, as_group
from fireline.models.metadata import (
    AnalyticsMetadata,
    AnyMetadata,
    EmptyMetadata,
    MetadataTypeMismatchError,
    unwrap_metadata,
)
from fireline.models.policies import DispatchFailurePolicy, EncodingFailureAction

__all__ = [
    # groups
    "BUILTIN_GROUPS",
    "DEFAULT_GROUPS",
    "Group",
    "as_group",
    # metadata
    "AnalyticsMetadata",
    "AnyMetadata",
    "EmptyMetadata",
    "MetadataTypeMismatchError",
    "unwrap_metadata",
    # policies
    "DispatchFailurePolicy",
    "EncodingFailureAction",
]
