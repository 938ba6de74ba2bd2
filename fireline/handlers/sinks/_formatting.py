"""Shared formatting helpers for the console and logging sinks."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from fireline.models.groups import Group

if TYPE_CHECKING:
    from fireline.handlers.sinks import TrackedEvent


def format_group_label(group: Group) -> str:
    """Return ``"action|state"``-style labels; unnamed bits print as hex.

    Examples
    --------
    >>> format_group_label(Group.ACTION | Group.STATE)
    'action|state'
    >>> format_group_label(Group(1 << 12))
    '0x1000'
    """
    labels = group.labels()
    named = 0
    for label in labels:
        named |= int(Group[label.upper()])
    extra = int(group) & ~int(named)
    if extra:
        labels.append(hex(extra))
    return "|".join(labels) or "none"


def format_payload(record: TrackedEvent) -> str:
    """Render a record's payload as compact, key-sorted JSON."""
    return json.dumps(record.payload, sort_keys=True, separators=(",", ":"), default=str)
