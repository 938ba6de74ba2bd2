"""Event groups — bitset classification used for routing.

Every event carries a ``Group``.  Handlers registered on a multiplexer are
matched against it by intersection: any shared bit means delivery.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntFlag
from functools import reduce
from typing import Any, Union

GroupLike = Union["Group", int, Iterable[Union["Group", int]]]


class Group(IntFlag):
    """Classification bits for analytics events.

    Bits above ``SENSITIVE`` are left for user-defined groups::

        CHECKOUT = Group(1 << 12)
        Group.ACTION | CHECKOUT
    """

    TRACE = 1 << 0
    DEBUG = 1 << 1
    INFO = 1 << 2
    ACTION = 1 << 3
    STATE = 1 << 4
    NOTICE = 1 << 5
    WARNING = 1 << 6
    ERROR = 1 << 7
    CRITICAL = 1 << 8
    SENSITIVE = 1 << 9

    def union(self, *others: GroupLike) -> Group:
        """Return a group with every bit set in ``self`` or any of *others*."""
        result = self
        for other in others:
            result = result | as_group(other)
        return Group(result)

    def intersection(self, *others: GroupLike) -> Group:
        """Return a group with only the bits shared by ``self`` and all *others*."""
        result = self
        for other in others:
            result = result & as_group(other)
        return Group(result)

    def is_disjoint(self, other: GroupLike) -> bool:
        return not (self & as_group(other))

    def contains(self, other: GroupLike) -> bool:
        """Whether every bit of *other* is also set in ``self``."""
        bits = as_group(other)
        return (self & bits) == bits

    @property
    def is_empty(self) -> bool:
        return int(self) == 0

    def labels(self) -> list[str]:
        """Names of the built-in bits set in this group, lowest bit first."""
        return [member.name.lower() for member in BUILTIN_GROUPS if self & member]


# Bit order, lowest first.
BUILTIN_GROUPS: tuple[Group, ...] = (
    Group.TRACE,
    Group.DEBUG,
    Group.INFO,
    Group.ACTION,
    Group.STATE,
    Group.NOTICE,
    Group.WARNING,
    Group.ERROR,
    Group.CRITICAL,
    Group.SENSITIVE,
)

DEFAULT_GROUPS: Group = reduce(lambda acc, bit: acc | bit, BUILTIN_GROUPS, Group(0))


def as_group(value: Any) -> Group:
    """Coerce a ``Group``, an ``int`` or an iterable of either into a ``Group``.

    Raises
    ------
    ValueError
        For negative integers or values that are neither ints nor iterables.
    """
    if isinstance(value, Group):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Not a group value: {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"Group bits must be non-negative, got {value}")
        return Group(value)
    if isinstance(value, str):
        try:
            return Group[value.upper()]
        except KeyError as exc:
            raise ValueError(f"Unknown group name: {value!r}") from exc
    if isinstance(value, Iterable):
        return reduce(lambda acc, item: acc | as_group(item), value, Group(0))
    raise ValueError(f"Not a group value: {value!r}")
