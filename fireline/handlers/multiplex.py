"""Multiplex handlers — fan one event out to every handler whose groups match.

Each registered handler is stored once, keyed by its erased identity, with
the union of every group it was registered for.  ``track`` delivers to each
entry whose group set intersects the event's group; the rest are skipped.

Delivery is synchronous and completes before ``track`` returns.  Order
across handlers is unspecified.

The registry is guarded by a re-entrant lock, so handlers may be registered
from other threads (or from inside a handler) while events are tracked.
``track`` works on a snapshot taken under the lock and calls handlers
outside it.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from datetime import datetime
from typing import Any

from fireline.config import settings
from fireline.events.base import EventNameMismatchError
from fireline.handlers.erased import HashableAnyHandler
from fireline.models.groups import Group, GroupLike, as_group
from fireline.models.policies import DispatchFailurePolicy

logger = logging.getLogger(__name__)


class MultiplexDispatchError(RuntimeError):
    """Raised after fan-out when one or more handlers failed.

    ``failures`` holds ``(handler, exception)`` pairs in delivery order.
    """

    def __init__(self, event_name: Any, failures: list[tuple[Any, Exception]]) -> None:
        self.event_name = event_name
        self.failures = failures
        super().__init__(
            f"{len(failures)} handler(s) failed for event {event_name!r}: "
            + "; ".join(f"{type(handler).__name__}: {exc}" for handler, exc in failures)
        )


class MultiplexHandler:
    """Routes events to registered handlers by group intersection.

    Sub-handlers receive the event and payload exactly as fired.

    Parameters
    ----------
    name_type:
        Event name type this multiplexer accepts.  Registered handlers that
        declare an incompatible ``event_name_type`` are rejected.
    failure_policy:
        What to do when a sub-handler raises.  Defaults to
        ``settings.multiplex_failure_policy``.
        Plain values such as ``"collect"`` are accepted; unknown ones raise
        ``ValueError``.

    Usage
    -----
    >>> from fireline.testing import RecordingHandler
    >>> multiplex = MultiplexHandler()
    >>> actions = RecordingHandler()
    >>> _ = multiplex.register(actions, Group.ACTION)
    >>> len(multiplex)
    1
    """

    def __init__(
        self,
        name_type: type | None = None,
        failure_policy: DispatchFailurePolicy | str | None = None,
    ) -> None:
        self.event_name_type = name_type
        self.failure_policy = DispatchFailurePolicy(
            failure_policy
            if failure_policy is not None
            else settings.multiplex_failure_policy
        )
        self._handlers: dict[HashableAnyHandler, Group] = {}
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------

    def register(self, handler: Any, group: GroupLike) -> MultiplexHandler:
        """Register *handler* for *group*.

        Registering the same handler again unions *group* into its entry.

        Raises
        ------
        TypeError
            If *handler* is not hashable.
        EventNameMismatchError
            If the handler's name type cannot accept this multiplexer's names.
        """
        self._check_name_type(handler)
        key = HashableAnyHandler(handler)
        bits = as_group(group)
        with self._lock:
            existing = self._handlers.get(key)
            if existing is None:
                self._handlers[key] = bits
            else:
                self._handlers[key] = existing | bits
            registered = self._handlers[key]
        logger.info(
            "Registered handler %s for groups %s",
            type(handler).__name__,
            "|".join(registered.labels()) or int(registered),
        )
        return self

    def unregister(self, handler: Any) -> bool:
        """Remove *handler*.  Returns whether it was registered."""
        key = HashableAnyHandler(handler)
        with self._lock:
            removed = self._handlers.pop(key, None) is not None
        if removed:
            logger.info("Unregistered handler %s", type(handler).__name__)
        return removed

    def groups_for(self, handler: Any) -> Group | None:
        """Return the groups *handler* is registered for, or ``None``."""
        with self._lock:
            return self._handlers.get(HashableAnyHandler(handler))

    @property
    def registered_handlers(self) -> list[Any]:
        """Return the registered handlers (unwrapped)."""
        with self._lock:
            return [key.wrapped for key in self._handlers]

    def __len__(self) -> int:
        with self._lock:
            return len(self._handlers)

    def __contains__(self, handler: object) -> bool:
        return self.groups_for(handler) is not None

    def __iter__(self) -> Iterator[tuple[Any, Group]]:
        for key, group in self._snapshot():
            yield key.wrapped, group

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def track(self, event: Any, at: datetime, data: Any) -> None:
        """Deliver to every handler whose groups intersect ``event.group``.

        Raises
        ------
        MultiplexDispatchError
            Under ``COLLECT``, after every matching handler was called, if any
            of them failed.
        Exception
            Under ``FAIL_FAST``, the first handler failure, unchanged.
        """
        event_group = as_group(event.group)
        failures: list[tuple[Any, Exception]] = []
        delivered = 0

        for key, group in self._snapshot():
            if group.is_disjoint(event_group):
                continue
            try:
                self._deliver(key, event, at, data)
                delivered += 1
            except Exception as exc:  # noqa: BLE001
                if self.failure_policy is DispatchFailurePolicy.FAIL_FAST:
                    raise
                logger.error(
                    "Handler %s failed for event %r: %s",
                    type(key.wrapped).__name__,
                    event.name,
                    exc,
                )
                failures.append((key.wrapped, exc))

        logger.debug(
            "Event %r (group=%s): delivered to %d handler(s), %d failed",
            event.name,
            event_group,
            delivered,
            len(failures),
        )

        if failures and self.failure_policy is DispatchFailurePolicy.COLLECT:
            raise MultiplexDispatchError(event.name, failures)

    def _deliver(self, key: HashableAnyHandler, event: Any, at: datetime, data: Any) -> None:
        key.wrapped.track(event, at, data)

    def _snapshot(self) -> list[tuple[HashableAnyHandler, Group]]:
        with self._lock:
            return list(self._handlers.items())

    def _check_name_type(self, handler: Any) -> None:
        own = self.event_name_type
        theirs = getattr(handler, "event_name_type", None)
        if own is None or theirs is None:
            return
        if not issubclass(own, theirs):
            raise EventNameMismatchError(
                f"{type(handler).__name__} tracks {theirs.__qualname__} event names; "
                f"this multiplexer routes {own.__qualname__}"
            )


class MultiplexAnyHandler(MultiplexHandler):
    """A ``MultiplexHandler`` whose sub-handlers receive erased values.

    Every delivered event is an ``AnyEvent`` and every payload an
    ``AnyMetadata``.
    """

    def _deliver(self, key: HashableAnyHandler, event: Any, at: datetime, data: Any) -> None:
        key.track(event, at, data)
