"""Sample events and payloads shared across the test suite."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from fireline.events import AnalyticsConfiguration, EnumEvent, EventBase, GlobalMetadata, SomeEvent
from fireline.models import Group


class LoginEvent(EnumEvent):
    LOGIN_SCREEN_VIEWED = "loginScreenViewed"
    LOGIN_ATTEMPTED = "loginAttempted"
    LOGIN_SUCCEEDED = "loginSucceeded"

    @property
    def group(self) -> Group:
        if self is LoginEvent.LOGIN_SCREEN_VIEWED:
            return Group.STATE
        return Group.ACTION


class LoginFailureReason(GlobalMetadata):
    reason: str

    @property
    def event(self) -> SomeEvent[str, LoginFailureReason]:
        return SomeEvent[str, LoginFailureReason]("loginFailed")


class MessageSelected(GlobalMetadata):
    index: int

    @property
    def event(self) -> SomeEvent[str, MessageSelected]:
        return SomeEvent[str, MessageSelected]("messageSelected")


class MessageDeleted(GlobalMetadata):
    index: int
    read: bool

    @property
    def event(self) -> SomeEvent[str, MessageDeleted]:
        return SomeEvent[str, MessageDeleted]("messageDeleted")


class UserProfileData(GlobalMetadata):
    name: str
    email: str

    @property
    def event(self) -> SomeEvent[str, UserProfileData]:
        return SomeEvent[str, UserProfileData].some(group=Group.INFO)


class UserIdData(GlobalMetadata):
    id: str

    @property
    def event(self) -> SomeEvent[str, UserIdData]:
        return SomeEvent[str, UserIdData].some(group=Group.SENSITIVE)


class SessionEndedEvent(EventBase):
    """A hand-written event class that builds without arguments."""

    name = "sessionEnded"

    @property
    def group(self) -> Group:
        return Group.NOTICE

    @classmethod
    def metadata_type(cls) -> type:
        return SessionEnded


class SessionEnded(GlobalMetadata):
    duration: float

    event_type = SessionEndedEvent


class CountingConfiguration(AnalyticsConfiguration):
    """Forwards like the default configuration and counts what it processed."""

    def __init__(self) -> None:
        self.processed: list[Any] = []

    def process(self, event, data, handler, at: datetime | None = None) -> None:
        self.processed.append(event.name)
        super().process(event, data, handler, at)


class SuppressingConfiguration(AnalyticsConfiguration):
    """Drops every event."""

    def process(self, event, data, handler, at: datetime | None = None) -> None:
        return None
