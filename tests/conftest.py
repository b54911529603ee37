from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest


class FakeDocRef:
    def __init__(self, path: str):
        self.path = path
        self.deleted = 0

    def delete(self) -> None:
        self.deleted += 1


class FakeSnap:
    def __init__(self, data: dict[str, Any] | None, reference: FakeDocRef | None = None):
        self._data = None if data is None else dict(data)
        self.reference = reference

    def to_dict(self) -> dict[str, Any] | None:
        return None if self._data is None else dict(self._data)


class FakeMessenger:
    """Records every message; raises `error` instead of sending when set."""

    def __init__(self, response: str = "projects/demo/messages/1", error: Exception | None = None):
        self.response = response
        self.error = error
        self.sent: list[Any] = []

    def send(self, message):
        self.sent.append(message)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def messenger() -> FakeMessenger:
    return FakeMessenger()


@pytest.fixture
def request_ref() -> FakeDocRef:
    return FakeDocRef("notificationRequests/req-1")


def created_event(request_id: str, data: dict[str, Any] | None, ref: FakeDocRef) -> SimpleNamespace:
    return SimpleNamespace(params={"requestId": request_id}, data=FakeSnap(data, ref))


def updated_event(user_id: str, before: dict[str, Any] | None, after: dict[str, Any] | None) -> SimpleNamespace:
    change = SimpleNamespace(before=FakeSnap(before), after=FakeSnap(after))
    return SimpleNamespace(params={"userId": user_id}, data=change)
