"""Base contract and payload types for notifications."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar


@dataclass(frozen=True, slots=True)
class EmailData:
    to: str
    subject: str


@dataclass(frozen=True, slots=True)
class SMSData:
    phone_number: str


@dataclass(frozen=True, slots=True)
class PushData:
    device_id: str
    title: str


@dataclass(frozen=True, slots=True)
class SlackData:
    channel: str


DataT = TypeVar("DataT")


class Notification(ABC, Generic[DataT]):
    """Delivers a message over one channel."""

    def __init__(self, data: DataT | None = None) -> None:
        self._data = data

    @abstractmethod
    def send(self, message: str) -> None:
        """Deliver ``message``. Implementations log the delivery and never raise."""

    def get_data(self) -> DataT | None:
        """Return the channel payload the notification was built with."""
        return self._data
