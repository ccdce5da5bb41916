"""Factory method for notification channels."""

from __future__ import annotations

import logging
from dataclasses import fields, is_dataclass
from typing import Any, Callable, Literal, Mapping, get_args

from ..errors import ConfigError, FactoryMethodError
from ..registry import VariantRegistry
from .base import EmailData, Notification, PushData, SlackData, SMSData
from .channels import EmailNotification, PushNotification, SlackNotification, SMSNotification

NotificationType = Literal["email", "sms", "push", "slack"]
NOTIFICATION_TYPES: tuple[str, ...] = get_args(NotificationType)

_LOGGER = logging.getLogger(__name__)


def _coerce_data(tag: str, data_cls: type, data: Any) -> Any:
    if data is None or isinstance(data, data_cls):
        return data
    if is_dataclass(data) or not isinstance(data, Mapping):
        raise ConfigError(tag, "data", reason=f"must be a {data_cls.__name__} or a mapping")
    values: dict[str, str] = {}
    for item in fields(data_cls):
        value = data.get(item.name)
        if not isinstance(value, str) or not value.strip():
            raise ConfigError(tag, item.name)
        values[item.name] = value
    return data_cls(**values)


def _builder(
    product: Callable[[Any], Notification[Any]], data_cls: type
) -> Callable[[str, Any], Notification[Any]]:
    def build(tag: str, data: Any) -> Notification[Any]:
        return product(_coerce_data(tag, data_cls, data))

    return build


_REGISTRY: VariantRegistry[Notification[Any]] = VariantRegistry(
    "notification",
    {
        "email": _builder(EmailNotification, EmailData),
        "sms": _builder(SMSNotification, SMSData),
        "push": _builder(PushNotification, PushData),
        "slack": _builder(SlackNotification, SlackData),
    },
    expected=NOTIFICATION_TYPES,
)


def create_notification(
    notification_type: str, data: Mapping[str, Any] | object | None = None
) -> Notification[Any]:
    """Return the notification channel registered under ``notification_type``.

    ``data`` is optional. When given it is either the channel's payload
    dataclass or a mapping carrying every one of its fields.

    Raises:
        UnknownVariantError: the type is not one of ``NOTIFICATION_TYPES``.
        ConfigError: the payload is missing a field or has the wrong shape.
    """

    build = _REGISTRY.builder_for(notification_type)
    return build(notification_type.strip().lower(), data)


def send_notification(
    notification_type: str, message: str, data: Mapping[str, Any] | object | None = None
) -> bool:
    """Create a channel and send ``message`` through it.

    Client-side helper: factory errors are logged and reported through the
    return value instead of propagating.
    """

    try:
        notification = create_notification(notification_type, data)
    except FactoryMethodError as exc:
        _LOGGER.error(str(exc), extra={"event": "notification.failed", "type": notification_type})
        return False
    notification.send(message)
    return True


__all__ = [
    "NOTIFICATION_TYPES",
    "NotificationType",
    "create_notification",
    "send_notification",
]
