"""Notification product family."""

from __future__ import annotations

from .base import EmailData, Notification, PushData, SlackData, SMSData
from .channels import EmailNotification, PushNotification, SlackNotification, SMSNotification
from .factory import NOTIFICATION_TYPES, NotificationType, create_notification, send_notification

__all__ = [
    "EmailData",
    "EmailNotification",
    "NOTIFICATION_TYPES",
    "Notification",
    "NotificationType",
    "PushData",
    "PushNotification",
    "SMSData",
    "SMSNotification",
    "SlackData",
    "SlackNotification",
    "create_notification",
    "send_notification",
]
