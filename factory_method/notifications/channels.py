"""Concrete notification channels."""

from __future__ import annotations

import logging

from .base import EmailData, Notification, PushData, SlackData, SMSData

_LOGGER = logging.getLogger(__name__)


class EmailNotification(Notification[EmailData]):
    def send(self, message: str) -> None:
        data = self.get_data()
        if data is None:
            _LOGGER.info("Sending email: %s", message, extra={"event": "notification.email"})
            return
        _LOGGER.info(
            "Email to %s: %s | %s",
            data.to,
            data.subject,
            message,
            extra={"event": "notification.email", "to": data.to},
        )


class SMSNotification(Notification[SMSData]):
    def send(self, message: str) -> None:
        data = self.get_data()
        if data is None:
            _LOGGER.info("Sending SMS: %s", message, extra={"event": "notification.sms"})
            return
        _LOGGER.info(
            "SMS to %s: %s",
            data.phone_number,
            message,
            extra={"event": "notification.sms", "phone_number": data.phone_number},
        )


class PushNotification(Notification[PushData]):
    def send(self, message: str) -> None:
        data = self.get_data()
        if data is None:
            _LOGGER.info("Sending push: %s", message, extra={"event": "notification.push"})
            return
        _LOGGER.info(
            "Push to %s: %s | %s",
            data.device_id,
            data.title,
            message,
            extra={"event": "notification.push", "device_id": data.device_id},
        )


class SlackNotification(Notification[SlackData]):
    def send(self, message: str) -> None:
        data = self.get_data()
        if data is None:
            _LOGGER.info("Sending Slack message: %s", message, extra={"event": "notification.slack"})
            return
        _LOGGER.info(
            "Slack to #%s: %s",
            data.channel.lstrip("#"),
            message,
            extra={"event": "notification.slack", "channel": data.channel},
        )


__all__ = [
    "EmailNotification",
    "PushNotification",
    "SMSNotification",
    "SlackNotification",
]
