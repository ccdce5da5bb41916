"""Send notifications by branching on the type in client code.

This is the version the notification factory replaces: every caller has to
know each concrete channel, and an unknown type is only noticed here.
"""

from __future__ import annotations

import argparse
from pathlib import Path
import sys

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from factory_method.errors import UnknownVariantError
from factory_method.notifications import (
    EmailNotification,
    PushNotification,
    SMSNotification,
    create_notification,
)
from factory_method.utils.logging import configure_logging, get_logger

LOGGER = get_logger(__name__)


def send_without_factory(notification_type: str, message: str) -> bool:
    if notification_type == "email":
        EmailNotification().send(message)
    elif notification_type == "sms":
        SMSNotification().send(message)
    elif notification_type == "push":
        PushNotification().send(message)
    else:
        LOGGER.error("Unknown notification type: %s", notification_type)
        return False
    return True


def send_with_factory(notification_type: str, message: str) -> bool:
    try:
        notification = create_notification(notification_type)
    except UnknownVariantError as exc:
        LOGGER.error(str(exc))
        return False
    notification.send(message)
    return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compare client-side branching with the factory")
    parser.add_argument("types", nargs="*", default=["email", "sms", "push", "slack"])
    parser.add_argument("--message", default="Welcome to our app!")
    return parser


def main() -> None:
    args = build_parser().parse_args()
    configure_logging(structured=False)

    print("=== Without factory ===")
    for notification_type in args.types:
        send_without_factory(notification_type, args.message)

    # "slack" only works below: the factory knows about it, this script's branches do not.
    print("\n=== With factory ===")
    for notification_type in args.types:
        send_with_factory(notification_type, args.message)


if __name__ == "__main__":
    main()
