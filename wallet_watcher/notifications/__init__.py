"""Notification channels."""

from wallet_watcher.notifications.webhook import WebhookNotifier

__all__ = ["WebhookNotifier"]
