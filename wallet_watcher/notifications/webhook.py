"""Webhook notifications for incoming funds."""

import logging
from typing import Optional

import requests

logger = logging.getLogger(__name__)


class WebhookNotifier:
    """Posts messages to a Discord-compatible webhook."""

    def __init__(self, url: Optional[str], timeout: float = 10.0):
        """Initialize the notifier.

        Args:
            url: Webhook URL; notifications are skipped when empty
            timeout: Request timeout in seconds
        """
        self.url = url or None
        self.timeout = timeout

    @property
    def enabled(self) -> bool:
        return self.url is not None

    def send(self, message: str) -> bool:
        """Send a message to the webhook.

        Args:
            message: Text posted as the "content" field

        Returns:
            True if the webhook accepted the message, False otherwise
        """
        if not self.enabled:
            return False

        try:
            response = requests.post(
                self.url,
                json={"content": message},
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
            response.raise_for_status()
            logger.info("📤 Webhook notification sent")
            return True
        except requests.exceptions.RequestException as e:
            logger.error(f"❌ Webhook failed: {e}")
            return False
        except Exception as e:
            # Malformed URLs can fail inside urllib3 before a request exists
            logger.error(f"❌ Webhook failed: {e}")
            return False
