"""
NOTIFICATION SERVICE

Thin Slack notification sender (incoming webhook).
No DB access. No business logic.
"""

import logging
from typing import Optional

import httpx

from mvp_screener.config import settings

_logger = logging.getLogger(__name__)


class SlackNotifier:
    """
    One-shot message sink.

    Delivery failures are logged and reported through the return value;
    they never raise into the caller.
    """

    def __init__(
        self,
        webhook_url: Optional[str] = None,
        enabled: Optional[bool] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.webhook_url = webhook_url if webhook_url is not None else settings.SLACK_WEBHOOK_URL
        self.enabled = enabled if enabled is not None else settings.SLACK_ENABLED
        self.timeout = timeout if timeout is not None else settings.SLACK_TIMEOUT_SECONDS
        self._transport = transport

    async def send(self, text: str) -> bool:
        """Post a message to Slack. Returns True when Slack accepted it."""
        if not self.enabled:
            _logger.info("Slack notification disabled (SLACK_ENABLED=false)")
            return False

        if not self.webhook_url:
            _logger.warning("Slack webhook not set; skipping notification")
            return False

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.post(self.webhook_url, json={"text": text})
                resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            _logger.error(f"Slack rejected notification: HTTP {exc.response.status_code}")
            return False
        except httpx.HTTPError as exc:
            _logger.error(f"Slack notification failed: {exc.__class__.__name__}: {exc}")
            return False

        _logger.info("📱 Slack: screening result sent")
        return True
