"""Slack incoming-webhook adapter — implements the FaultCodeNotifier interface.

Posts a Block Kit message describing the report and linking to its detail
page. Uses httpx for the async POST.
"""

import logging

import httpx

from fieldreports.application.interfaces import FaultCodeNotifier
from fieldreports.domain.entities import FaultCodeEvent
from fieldreports.domain.exceptions import NotificationError

logger = logging.getLogger(__name__)


class SlackFaultCodeNotifier(FaultCodeNotifier):
    """Infrastructure adapter — sends fault code alerts to a Slack channel.

    When no webhook URL is configured the alert is skipped with a warning
    rather than treated as an error.
    """

    def __init__(
        self,
        webhook_url: str,
        public_base_url: str = "http://localhost:3000",
        timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._webhook_url = webhook_url.strip()
        self._public_base_url = public_base_url.rstrip("/")
        self._timeout = timeout
        self._http_client = http_client

    @property
    def channel_name(self) -> str:
        return "slack"

    def report_url(self, report_id: int) -> str:
        return f"{self._public_base_url}/reports/{report_id}"

    def build_message(self, event: FaultCodeEvent) -> dict:
        """Build the Slack Block Kit payload for an event."""
        action_text = "新規登録" if event.is_new else "編集（フォルトコード追加）"
        return {
            "blocks": [
                {
                    "type": "header",
                    "text": {
                        "type": "plain_text",
                        "text": f"⚠️ フォルトコード検出 - {action_text}",
                        "emoji": True,
                    },
                },
                {
                    "type": "section",
                    "fields": [
                        {"type": "mrkdwn", "text": f"*作業日:*\n{event.work_date.isoformat()}"},
                        {"type": "mrkdwn", "text": f"*作業者:*\n{event.worker_name}"},
                        {"type": "mrkdwn", "text": f"*顧客名:*\n{event.customer_name}"},
                        {"type": "mrkdwn", "text": f"*シリアルナンバー:*\n{event.serial_number}"},
                    ],
                },
                {
                    "type": "section",
                    "text": {
                        "type": "mrkdwn",
                        "text": f"*フォルトコード内容:*\n{event.fault_code_content or '（内容なし）'}",
                    },
                },
                {
                    "type": "section",
                    "text": {
                        "type": "mrkdwn",
                        "text": f"👉 <{self.report_url(event.report_id)}|レポートを確認する>",
                    },
                },
                {
                    "type": "context",
                    "elements": [
                        {"type": "mrkdwn", "text": f"レポートID: {event.report_id}"},
                    ],
                },
            ]
        }

    async def notify(self, event: FaultCodeEvent) -> None:
        """POST the alert to the webhook.

        Raises:
            NotificationError: on transport failure or a non-2xx response.
        """
        if not self._webhook_url:
            logger.warning("SLACK_WEBHOOK_URL is not set — skipping Slack notification")
            return

        client = self._http_client or httpx.AsyncClient(timeout=self._timeout)
        should_close = self._http_client is None

        try:
            response = await client.post(self._webhook_url, json=self.build_message(event))
        except httpx.HTTPError as e:
            raise NotificationError(self.channel_name, f"{type(e).__name__}: {e}") from e
        finally:
            if should_close:
                await client.aclose()

        if response.is_error:
            raise NotificationError(
                self.channel_name,
                response.text[:200] or response.reason_phrase,
                status_code=response.status_code,
            )
        logger.debug("Slack accepted alert for report %s", event.report_id)
