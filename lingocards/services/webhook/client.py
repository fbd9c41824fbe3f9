import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from lingocards.exceptions import TransportError, WebhookError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass
class WebhookResult:
    """Outcome of one webhook call. Failures are values, not exceptions."""

    body: Any = None
    error: Optional[WebhookError] = None
    status_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class AnalysisWebhookClient:
    """Posts finished study sessions to the AI analysis workflow (n8n)."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        self.timeout = timeout
        self.session = session or requests.Session()

    def post(self, url: str, payload: Dict[str, Any]) -> WebhookResult:
        """Send ``payload`` as JSON and decode the JSON answer."""
        logger.info(f"Posting study session to analysis webhook: url={url}")
        try:
            response = self.session.post(
                url,
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.Timeout as e:
            return self._failed(f"Webhook timed out after {self.timeout}s: {e}")
        except requests.RequestException as e:
            return self._failed(f"Cannot reach webhook: {e}")

        if not response.ok:
            return self._failed(
                f"Webhook answered {response.status_code} {response.reason}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as e:
            return self._failed(
                f"Webhook returned a non-JSON body: {e}",
                status_code=response.status_code,
            )

        logger.debug(f"Webhook raw response: {str(body)[:400]}")
        return WebhookResult(body=body, status_code=response.status_code)

    def _failed(self, message: str, status_code: Optional[int] = None) -> WebhookResult:
        logger.error(f"[WEBHOOK ERROR] {message}")
        return WebhookResult(error=TransportError(message), status_code=status_code)

    def close(self) -> None:
        self.session.close()
