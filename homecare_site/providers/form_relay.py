"""Third-party form relay (Formspree-style) client."""
import time
from typing import Any, Dict, Optional

import httpx

from homecare_site.utils.constants import RELAY_FALLBACK_ERROR, SUBMISSION_FAILED_ERROR
from homecare_site.utils.logging_config import logger


class FormRelayProvider:
    """POST intake submissions to the configured relay endpoint."""

    def __init__(
        self, endpoint: str, transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> None:
        self.endpoint = endpoint
        self.transport = transport

    async def submit(self, fields: Dict[str, str]) -> Dict[str, Any]:
        """
        Send one form-encoded submission. Never raises for relay or
        network failures; the outcome is reported in the returned dict.
        """
        t0 = time.time()
        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(
                    self.endpoint,
                    data=fields,
                    headers={"Accept": "application/json"},
                )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug(
                "Form relay unreachable elapsed_ms=%s err=%s",
                int((time.time() - t0) * 1000),
                type(e).__name__,
            )
            return {
                "status": "error",
                "status_code": None,
                "error": SUBMISSION_FAILED_ERROR,
            }

        status_code = response.status_code
        logger.info(
            "Form relay - timestamp=%s status_code=%s elapsed_ms=%s",
            time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime(t0)),
            status_code,
            int((time.time() - t0) * 1000),
        )
        if response.is_success:
            return {"status": "success", "status_code": status_code, "error": None}
        return {
            "status": "error",
            "status_code": status_code,
            "error": self._error_message(response),
        }

    def _error_message(self, response: httpx.Response) -> str:
        """First entry of the relay's `errors` list, else the generic message."""
        try:
            data = response.json()
        except ValueError:
            return RELAY_FALLBACK_ERROR
        if not isinstance(data, dict):
            return RELAY_FALLBACK_ERROR
        errors = data.get("errors")
        if not isinstance(errors, list) or not errors or not isinstance(errors[0], dict):
            return RELAY_FALLBACK_ERROR
        message = errors[0].get("message")
        if isinstance(message, str) and message:
            return message
        return RELAY_FALLBACK_ERROR
