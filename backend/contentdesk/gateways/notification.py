# contentdesk/gateways/notification.py
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from contentdesk.domain.exceptions import TransportError


@dataclass(frozen=True)
class GatewayResponse:
    status: int
    body: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class NotificationGateway:
    """
    Posts JSON payloads to webhook URLs.

    One attempt per call. Non-2xx responses are returned to the caller;
    only connection failures and timeouts raise TransportError.
    """

    def __init__(self, session: Optional[requests.Session] = None):
        self.session = session or requests.Session()

    def notify(self, target_url: str, payload: Dict[str, Any], timeout_ms: int) -> GatewayResponse:
        try:
            response = self.session.post(
                target_url,
                json=payload,
                timeout=timeout_ms / 1000,
            )
        except requests.RequestException as exc:
            raise TransportError(str(exc) or exc.__class__.__name__) from exc

        return GatewayResponse(status=response.status_code, body=response.text)
