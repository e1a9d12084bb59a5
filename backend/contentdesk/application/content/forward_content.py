from typing import Any, Dict, Optional
from flask import current_app
from contentdesk.gateways.notification import GatewayResponse, NotificationGateway
from contentdesk.normalizers.content import normalize_content
from contentdesk.store import ContentStore


def forward_content(
    *,
    store: ContentStore,
    gateway: NotificationGateway,
    content_id: str,
    target_url: str,
    extra: Optional[Dict[str, Any]] = None,
    timeout_ms: int,
) -> GatewayResponse:
    """
    Send one item to a caller-chosen webhook.

    Extra fields are added to the item payload but never replace item
    fields. TransportError is left to the caller.
    """
    item = store.find_by_id(content_id)

    payload = {**(extra or {}), **normalize_content(item)}
    response = gateway.notify(target_url, payload, timeout_ms)

    current_app.logger.info(
        "Manually forwarded %s to %s (%s)", item.id, target_url, response.status
    )
    return response
