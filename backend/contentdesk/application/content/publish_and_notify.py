from typing import Optional
from flask import current_app
from contentdesk.domain.exceptions import TransportError
from contentdesk.gateways.notification import NotificationGateway
from contentdesk.normalizers.content import normalize_content
from contentdesk.store import ContentStore, parse_content_id
from .publish_content import publish_content
from .results import Failed, Forwarded, NotConfigured, NotifyResult, PublishOutcome


def publish_and_notify(
    *,
    store: ContentStore,
    gateway: NotificationGateway,
    content_id: str,
    target_url: Optional[str],
    timeout_ms: int,
) -> PublishOutcome:
    """
    Publish a content item, then forward it to the configured webhook.

    Steps:
    1. Reject malformed ids before touching the store
    2. Publish (NotFoundError stops the workflow, nothing is sent)
    3. Build the payload from the published item
    4. Forward it once, if a target is configured

    Notification failures are reported in the outcome and never undo
    the publish.
    """
    content_id = parse_content_id(content_id)

    item = publish_content(store=store, content_id=content_id)
    payload = normalize_content(item)

    if not target_url:
        current_app.logger.info(
            "Notification target not configured; %s published without forwarding",
            item.id,
        )
        return PublishOutcome(item=item, notification=NotConfigured())

    return PublishOutcome(
        item=item,
        notification=_forward(gateway, target_url, payload, timeout_ms, item.id),
    )


def _forward(gateway, target_url, payload, timeout_ms, content_id) -> NotifyResult:
    try:
        response = gateway.notify(target_url, payload, timeout_ms)
    except TransportError as exc:
        current_app.logger.warning(
            "Forwarding %s to %s failed: %s", content_id, target_url, exc
        )
        return Failed(error=str(exc))

    if response.ok:
        current_app.logger.info(
            "Forwarded %s to %s (%s)", content_id, target_url, response.status
        )
        return Forwarded(status=response.status)

    current_app.logger.warning(
        "Webhook %s answered %s for %s", target_url, response.status, content_id
    )
    return Failed(status=response.status, response_body=response.body)
