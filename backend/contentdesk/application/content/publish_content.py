from flask import current_app
from contentdesk.domain.invariants.content import assert_content
from contentdesk.domain.lifecycle.content import (
    PUBLISHED,
    assert_content_transition,
    publish_fields,
)
from contentdesk.models.content import Content
from contentdesk.store import ContentStore
from contentdesk.utils.time import utc_now


def publish_content(*, store: ContentStore, content_id: str) -> Content:
    """
    Publish a content item.

    Publishing an already published item is allowed and re-stamps
    date_published.
    """
    current = store.find_by_id(content_id)
    assert_content_transition(from_status=current.status, to_status=PUBLISHED)

    if current.published:
        current_app.logger.warning("Re-publishing content %s", current.id)

    item = store.update_by_id(current.id, publish_fields(utc_now()))

    assert_content(item)
    current_app.logger.info("Published content %s (%s)", item.id, item.topic)
    return item
