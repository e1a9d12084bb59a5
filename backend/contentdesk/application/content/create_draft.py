from typing import Optional
from flask import current_app
from contentdesk.domain.invariants.content import assert_content
from contentdesk.models.content import Content
from contentdesk.store import ContentStore
from contentdesk.utils.sanitize import SanitizationPolicy, sanitize
from contentdesk.utils.time import utc_now
from .versioning import version_entry

DEFAULT_TOPIC = "Untitled"
DEFAULT_BODY = "<p></p>"


def create_draft(
    *,
    store: ContentStore,
    policy: SanitizationPolicy,
    topic: Optional[str] = None,
    raw_html: Optional[str] = None,
    external_doc_ref: Optional[str] = None,
) -> Content:
    """
    Create a new content item in DRAFT state.

    The body is sanitized before it is stored and becomes the first
    version entry. date_approved marks the item as ready at creation.
    """
    now = utc_now()
    body = sanitize(DEFAULT_BODY if raw_html is None else raw_html, policy)

    item = store.create({
        "topic": topic if topic is not None else DEFAULT_TOPIC,
        "body": body,
        "published": False,
        "date_approved": now,
        "date_published": None,
        "external_doc_ref": external_doc_ref,
        "versions": [version_entry(body, now)],
        "updated_at": now,
    })

    assert_content(item)
    current_app.logger.info("Created content %s (%s)", item.id, item.topic)
    return item
