from typing import Optional
from flask import current_app
from contentdesk.domain.invariants.content import assert_content
from contentdesk.models.content import Content
from contentdesk.store import ContentStore
from contentdesk.utils.sanitize import SanitizationPolicy, sanitize
from contentdesk.utils.time import utc_now
from .versioning import version_entry


def edit_content(
    *,
    store: ContentStore,
    policy: SanitizationPolicy,
    content_id: str,
    topic: Optional[str],
    raw_html: str,
) -> Content:
    """
    Replace the body of a content item and record it as a new version.

    Design rules:
    - The stored body is always the sanitized HTML
    - Every edit appends exactly one version entry
    - topic is left unchanged when None
    """
    now = utc_now()
    body = sanitize(raw_html, policy)

    fields = {"body": body, "updated_at": now}
    if topic is not None:
        fields["topic"] = topic

    item = store.update_by_id(
        content_id,
        fields,
        append_version=version_entry(body, now),
    )

    assert_content(item)
    current_app.logger.info(
        "Edited content %s, %d version(s)", item.id, len(item.versions)
    )
    return item
