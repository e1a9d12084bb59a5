# contentdesk/normalizers/content.py
from typing import Any, Dict

from contentdesk.models.content import Content
from contentdesk.utils.time import isoformat


def normalize_version(entry: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "content": entry.get("content", ""),
        "date": entry.get("date"),
    }


def normalize_content(item: Content) -> Dict[str, Any]:
    """
    Serialize a Content row to its JSON shape.

    This is also the notification payload sent to webhooks.
    """
    if item is None:
        raise ValueError("Content cannot be None")

    return {
        "id": item.id,
        "topic": item.topic,
        "body": item.body,
        "published": bool(item.published),
        "dateApproved": isoformat(item.date_approved),
        "datePublished": isoformat(item.date_published),
        "externalDocRef": item.external_doc_ref,
        "versions": [normalize_version(v) for v in item.versions or []],
        "createdAt": isoformat(item.created_at),
        "updatedAt": isoformat(item.updated_at),
    }
