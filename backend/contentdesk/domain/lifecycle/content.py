from typing import Set

DRAFT = "draft"
PUBLISHED = "published"

# Explicit allowed state transitions
ALLOWED_CONTENT_TRANSITIONS: dict[str, Set[str]] = {
    DRAFT: {PUBLISHED},
    PUBLISHED: {PUBLISHED},  # re-publish only re-stamps date_published
}


def assert_content_transition(*, from_status: str, to_status: str) -> None:
    """
    Guards content lifecycle transitions.
    Nothing leaves the published state.
    """
    allowed = ALLOWED_CONTENT_TRANSITIONS.get(from_status, set())

    if to_status not in allowed:
        raise ValueError(
            f"Illegal content transition: {from_status} → {to_status}"
        )


def publish_fields(now):
    return {
        "published": True,
        "date_published": now,
        "updated_at": now,
    }
