from contentdesk.domain.exceptions import InvariantViolation


def assert_content(item):
    if item.published and item.date_published is None:
        raise InvariantViolation("Published content must have date_published set.")

    if not item.published and item.date_published is not None:
        raise InvariantViolation("Draft content cannot have date_published set.")

    versions = item.versions or []
    if versions and versions[-1].get("content") != item.body:
        raise InvariantViolation(
            "Content body does not match its latest version entry."
        )
