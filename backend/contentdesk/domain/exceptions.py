class ContentDeskError(Exception):
    """Base class for errors raised by the content service."""

    status_code = 500


class InvalidIdError(ContentDeskError):
    status_code = 400

    def __init__(self, content_id):
        super().__init__(f"Invalid content id: {content_id!r}")
        self.content_id = content_id


class NotFoundError(ContentDeskError):
    status_code = 404

    def __init__(self, content_id):
        super().__init__(f"Content not found: {content_id}")
        self.content_id = content_id


class StoreError(ContentDeskError):
    """The document store is unavailable or rejected a write."""


class TransportError(ContentDeskError):
    """A webhook could not be reached or timed out."""


class InvariantViolation(ContentDeskError):
    pass
