from .create_draft import create_draft
from .edit_content import edit_content
from .forward_content import forward_content
from .get_content import get_content
from .list_content import list_content
from .publish_and_notify import publish_and_notify
from .publish_content import publish_content

__all__ = [
    "create_draft",
    "edit_content",
    "forward_content",
    "get_content",
    "list_content",
    "publish_and_notify",
    "publish_content",
]
