from contentdesk.models.content import Content
from contentdesk.store import ContentStore


def get_content(*, store: ContentStore, content_id: str) -> Content:
    return store.find_by_id(content_id)
