from typing import List, Optional
from flask import current_app
from contentdesk.models.content import Content
from contentdesk.store import ContentStore


def list_content(*, store: ContentStore, published: Optional[bool] = None) -> List[Content]:
    # Published items read newest-published first, everything else by approval
    sort_key = "date_published" if published else "date_approved"

    items = store.find_all(published=published, sort_key=sort_key, descending=True)

    current_app.logger.info(
        "Fetched %d content item(s) (published=%s)", len(items), published
    )
    return items
