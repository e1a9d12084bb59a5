# contentdesk/store.py
import uuid
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from contentdesk.domain.exceptions import InvalidIdError, NotFoundError, StoreError
from contentdesk.models.content import Content
from contentdesk.utils.transaction import transactional

SORTABLE_FIELDS = {"date_approved", "date_published", "created_at", "updated_at"}

WRITABLE_FIELDS = {
    "topic",
    "body",
    "published",
    "date_approved",
    "date_published",
    "external_doc_ref",
    "versions",
    "updated_at",
}


def parse_content_id(content_id: Any) -> str:
    """
    Validate a content identifier.

    Identifiers are canonical UUID strings; anything else is an
    InvalidIdError, raised before the store is queried.
    """
    if not isinstance(content_id, str):
        raise InvalidIdError(content_id)
    try:
        return str(uuid.UUID(content_id))
    except ValueError as exc:
        raise InvalidIdError(content_id) from exc


def _check_fields(fields: Dict[str, Any]) -> None:
    unknown = set(fields) - WRITABLE_FIELDS
    if unknown:
        raise ValueError(f"Unknown content fields: {sorted(unknown)}")


class ContentStore:
    """Document-style access to the content table over a SQLAlchemy session."""

    def __init__(self, session):
        self.session = session

    def create(self, fields: Dict[str, Any]) -> Content:
        _check_fields(fields)

        item = Content()
        for name, value in fields.items():
            setattr(item, name, value)

        with transactional(self.session):
            self.session.add(item)

        return item

    def find_all(
        self,
        *,
        published: Optional[bool] = None,
        sort_key: str = "date_approved",
        descending: bool = True,
    ) -> List[Content]:
        if sort_key not in SORTABLE_FIELDS:
            raise ValueError(f"Cannot sort content by {sort_key!r}")

        column = getattr(Content, sort_key)
        query = select(Content)
        if published is not None:
            query = query.where(Content.published == published)

        query = query.order_by(
            column.desc() if descending else column.asc(),
            Content.id.desc(),
        )

        try:
            return list(self.session.execute(query).scalars())
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StoreError(str(exc)) from exc

    def find_by_id(self, content_id: str) -> Content:
        content_id = parse_content_id(content_id)
        try:
            item = self.session.get(Content, content_id)
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StoreError(str(exc)) from exc

        if item is None:
            raise NotFoundError(content_id)
        return item

    def update_by_id(
        self,
        content_id: str,
        set_fields: Dict[str, Any],
        append_version: Optional[Dict[str, Any]] = None,
    ) -> Content:
        """
        Set fields and optionally append one version entry in a single commit.

        The row is locked for the duration of the write where the backend
        supports SELECT ... FOR UPDATE.
        """
        content_id = parse_content_id(content_id)
        _check_fields(set_fields)

        with transactional(self.session):
            item = (
                self.session.execute(
                    select(Content)
                    .where(Content.id == content_id)
                    .with_for_update()
                    .execution_options(populate_existing=True)
                )
                .scalar_one_or_none()
            )

            if item is None:
                raise NotFoundError(content_id)

            for name, value in set_fields.items():
                setattr(item, name, value)

            if append_version is not None:
                # Reassign so the JSON column is flagged dirty
                item.versions = [*(item.versions or []), append_version]

        return item
