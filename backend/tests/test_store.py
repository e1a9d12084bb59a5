from datetime import datetime, timedelta, timezone
import uuid

import pytest
from sqlalchemy.exc import OperationalError

from contentdesk.domain.exceptions import InvalidIdError, NotFoundError, StoreError
from contentdesk.store import ContentStore, parse_content_id

BASE = datetime(2025, 1, 1, tzinfo=timezone.utc)


def make(store, topic, *, approved_days=0, published_days=None):
    return store.create({
        "topic": topic,
        "body": "<p></p>",
        "published": published_days is not None,
        "date_approved": BASE + timedelta(days=approved_days),
        "date_published": (
            BASE + timedelta(days=published_days) if published_days is not None else None
        ),
        "versions": [],
    })


class BrokenSession:
    """Session whose every database round trip fails."""

    def __init__(self):
        self.rolled_back = False

    def _fail(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("database is down"))

    get = execute = commit = _fail

    def add(self, item):
        pass

    def rollback(self):
        self.rolled_back = True


def test_parse_content_id_accepts_uuid():
    raw = str(uuid.uuid4())

    assert parse_content_id(raw) == raw


@pytest.mark.parametrize("raw", ["", "abc", "123", None, 42, "64b7f0c2e1d3a2b4c5d6e7f8"])
def test_parse_content_id_rejects_malformed(raw):
    with pytest.raises(InvalidIdError):
        parse_content_id(raw)


def test_create_assigns_id_and_timestamps(store):
    item = make(store, "First")

    assert parse_content_id(item.id) == item.id
    assert item.created_at is not None
    assert item.updated_at is not None
    assert item.published is False


def test_create_rejects_unknown_fields(store):
    with pytest.raises(ValueError):
        store.create({"topic": "x", "platform": "linkedin"})


def test_find_by_id_returns_item(store):
    item = make(store, "Lookup")

    assert store.find_by_id(item.id).topic == "Lookup"


def test_find_by_id_missing(store):
    with pytest.raises(NotFoundError):
        store.find_by_id(str(uuid.uuid4()))


def test_find_by_id_malformed(store):
    with pytest.raises(InvalidIdError):
        store.find_by_id("not-an-id")


def test_find_all_orders_by_approval_descending(store):
    make(store, "old", approved_days=1)
    make(store, "new", approved_days=3)
    make(store, "mid", approved_days=2)

    topics = [item.topic for item in store.find_all()]

    assert topics == ["new", "mid", "old"]


def test_find_all_filters_on_publish_state(store):
    make(store, "draft")
    make(store, "live-1", published_days=5)
    make(store, "live-2", published_days=7)

    drafts = store.find_all(published=False)
    live = store.find_all(published=True, sort_key="date_published")

    assert [item.topic for item in drafts] == ["draft"]
    assert [item.topic for item in live] == ["live-2", "live-1"]


def test_find_all_rejects_unknown_sort_key(store):
    with pytest.raises(ValueError):
        store.find_all(sort_key="topic")


def test_update_by_id_sets_fields_and_appends_one_version(store):
    item = make(store, "before")
    entry = {"content": "<p>new</p>", "date": BASE.isoformat()}

    updated = store.update_by_id(
        item.id,
        {"topic": "after", "body": "<p>new</p>"},
        append_version=entry,
    )

    assert updated.topic == "after"
    assert updated.body == "<p>new</p>"
    assert updated.versions == [entry]

    reloaded = store.find_by_id(item.id)
    assert reloaded.versions == [entry]


def test_update_by_id_without_version_leaves_history(store):
    item = make(store, "steady")

    updated = store.update_by_id(item.id, {"topic": "renamed"})

    assert updated.versions == []


def test_update_by_id_missing(store):
    with pytest.raises(NotFoundError):
        store.update_by_id(str(uuid.uuid4()), {"topic": "x"})


def test_update_by_id_malformed(store):
    with pytest.raises(InvalidIdError):
        store.update_by_id("nope", {"topic": "x"})


def test_store_failures_surface_as_store_error():
    session = BrokenSession()
    broken = ContentStore(session)

    with pytest.raises(StoreError):
        broken.find_by_id(str(uuid.uuid4()))

    with pytest.raises(StoreError):
        broken.find_all()

    with pytest.raises(StoreError):
        broken.create({"topic": "x"})

    assert session.rolled_back is True
