from contextlib import contextmanager
from sqlalchemy.exc import SQLAlchemyError
from contentdesk.domain.exceptions import StoreError


@contextmanager
def transactional(session):
    """Commit on success; roll back and raise StoreError on database failure."""
    try:
        yield
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        raise StoreError(str(exc)) from exc
    except Exception:
        session.rollback()
        raise
