from datetime import datetime, timezone


def utc_now():
    return datetime.now(timezone.utc)


def normalize_ts(ts):
    """
    Ensure datetime is timezone-aware.
    Defaults to UTC if naive.
    """
    if ts is None:
        return None
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def isoformat(ts):
    ts = normalize_ts(ts)
    return ts.isoformat() if ts else None
