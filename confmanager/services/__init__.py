"""Service layer - every read and write against the remote backend."""
from datetime import datetime, timezone


def utc_now_iso():
    return datetime.now(timezone.utc).isoformat()


def first_row(resp):
    """First row of a query response, or None."""
    rows = getattr(resp, 'data', None) or []
    return rows[0] if rows else None
