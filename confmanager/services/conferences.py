"""Conference reads and creation."""
from datetime import date

from confmanager.backend import remote_call
from confmanager.extensions import backend
from confmanager.models import Conference
from confmanager.services import first_row, utc_now_iso

CONFERENCES_TABLE = 'conferences'


def list_conferences():
    with remote_call('list_conferences'):
        resp = backend.table(CONFERENCES_TABLE).select('*').order('created_at', desc=True).execute()
    return [Conference.from_row(row) for row in resp.data or []]


def is_iso_date(value):
    try:
        date.fromisoformat(value)
    except (TypeError, ValueError):
        return False
    return True


def create_conference(name, description, deadline, conference_date, location):
    row = {
        'name': name,
        'description': description,
        'deadline': deadline,
        'conference_date': conference_date,
        'location': location,
        'status': 'active',
        'created_at': utc_now_iso(),
    }
    with remote_call('create_conference'):
        resp = backend.table(CONFERENCES_TABLE).insert([row]).execute()
    return Conference.from_row(first_row(resp) or dict(row, id=''))
