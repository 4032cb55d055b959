"""Article model."""
from dataclasses import dataclass
from typing import Optional

SUBMITTED_STATUS = 'enviado'


@dataclass
class Article:
    id: str
    title: str
    abstract: str = ''
    keywords: str = ''  # comma separated, as typed by the author
    user_id: Optional[str] = None  # owner
    conference_id: Optional[str] = None
    status: str = SUBMITTED_STATUS  # free-text workflow label
    file_url: str = ''
    file_name: str = ''
    version: int = 1
    created_at: Optional[str] = None

    @classmethod
    def from_row(cls, row):
        return cls(
            id=str(row['id']),
            title=row.get('title') or '',
            abstract=row.get('abstract') or '',
            keywords=row.get('keywords') or '',
            user_id=_str_or_none(row.get('user_id')),
            conference_id=_str_or_none(row.get('conference_id')),
            status=row.get('status') or SUBMITTED_STATUS,
            file_url=row.get('file_url') or '',
            file_name=row.get('file_name') or '',
            version=row.get('version') or 1,
            created_at=row.get('created_at'),
        )

    @property
    def keyword_list(self):
        return [k.strip() for k in self.keywords.split(',') if k.strip()]


def _str_or_none(value):
    return None if value is None else str(value)
