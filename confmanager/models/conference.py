"""Conference model."""
from dataclasses import dataclass
from typing import Optional


@dataclass
class Conference:
    id: str
    name: str
    description: str = ''
    deadline: Optional[str] = None  # ISO date, submission deadline
    conference_date: Optional[str] = None
    location: str = ''
    status: str = 'active'
    created_at: Optional[str] = None

    @classmethod
    def from_row(cls, row):
        return cls(
            id=str(row['id']),
            name=row.get('name') or '',
            description=row.get('description') or '',
            deadline=row.get('deadline'),
            conference_date=row.get('conference_date'),
            location=row.get('location') or '',
            status=row.get('status') or 'active',
            created_at=row.get('created_at'),
        )
