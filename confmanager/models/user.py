"""User model, one row of the `users` table."""
from dataclasses import dataclass
from typing import Optional

STAFF_TYPES = ['organizer', 'reviewer', 'admin']  # created from the admin panel


@dataclass
class User:
    id: str
    email: str
    name: str = ''
    user_type: str = 'author'  # admin, organizer, reviewer, author
    is_active: bool = True
    needs_password_change: bool = False
    created_at: Optional[str] = None

    @classmethod
    def from_row(cls, row):
        return cls(
            id=str(row['id']),
            email=row.get('email') or '',
            name=row.get('name') or '',
            user_type=row.get('user_type') or 'author',
            # A missing flag counts as active; only an explicit false blocks
            is_active=row.get('is_active') is not False,
            needs_password_change=bool(row.get('needs_password_change')),
            created_at=row.get('created_at'),
        )

    @classmethod
    def from_auth_user(cls, auth_user):
        """Profile built from the auth service user when no row exists."""
        metadata = getattr(auth_user, 'user_metadata', None) or {}
        return cls(
            id=str(auth_user.id),
            email=auth_user.email or '',
            name=metadata.get('name') or '',
            user_type=metadata.get('user_type') or 'author',
        )