"""Reviewer assignments and reviews."""
from dataclasses import dataclass
from typing import Optional

from flask_babel import lazy_gettext as _l

RECOMMENDATIONS = ['accept', 'minor_revisions', 'major_revisions', 'reject']

RECOMMENDATION_LABELS = {
    'accept': _l('Aceptar'),
    'minor_revisions': _l('Revisiones Menores'),
    'major_revisions': _l('Revisiones Mayores'),
    'reject': _l('Rechazar'),
}

# Article status after a review, keyed by recommendation
STATUS_BY_RECOMMENDATION = {
    'accept': 'aceptado',
    'minor_revisions': 'revisiones menores',
    'major_revisions': 'revisiones mayores',
    'reject': 'rechazado',
}
UNDER_REVIEW_STATUS = 'en revisión'


@dataclass
class ArticleReviewer:
    article_id: str
    reviewer_id: str

    @classmethod
    def from_row(cls, row):
        return cls(article_id=str(row['article_id']), reviewer_id=str(row['reviewer_id']))


@dataclass
class Review:
    article_id: str
    reviewer_id: str
    recommendation: str
    comments: str
    submitted_at: Optional[str] = None
