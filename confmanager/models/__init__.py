"""Models package - Re-exports all models for convenient importing."""
from confmanager.models.user import User, STAFF_TYPES
from confmanager.models.conference import Conference
from confmanager.models.article import Article, SUBMITTED_STATUS
from confmanager.models.review import (
    ArticleReviewer, Review, RECOMMENDATIONS, RECOMMENDATION_LABELS,
    STATUS_BY_RECOMMENDATION, UNDER_REVIEW_STATUS,
)

__all__ = [
    'User', 'STAFF_TYPES', 'Conference', 'Article', 'SUBMITTED_STATUS',
    'ArticleReviewer', 'Review', 'RECOMMENDATIONS', 'RECOMMENDATION_LABELS',
    'STATUS_BY_RECOMMENDATION', 'UNDER_REVIEW_STATUS',
]
