"""Reviewer assignments and review submission."""
from dataclasses import asdict

from confmanager.backend import remote_call
from confmanager.extensions import backend
from confmanager.models import (
    ArticleReviewer, Review, STATUS_BY_RECOMMENDATION, UNDER_REVIEW_STATUS,
)
from confmanager.services import articles, utc_now_iso

ASSIGNMENTS_TABLE = 'article_reviewers'
REVIEWS_TABLE = 'reviews'


def status_for_recommendation(recommendation):
    return STATUS_BY_RECOMMENDATION.get(recommendation, UNDER_REVIEW_STATUS)


def list_assignments():
    with remote_call('list_assignments'):
        resp = backend.table(ASSIGNMENTS_TABLE).select('*').execute()
    return [ArticleReviewer.from_row(row) for row in resp.data or []]


def assigned_article_ids(reviewer_id):
    with remote_call('assigned_article_ids'):
        resp = backend.table(ASSIGNMENTS_TABLE).select('article_id').eq('reviewer_id', reviewer_id).execute()
    return [str(row['article_id']) for row in resp.data or []]


def assigned_articles(reviewer_id):
    return articles.get_articles_by_ids(assigned_article_ids(reviewer_id))


def is_assigned(article_id, reviewer_id):
    with remote_call('is_assigned'):
        resp = (
            backend.table(ASSIGNMENTS_TABLE)
            .select('*')
            .eq('article_id', article_id)
            .eq('reviewer_id', reviewer_id)
            .execute()
        )
    return bool(resp.data)


def assign_reviewer(article_id, reviewer_id):
    """
    Assign a reviewer to an article.

    Returns False when the pair already exists. The existence check and
    the insert are two separate requests, so concurrent assignments can
    still race.
    """
    if is_assigned(article_id, reviewer_id):
        return False
    with remote_call('assign_reviewer'):
        backend.table(ASSIGNMENTS_TABLE).insert([
            {'article_id': article_id, 'reviewer_id': reviewer_id}
        ]).execute()
    return True


def submit_review(article_id, reviewer_id, recommendation, comments):
    """Record the review, then move the article to the matching status."""
    review = Review(article_id, reviewer_id, recommendation, comments, submitted_at=utc_now_iso())
    with remote_call('submit_review'):
        backend.table(REVIEWS_TABLE).insert([asdict(review)]).execute()
    new_status = status_for_recommendation(recommendation)
    articles.update_status(article_id, new_status)
    return new_status
