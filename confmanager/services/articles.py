"""Article submission and lookup."""
from confmanager.backend import remote_call
from confmanager.extensions import backend
from confmanager.models import Article, SUBMITTED_STATUS
from confmanager.services import first_row, utc_now_iso

ARTICLES_TABLE = 'articles'


def list_articles(user_id=None):
    """All articles, or only those owned by user_id."""
    with remote_call('list_articles'):
        query = backend.table(ARTICLES_TABLE).select('*')
        if user_id is not None:
            query = query.eq('user_id', user_id)
        resp = query.order('created_at', desc=True).execute()
    return [Article.from_row(row) for row in resp.data or []]


def get_article(article_id):
    with remote_call('get_article'):
        resp = backend.table(ARTICLES_TABLE).select('*').eq('id', article_id).limit(1).execute()
    row = first_row(resp)
    return Article.from_row(row) if row else None


def get_articles_by_ids(article_ids):
    if not article_ids:
        return []
    with remote_call('get_articles_by_ids'):
        resp = backend.table(ARTICLES_TABLE).select('*').in_('id', list(article_ids)).execute()
    return [Article.from_row(row) for row in resp.data or []]


def create_article(user_id, title, abstract, keywords, conference_id, file_url, file_name):
    row = {
        'title': title,
        'abstract': abstract,
        'keywords': keywords,
        'user_id': user_id,
        'conference_id': conference_id,
        'status': SUBMITTED_STATUS,
        'file_url': file_url,
        'file_name': file_name,
        'version': 1,
        'created_at': utc_now_iso(),
    }
    with remote_call('create_article'):
        resp = backend.table(ARTICLES_TABLE).insert([row]).execute()
    return Article.from_row(first_row(resp) or dict(row, id=''))


def update_status(article_id, status):
    with remote_call('update_article_status'):
        backend.table(ARTICLES_TABLE).update({'status': status}).eq('id', article_id).execute()
