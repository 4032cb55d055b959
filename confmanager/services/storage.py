"""Article files in the storage bucket."""
import os
import re
import time
import unicodedata

from confmanager.backend import remote_call
from confmanager.extensions import backend

ALLOWED_EXTENSIONS = {'.pdf', '.doc', '.docx'}

_COMBINING_MARKS = re.compile('[\u0300-\u036f]')
_UNSAFE_CHARS = re.compile(r'[^a-zA-Z0-9.\-_]')


def sanitize_filename(filename):
    """Strip accents, then replace anything outside [A-Za-z0-9.-_] with '_'."""
    decomposed = unicodedata.normalize('NFD', filename)
    return _UNSAFE_CHARS.sub('_', _COMBINING_MARKS.sub('', decomposed))


def allowed_file(filename):
    return os.path.splitext(filename or '')[1].lower() in ALLOWED_EXTENSIONS


def build_object_path(user_id, filename, millis=None):
    if millis is None:
        millis = int(time.time() * 1000)
    return f'{user_id}/{millis}_{sanitize_filename(filename)}'


def upload_article_file(user_id, file_storage):
    """Upload a werkzeug FileStorage and return (path, public_url)."""
    path = build_object_path(user_id, file_storage.filename)
    content = file_storage.read()
    options = {'content-type': file_storage.mimetype or 'application/octet-stream'}
    bucket = backend.bucket()
    with remote_call('upload_article_file'):
        bucket.upload(path, content, options)
        public_url = bucket.get_public_url(path)
    return path, public_url or ''
