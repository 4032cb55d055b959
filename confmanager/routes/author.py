"""Author routes - own articles and submission."""
from flask import Blueprint, render_template, redirect, url_for, session, request, flash
from flask_babel import gettext as _

from confmanager.backend import BackendError
from confmanager.routes.auth import author_required
from confmanager.services import articles, conferences, storage

author_bp = Blueprint('author', __name__)


def render_dashboard(form=None, show_form=False):
    conference_list = conferences.list_conferences()
    return render_template(
        'author/dashboard.html',
        articles=articles.list_articles(user_id=session['user_id']),
        conferences=conference_list,
        conference_names={c.id: c.name for c in conference_list},
        form=form or {},
        show_form=show_form or form is not None,
    )


@author_bp.route('/author')
@author_required
def dashboard():
    return render_dashboard(show_form=request.args.get('new') == '1')


@author_bp.route('/author/articles', methods=['POST'])
@author_required
def submit_article():
    """Upload the manuscript, then record the article as submitted."""
    title = request.form.get('title', '').strip()
    abstract = request.form.get('abstract', '').strip()
    keywords = request.form.get('keywords', '').strip()
    conference_id = request.form.get('conference_id', '').strip()
    file = request.files.get('file')

    if not title or not abstract or not conference_id or not file or not file.filename:
        flash(_('Todos los campos y el archivo son obligatorios.'), 'error')
        return render_dashboard(form=request.form)

    if not storage.allowed_file(file.filename):
        flash(_('Formato de archivo no permitido. Usa PDF o Word.'), 'error')
        return render_dashboard(form=request.form)

    user_id = session['user_id']
    try:
        _path, public_url = storage.upload_article_file(user_id, file)
    except BackendError as e:
        flash(_('Error subiendo el archivo: %(message)s', message=e.message), 'error')
        return render_dashboard(form=request.form)

    try:
        articles.create_article(
            user_id=user_id,
            title=title,
            abstract=abstract,
            keywords=keywords,
            conference_id=conference_id,
            file_url=public_url,
            file_name=file.filename,
        )
    except BackendError as e:
        flash(_('Error guardando en la base de datos: %(message)s', message=e.message), 'error')
        return render_dashboard(form=request.form)

    flash(_('Artículo enviado.'), 'success')
    return redirect(url_for('author.dashboard'))
