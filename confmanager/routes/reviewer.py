"""Reviewer routes - assigned articles and review submission."""
from flask import Blueprint, render_template, redirect, url_for, session, request, flash, abort
from flask_babel import gettext as _

from confmanager.backend import BackendError
from confmanager.models import RECOMMENDATIONS, RECOMMENDATION_LABELS
from confmanager.routes.auth import reviewer_required
from confmanager.services import articles, reviews

reviewer_bp = Blueprint('reviewer', __name__)


def assigned_article_or_404(article_id):
    if not reviews.is_assigned(article_id, session['user_id']):
        abort(404)
    article = articles.get_article(article_id)
    if article is None:
        abort(404)
    return article


def render_dashboard(selected=None, form=None):
    return render_template(
        'reviewer/dashboard.html',
        articles=reviews.assigned_articles(session['user_id']),
        selected=selected,
        recommendations=RECOMMENDATIONS,
        recommendation_labels=RECOMMENDATION_LABELS,
        form=form or {},
    )


@reviewer_bp.route('/reviewer')
@reviewer_required
def dashboard():
    return render_dashboard()


@reviewer_bp.route('/reviewer/articles/<article_id>')
@reviewer_required
def review_form(article_id):
    return render_dashboard(selected=assigned_article_or_404(article_id))


@reviewer_bp.route('/reviewer/articles/<article_id>/review', methods=['POST'])
@reviewer_required
def submit_review(article_id):
    article = assigned_article_or_404(article_id)
    recommendation = request.form.get('recommendation', 'accept')
    comments = request.form.get('comments', '').strip()

    if not comments:
        flash(_('El comentario es obligatorio.'), 'error')
        return render_dashboard(selected=article, form=request.form)

    try:
        reviews.submit_review(article.id, session['user_id'], recommendation, comments)
    except BackendError as e:
        flash(_('No se pudo registrar la revisión: %(message)s', message=e.message), 'error')
        return render_dashboard(selected=article, form=request.form)

    flash(_('¡Revisión registrada y estado actualizado!'), 'success')
    return redirect(url_for('reviewer.dashboard'))
