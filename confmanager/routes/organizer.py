"""Organizer routes - conferences, reviewer assignment and export."""
from flask import Blueprint, render_template, redirect, url_for, request, flash, Response
from flask_babel import gettext as _

from confmanager.backend import BackendError
from confmanager.routes.auth import organizer_required
from confmanager.services import articles, conferences, reviews, users
from confmanager.services.export import export_articles_csv

organizer_bp = Blueprint('organizer', __name__)

CONFERENCE_FIELDS = ['name', 'description', 'deadline', 'conference_date', 'location']


def render_dashboard(conf_form=None, show_conf_form=False):
    article_list = articles.list_articles()
    reviewer_list = users.list_users(user_type='reviewer')
    return render_template(
        'organizer/dashboard.html',
        conferences=conferences.list_conferences(),
        articles=article_list,
        reviewers=reviewer_list,
        assignments=reviews.list_assignments(),
        article_titles={a.id: a.title for a in article_list},
        reviewer_names={r.id: r.name or r.email for r in reviewer_list},
        conf_form=conf_form or {},
        show_conf_form=show_conf_form or conf_form is not None,
    )


@organizer_bp.route('/organizer')
@organizer_required
def dashboard():
    return render_dashboard(show_conf_form=request.args.get('new') == '1')


@organizer_bp.route('/organizer/conferences', methods=['POST'])
@organizer_required
def create_conference():
    values = {field: request.form.get(field, '').strip() for field in CONFERENCE_FIELDS}

    if not all(values.values()):
        flash(_('Todos los campos son obligatorios.'), 'error')
        return render_dashboard(conf_form=values)

    if not conferences.is_iso_date(values['deadline']) or not conferences.is_iso_date(values['conference_date']):
        flash(_('Fecha inválida.'), 'error')
        return render_dashboard(conf_form=values)

    try:
        conferences.create_conference(**values)
    except BackendError as e:
        flash(_('No se pudo crear la conferencia: %(message)s', message=e.message), 'error')
        return render_dashboard(conf_form=values)

    flash(_('Conferencia creada.'), 'success')
    return redirect(url_for('organizer.dashboard'))


@organizer_bp.route('/organizer/assignments', methods=['POST'])
@organizer_required
def assign_reviewer():
    article_id = request.form.get('article_id', '').strip()
    reviewer_id = request.form.get('reviewer_id', '').strip()

    if not article_id or not reviewer_id:
        flash(_('Selecciona artículo y revisor.'), 'error')
        return redirect(url_for('organizer.dashboard'))

    try:
        created = reviews.assign_reviewer(article_id, reviewer_id)
    except BackendError as e:
        flash(_('Error en la asignación: %(message)s', message=e.message), 'error')
        return redirect(url_for('organizer.dashboard'))

    if not created:
        flash(_('Ya asignado.'), 'error')
    else:
        flash(_('¡Revisor asignado!'), 'success')
    return redirect(url_for('organizer.dashboard'))


@organizer_bp.route('/organizer/articles.csv')
@organizer_required
def export_articles():
    csv_data = export_articles_csv(
        articles.list_articles(),
        conferences.list_conferences(),
        users.list_users(),
        reviews.list_assignments(),
    )
    return Response(
        csv_data,
        mimetype='text/csv',
        headers={'Content-disposition': 'attachment; filename=articles.csv'}
    )
