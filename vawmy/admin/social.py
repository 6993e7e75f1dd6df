"""
Admin Social Media Routes
"""

from flask import abort, flash, redirect, render_template, request, url_for
from vawmy.admin import admin_bp
from vawmy.admin.decorators import admin_required
from vawmy.admin.forms import parse_order
from vawmy.exceptions import ApiError, ValidationError
from vawmy.extensions import api
from vawmy.models import ICON_CHOICES, SocialMedia, sort_by_display_order


def _fetch_links():
    return sort_by_display_order([SocialMedia.from_dict(s) for s in api.get_social_media() or []])


def _load_links():
    try:
        return _fetch_links()
    except ApiError as e:
        flash(e.message, 'danger')
        return []


def _find_link(links, link_id):
    return next((link for link in links if str(link.id) == str(link_id)), None)


def _link_from_form(link_id=None):
    form = request.form
    return SocialMedia(id=link_id,
                       platform=form.get('platform', '').strip(),
                       url=form.get('url', '').strip(),
                       icon_name=form.get('icon_name', 'facebook'),
                       is_visible=form.get('is_visible') in ('on', 'true', '1'))


def _render(links, form, editing):
    return render_template('admin/social.html', links=links, form=form,
                           editing=editing, icon_choices=ICON_CHOICES)


def _save_link(link):
    link.display_order = parse_order(request.form.get('display_order'))
    link.validate()
    if link.id is not None:
        api.update_social_media(link.id, link.to_payload())
    else:
        api.create_social_media(link.to_payload())


@admin_bp.route('/social', methods=['GET', 'POST'])
@admin_required
def manage_social():
    """List social media links and add new ones."""
    if request.method == 'POST':
        link = _link_from_form()
        try:
            _save_link(link)
        except (ValidationError, ApiError) as e:
            flash(e.message, 'danger')
            return _render(_load_links(), link, editing=False)

        flash('Social media link created successfully!', 'success')
        return redirect(url_for('admin.manage_social'))

    return _render(_load_links(), SocialMedia(), editing=False)


@admin_bp.route('/social/<int:link_id>/edit', methods=['GET', 'POST'])
@admin_required
def edit_social(link_id):
    try:
        links = _fetch_links()
    except ApiError as e:
        flash(e.message, 'danger')
        return redirect(url_for('admin.manage_social'))

    current = _find_link(links, link_id)
    if current is None:
        abort(404)

    if request.method == 'POST':
        link = _link_from_form(current.id)
        link.created_at = current.created_at
        try:
            _save_link(link)
        except (ValidationError, ApiError) as e:
            flash(e.message, 'danger')
            return _render(links, link, editing=True)

        flash('Social media link updated successfully!', 'success')
        return redirect(url_for('admin.manage_social'))

    return _render(links, current, editing=True)


@admin_bp.route('/social/<int:link_id>/toggle', methods=['POST'])
@admin_required
def toggle_social(link_id):
    """Re-submit the full record with only the visibility flag flipped."""
    try:
        link = _find_link(_fetch_links(), link_id)
        if link is None:
            abort(404)
        api.update_social_media(link.id, link.toggled_payload())
        state = 'hidden' if link.is_visible else 'visible'
        flash(f'{link.platform} is now {state}.', 'success')
    except ApiError as e:
        flash(f'Failed to update visibility: {e.message}', 'danger')
    return redirect(url_for('admin.manage_social'))


@admin_bp.route('/social/<int:link_id>/delete', methods=['POST'])
@admin_required
def delete_social(link_id):
    try:
        api.delete_social_media(link_id)
        flash('Social media link deleted successfully!', 'success')
    except ApiError as e:
        flash(f'Failed to delete social media link: {e.message}', 'danger')
    return redirect(url_for('admin.manage_social'))
