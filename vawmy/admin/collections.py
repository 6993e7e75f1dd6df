"""
Admin Collection Routes

Collections, their nested subcategories, and the uploads that feed them.
"""

from flask import abort, flash, redirect, render_template, request, url_for
from vawmy.admin import admin_bp
from vawmy.admin.decorators import admin_required
from vawmy.admin.forms import form_file, form_files, parse_order, upload_files, url_lines
from vawmy.exceptions import ApiError, UploadError, ValidationError
from vawmy.extensions import api
from vawmy.models import Collection, Subcategory, sort_by_display_order


def _load_collections():
    """Collections for the list, or an empty list plus a flashed error."""
    try:
        return sort_by_display_order([Collection.from_dict(c) for c in api.get_collections() or []])
    except ApiError as e:
        flash(e.message, 'danger')
        return []


def _collection_from_form(collection_id=None):
    """Collection built from the submitted fields, before any uploads."""
    form = request.form
    return Collection(id=collection_id,
                      name=form.get('name', '').strip(),
                      description=form.get('description', '').strip(),
                      cover_image=form.get('cover_image', '').strip(),
                      images=url_lines(form.get('images')),
                      video_url=form.get('video_url', '').strip() or None,
                      display_order=0)


def _apply_uploads(collection, cover_file, image_urls, video_urls):
    """Merge uploaded URLs into the form state; None marks a failed upload."""
    image_urls = list(image_urls)
    if cover_file:
        cover = image_urls.pop(0)
        if cover:
            collection.cover_image = cover
    collection.images.extend(url for url in image_urls if url)
    video = next((url for url in video_urls if url), None)
    if video:
        collection.video_url = video


def _save_collection(collection):
    """Validate, upload picked files into the form state, then create or update.

    Raises ValidationError or ApiError. Nothing is uploaded when the typed
    fields are invalid; URLs of files that did upload stay on ``collection``
    so the re-rendered form keeps them.
    """
    collection.display_order = parse_order(request.form.get('display_order'))

    cover_file = form_file('cover_file')
    video_file = form_file('video_file')
    collection.validate(cover_pending=bool(cover_file))

    images = ([cover_file] if cover_file else []) + form_files('image_files')
    videos = [video_file] if video_file else []
    try:
        image_urls, video_urls = upload_files(images=images, videos=videos)
    except UploadError as e:
        _apply_uploads(collection, cover_file, e.results[:len(images)], e.results[len(images):])
        raise
    _apply_uploads(collection, cover_file, image_urls, video_urls)

    collection.validate()
    if collection.id:
        api.update_collection(collection.id, collection.to_payload())
    else:
        api.create_collection(collection.to_payload())


@admin_bp.route('/collections', methods=['GET', 'POST'])
@admin_required
def manage_collections():
    """Manage collections - list, add new collections."""
    if request.method == 'POST':
        collection = _collection_from_form()
        try:
            _save_collection(collection)
        except (ValidationError, ApiError) as e:
            flash(e.message, 'danger')
            return render_template('admin/collections.html',
                                   collections=_load_collections(),
                                   form=collection)

        flash(f'Collection "{collection.name}" added successfully.', 'success')
        return redirect(url_for('admin.manage_collections'))

    return render_template('admin/collections.html',
                           collections=_load_collections(),
                           form=Collection())


def _get_editable(collection_id):
    """Collection with its subcategories; ApiError from the main fetch propagates."""
    collection = Collection.from_dict(api.get_collection(collection_id) or {})
    if not collection.subcategories:
        try:
            collection.subcategories = sort_by_display_order(
                [Subcategory.from_dict(s) for s in api.get_subcategories(collection_id) or []])
        except ApiError as e:
            flash(e.message, 'danger')
    return collection


@admin_bp.route('/collections/<collection_id>/edit', methods=['GET', 'POST'])
@admin_required
def edit_collection(collection_id):
    """Edit one collection and its subcategories."""
    try:
        current = _get_editable(collection_id)
    except ApiError as e:
        if e.not_found:
            abort(404)
        flash(e.message, 'danger')
        return redirect(url_for('admin.manage_collections'))

    if request.method == 'POST':
        collection = _collection_from_form(collection_id)
        collection.subcategories = current.subcategories
        try:
            _save_collection(collection)
        except (ValidationError, ApiError) as e:
            flash(e.message, 'danger')
            return render_template('admin/collection_edit.html', form=collection,
                                   subcategory=Subcategory(collection_id=collection_id))

        flash(f'Collection "{collection.name}" updated successfully.', 'success')
        return redirect(url_for('admin.manage_collections'))

    return render_template('admin/collection_edit.html', form=current,
                           subcategory=Subcategory(collection_id=collection_id))


@admin_bp.route('/collections/<collection_id>/delete', methods=['POST'])
@admin_required
def delete_collection(collection_id):
    """Delete a collection."""
    try:
        api.delete_collection(collection_id)
        flash('Collection deleted successfully.', 'success')
    except ApiError as e:
        flash(f'Could not delete collection: {e.message}', 'danger')
    return redirect(url_for('admin.manage_collections'))


@admin_bp.route('/collections/<collection_id>/subcategories', methods=['POST'])
@admin_required
def add_subcategory(collection_id):
    """Create a subcategory of 1 to 5 images under a collection."""
    urls = url_lines(request.form.get('images'))
    files = form_files('image_files')
    subcategory = Subcategory(collection_id=collection_id,
                              name=request.form.get('name', '').strip(),
                              images=urls + [f.filename for f in files])
    kept = urls
    try:
        subcategory.display_order = parse_order(request.form.get('display_order'))
        # Count check runs before anything is uploaded
        subcategory.validate()
        try:
            uploaded, _ = upload_files(images=files)
        except UploadError as e:
            kept = urls + [url for url in e.results if url]
            raise
        subcategory.images = kept = urls + uploaded
        api.create_subcategory(subcategory.to_payload())
    except (ValidationError, ApiError) as e:
        flash(e.message, 'danger')
        # Files cannot be re-filled; keep the typed fields and every URL we have
        subcategory.images = kept
        try:
            current = _get_editable(collection_id)
        except ApiError:
            return redirect(url_for('admin.manage_collections'))
        return render_template('admin/collection_edit.html', form=current, subcategory=subcategory)

    flash(f'Subcategory "{subcategory.name}" added successfully.', 'success')
    return redirect(url_for('admin.edit_collection', collection_id=collection_id))


@admin_bp.route('/subcategories/<subcategory_id>/delete', methods=['POST'])
@admin_required
def delete_subcategory(subcategory_id):
    """Delete a subcategory and return to its collection."""
    collection_id = request.form.get('collection_id')
    try:
        api.delete_subcategory(subcategory_id)
        flash('Subcategory deleted successfully.', 'success')
    except ApiError as e:
        flash(f'Could not delete subcategory: {e.message}', 'danger')

    if collection_id:
        return redirect(url_for('admin.edit_collection', collection_id=collection_id))
    return redirect(url_for('admin.manage_collections'))
