"""
Admin Blog Routes
"""

from flask import abort, current_app, flash, redirect, render_template, request, url_for
from vawmy.admin import admin_bp
from vawmy.admin.decorators import admin_required
from vawmy.admin.forms import form_file
from vawmy.exceptions import ApiError, ValidationError
from vawmy.extensions import api
from vawmy.models import BlogPost
from vawmy.services.slug import slugify
from vawmy.services.uploads import validate_upload


def _fetch_posts():
    return [BlogPost.from_dict(p) for p in api.get_blog_posts() or []]


def _load_posts():
    try:
        return _fetch_posts()
    except ApiError as e:
        flash(e.message, 'danger')
        return []


def _post_from_form(post_id=None):
    """Blog post from the submitted fields; a blank slug is derived from the title."""
    form = request.form
    title = form.get('title', '').strip()
    slug = slugify(form.get('slug', '')) or slugify(title)
    return BlogPost(id=post_id,
                    title=title,
                    slug=slug,
                    excerpt=form.get('excerpt', '').strip(),
                    content=form.get('content', ''),
                    author=form.get('author', '').strip(),
                    cover_image=form.get('cover_image_url', '').strip())


def _save_post(post):
    cover_file = form_file('cover_file')
    if cover_file:
        validate_upload(cover_file, 'image', current_app.config['MAX_IMAGE_SIZE'])
    post.validate()

    fields = post.form_fields(cover_image_url=None if cover_file else post.cover_image)
    if post.id:
        api.update_blog_post(post.id, fields, cover_file=cover_file)
    else:
        api.create_blog_post(fields, cover_file=cover_file)


@admin_bp.route('/blog', methods=['GET', 'POST'])
@admin_required
def manage_blog():
    """List blog posts and create new ones."""
    if request.method == 'POST':
        post = _post_from_form()
        try:
            _save_post(post)
        except (ValidationError, ApiError) as e:
            flash(e.message, 'danger')
            return render_template('admin/blog.html', posts=_load_posts(), form=post, editing=False)

        flash('Blog post created successfully!', 'success')
        return redirect(url_for('admin.manage_blog'))

    return render_template('admin/blog.html', posts=_load_posts(), form=BlogPost(), editing=False)


@admin_bp.route('/blog/<post_id>/edit', methods=['GET', 'POST'])
@admin_required
def edit_blog_post(post_id):
    """Edit one blog post; the list is the only lookup by id the API offers."""
    try:
        posts = _fetch_posts()
    except ApiError as e:
        flash(e.message, 'danger')
        return redirect(url_for('admin.manage_blog'))

    current = next((p for p in posts if str(p.id) == post_id), None)
    if current is None:
        abort(404)

    if request.method == 'POST':
        post = _post_from_form(current.id)
        try:
            _save_post(post)
        except (ValidationError, ApiError) as e:
            flash(e.message, 'danger')
            return render_template('admin/blog.html', posts=posts, form=post, editing=True)

        flash('Blog post updated successfully!', 'success')
        return redirect(url_for('admin.manage_blog'))

    return render_template('admin/blog.html', posts=posts, form=current, editing=True)


@admin_bp.route('/blog/<post_id>/delete', methods=['POST'])
@admin_required
def delete_blog_post(post_id):
    try:
        api.delete_blog_post(post_id)
        flash('Blog post deleted successfully!', 'success')
    except ApiError as e:
        flash(f'Failed to delete blog post: {e.message}', 'danger')
    return redirect(url_for('admin.manage_blog'))
