"""
Site Routes

Home, collection detail, blog list and blog detail pages.
"""

from flask import abort, render_template
from vawmy.exceptions import ApiError
from vawmy.site import site_bp
from vawmy.site.services import (get_blog_post, get_blog_posts, get_collection_with_subcategories,
                                 get_footer_data, get_sorted_collections)


@site_bp.route('/')
def home():
    """Landing page with every collection in display order"""
    footer = get_footer_data()
    error = None
    try:
        collections = get_sorted_collections()
    except ApiError as e:
        collections = []
        error = e.message

    return render_template('site/home.html',
                           collections=collections,
                           error=error,
                           **footer)


@site_bp.route('/collections/<collection_id>')
def collection_detail(collection_id):
    """Single collection with its subcategory galleries"""
    try:
        collection = get_collection_with_subcategories(collection_id)
    except ApiError as e:
        if e.not_found:
            abort(404)
        return render_template('site/collection_detail.html',
                               collection=None,
                               error=e.message,
                               **get_footer_data())

    return render_template('site/collection_detail.html',
                           collection=collection,
                           error=None,
                           **get_footer_data())


@site_bp.route('/blog')
def blog():
    """Blog index"""
    error = None
    try:
        posts = get_blog_posts()
    except ApiError as e:
        posts = []
        error = e.message

    return render_template('site/blog.html', posts=posts, error=error, **get_footer_data())


@site_bp.route('/blog/<slug>')
def blog_detail(slug):
    """Single blog post"""
    try:
        post = get_blog_post(slug)
    except ApiError as e:
        if e.not_found:
            abort(404)
        return render_template('site/blog_detail.html', post=None, error=e.message, **get_footer_data())

    return render_template('site/blog_detail.html', post=post, error=None, **get_footer_data())
