"""
Site Services

Fetch-and-shape helpers for the public pages.
"""

import logging

from vawmy.exceptions import ApiError
from vawmy.extensions import api
from vawmy.models import (BlogPost, Collection, ContactInfo, SocialMedia, Subcategory,
                          sort_by_display_order)

logger = logging.getLogger(__name__)


def get_footer_data():
    """Contact info and visible social links for the page footer.

    The footer is decoration; a failure here is logged and the page renders
    without it.
    """
    contact = ContactInfo()
    social_links = []

    try:
        contact = ContactInfo.from_dict(api.get_contact())
    except ApiError as e:
        logger.warning('Footer contact unavailable: %s', e)

    try:
        social_links = sort_by_display_order(
            [SocialMedia.from_dict(s) for s in api.get_visible_social_media() or []])
    except ApiError as e:
        logger.warning('Footer social links unavailable: %s', e)

    return {'contact': contact, 'social_links': social_links}


def get_sorted_collections():
    return sort_by_display_order([Collection.from_dict(c) for c in api.get_collections() or []])


def get_collection_with_subcategories(collection_id):
    """Load a collection; fetch its subcategories separately if it carries none."""
    collection = Collection.from_dict(api.get_collection(collection_id) or {})
    if not collection.subcategories:
        try:
            subcategories = [Subcategory.from_dict(s) for s in api.get_subcategories(collection_id) or []]
            collection.subcategories = sort_by_display_order(subcategories)
        except ApiError as e:
            logger.warning('Subcategories for collection %s unavailable: %s', collection_id, e)
    return collection


def get_blog_posts():
    return [BlogPost.from_dict(p) for p in api.get_blog_posts() or []]


def get_blog_post(slug):
    return BlogPost.from_dict(api.get_blog_post(slug) or {})
