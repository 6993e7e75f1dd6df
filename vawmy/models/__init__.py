"""
Models Package

Exports all models for easy importing.
"""

from vawmy.models.collection import Collection, Subcategory, sort_by_display_order
from vawmy.models.blog import BlogPost
from vawmy.models.social import ICON_CHOICES, ICON_NAMES, SocialMedia
from vawmy.models.contact import ContactInfo

__all__ = ['Collection', 'Subcategory', 'sort_by_display_order', 'BlogPost',
           'ICON_CHOICES', 'ICON_NAMES', 'SocialMedia', 'ContactInfo']
