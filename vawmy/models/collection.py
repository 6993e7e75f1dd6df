"""
Collection and Subcategory Models
"""

from dataclasses import dataclass, field
from typing import List, Optional

from vawmy.exceptions import ValidationError


def _int(value, default=0):
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


@dataclass
class Subcategory:
    """A small grouping of images within a collection"""
    MAX_IMAGES = 5

    id: Optional[str] = None
    collection_id: Optional[str] = None
    name: str = ''
    images: List[str] = field(default_factory=list)
    display_order: int = 0

    @classmethod
    def from_dict(cls, data):
        return cls(id=data.get('id'),
                   collection_id=data.get('collection_id'),
                   name=data.get('name') or '',
                   images=list(data.get('images') or []),
                   display_order=_int(data.get('display_order')))

    def validate(self):
        if not self.name.strip():
            raise ValidationError('Subcategory name is required')
        if not 1 <= len(self.images) <= self.MAX_IMAGES:
            raise ValidationError(f'A subcategory needs between 1 and {self.MAX_IMAGES} images')

    def to_payload(self):
        return {
            'collection_id': self.collection_id,
            'name': self.name,
            'images': list(self.images),
            'display_order': self.display_order
        }


@dataclass
class Collection:
    """A named gallery of curtain/decor images"""
    id: Optional[str] = None
    name: str = ''
    description: str = ''
    cover_image: str = ''
    images: List[str] = field(default_factory=list)
    video_url: Optional[str] = None
    display_order: int = 0
    subcategories: List[Subcategory] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data):
        subcategories = [Subcategory.from_dict(s) for s in data.get('subcategories') or []]
        return cls(id=data.get('id'),
                   name=data.get('name') or '',
                   description=data.get('description') or '',
                   cover_image=data.get('cover_image') or '',
                   images=list(data.get('images') or []),
                   video_url=data.get('video_url') or None,
                   display_order=_int(data.get('display_order')),
                   subcategories=sort_by_display_order(subcategories))

    def validate(self, cover_pending=False):
        """``cover_pending`` accepts a cover file that has not been uploaded yet."""
        if not self.name.strip():
            raise ValidationError('Collection name is required')
        if not self.cover_image and not cover_pending:
            raise ValidationError('Please upload a cover image')

    def to_payload(self):
        return {
            'name': self.name,
            'description': self.description,
            'cover_image': self.cover_image,
            'images': list(self.images),
            'video_url': self.video_url,
            'display_order': self.display_order
        }


def sort_by_display_order(items):
    """Stable sort of sibling records by display order."""
    return sorted(items, key=lambda item: item.display_order or 0)
