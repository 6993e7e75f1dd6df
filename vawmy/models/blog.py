"""
Blog Post Model
"""

from dataclasses import dataclass
from typing import Optional

from vawmy.exceptions import ValidationError
from vawmy.services.slug import slugify

DEFAULT_AUTHOR = 'Vawmy Team'


@dataclass
class BlogPost:
    """Blog post as served by the content API"""
    id: Optional[str] = None
    title: str = ''
    slug: str = ''
    excerpt: str = ''
    content: str = ''
    cover_image: str = ''
    author: str = DEFAULT_AUTHOR
    published_date: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        return cls(id=data.get('id'),
                   title=data.get('title') or '',
                   slug=data.get('slug') or '',
                   excerpt=data.get('excerpt') or '',
                   content=data.get('content') or '',
                   cover_image=data.get('cover_image') or '',
                   author=data.get('author') or '',
                   published_date=data.get('published_date'),
                   created_at=data.get('created_at'),
                   updated_at=data.get('updated_at'))

    def validate(self):
        if not self.title.strip():
            raise ValidationError('Title is required')
        if not self.slug:
            raise ValidationError('Slug is required')
        if slugify(self.slug) != self.slug:
            raise ValidationError('Slug may only contain lowercase letters, digits and hyphens')
        if not self.content.strip():
            raise ValidationError('Content is required')

    def form_fields(self, cover_image_url=None):
        """Multipart text fields; the cover file, if any, travels separately."""
        fields = {
            'title': self.title,
            'slug': self.slug,
            'excerpt': self.excerpt,
            'content': self.content,
            'author': self.author
        }
        if cover_image_url:
            fields['cover_image_url'] = cover_image_url
        return fields
