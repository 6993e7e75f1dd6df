"""
Social Media Link Model
"""

from dataclasses import dataclass
from typing import Optional

from vawmy.exceptions import ValidationError

# Recognised icon identifiers and their labels, in menu order
ICON_CHOICES = [
    ('facebook', 'Facebook'),
    ('instagram', 'Instagram'),
    ('twitter', 'Twitter'),
    ('linkedin', 'LinkedIn'),
    ('youtube', 'YouTube'),
    ('pinterest', 'Pinterest')
]
ICON_NAMES = [value for value, _ in ICON_CHOICES]


@dataclass
class SocialMedia:
    """Social media link shown in the site footer"""
    id: Optional[int] = None
    platform: str = ''
    url: str = ''
    icon_name: str = 'facebook'
    is_visible: bool = True
    display_order: int = 0
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        try:
            display_order = int(data.get('display_order') or 0)
        except (TypeError, ValueError):
            display_order = 0
        return cls(id=data.get('id'),
                   platform=data.get('platform') or '',
                   url=data.get('url') or '',
                   icon_name=data.get('icon_name') or 'facebook',
                   is_visible=bool(data.get('is_visible', True)),
                   display_order=display_order,
                   created_at=data.get('created_at'),
                   updated_at=data.get('updated_at'))

    def validate(self):
        if not self.platform.strip():
            raise ValidationError('Platform name is required')
        if not self.url.startswith(('http://', 'https://')):
            raise ValidationError('Please enter a valid URL')
        if self.icon_name not in ICON_NAMES:
            raise ValidationError(f'Unknown icon "{self.icon_name}"')

    def to_payload(self):
        payload = {
            'platform': self.platform,
            'url': self.url,
            'icon_name': self.icon_name,
            'is_visible': self.is_visible,
            'display_order': self.display_order
        }
        if self.id is not None:
            payload['id'] = self.id
        if self.created_at:
            payload['created_at'] = self.created_at
        if self.updated_at:
            payload['updated_at'] = self.updated_at
        return payload

    def toggled_payload(self):
        """The full record with only the visibility flag flipped."""
        payload = self.to_payload()
        payload['is_visible'] = not self.is_visible
        return payload
