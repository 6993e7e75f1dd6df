"""
Contact Info Model
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ContactInfo:
    """Singleton contact record"""
    id: Optional[int] = None
    email: str = ''
    phone: str = ''
    address: str = ''
    hours: str = ''

    @classmethod
    def from_dict(cls, data):
        data = data or {}
        return cls(id=data.get('id'),
                   email=data.get('email') or '',
                   phone=data.get('phone') or '',
                   address=data.get('address') or '',
                   hours=data.get('hours') or '')

    def to_payload(self):
        return {
            'email': self.email,
            'phone': self.phone,
            'address': self.address,
            'hours': self.hours
        }
