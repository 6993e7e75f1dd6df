"""
Slug Service

URL-safe slugs for blog posts.
"""

import re

_NON_ALNUM = re.compile(r'[^a-z0-9]+')


def slugify(text):
    """Lowercase, collapse every non-alphanumeric run to one hyphen, trim hyphens.

    >>> slugify('Hello, World!')
    'hello-world'
    """
    if not text:
        return ''
    return _NON_ALNUM.sub('-', text.lower()).strip('-')
