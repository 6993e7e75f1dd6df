"""
Content API Client

Wraps the remote REST service that stores collections, subcategories, blog
posts, social links, contact info and uploaded files. Public reads go out
without credentials; every mutating call carries a Basic Authorization
header built from the admin session token.
"""

import logging

import requests

from vawmy.exceptions import ApiError
from vawmy.services.auth_gate import basic_auth_header, encode_token

logger = logging.getLogger(__name__)


def _file_part(file):
    """Turn a werkzeug FileStorage or a (filename, data, mimetype) tuple into a requests file part."""
    if isinstance(file, tuple):
        return file
    return (file.filename, file.stream, file.mimetype or 'application/octet-stream')


class ApiClient:
    """Single-request, no-retry client for the content API.

    Configured from the Flask app with ``init_app``; ``token_loader`` returns
    the current admin session token (or None) and is consulted on every
    mutating call.
    """

    def __init__(self, base_url=None, username=None, password=None,
                 timeout=None, token_loader=None, http=None):
        self.base_url = (base_url or '').rstrip('/')
        self.username = username
        self.password = password
        self.timeout = timeout
        self.token_loader = token_loader
        self.http = http or requests.Session()

    def init_app(self, app, token_loader=None):
        self.base_url = app.config['API_URL'].rstrip('/')
        self.username = app.config['ADMIN_USERNAME']
        self.password = app.config['ADMIN_PASSWORD']
        self.timeout = app.config.get('API_TIMEOUT')
        if token_loader is not None:
            self.token_loader = token_loader
        app.extensions['api_client'] = self

    # ------------------------------------------------------------------
    # Request plumbing
    # ------------------------------------------------------------------

    def authorization(self):
        token = self.token_loader() if self.token_loader else None
        if not token:
            token = encode_token(self.username, self.password)
        return basic_auth_header(token)

    def _request(self, method, path, error_message, auth=False, json=None, data=None, files=None):
        url = f'{self.base_url}{path}'
        headers = {}
        if auth:
            headers['Authorization'] = self.authorization()

        try:
            resp = self.http.request(method, url, headers=headers, json=json,
                                     data=data, files=files, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.warning('%s %s failed: %s', method, url, e)
            raise ApiError(f'{error_message}: {e}') from e

        body = self._parse_body(resp)
        if not 200 <= resp.status_code < 300:
            message = error_message
            if isinstance(body, dict) and body.get('error'):
                message = body['error']
            logger.warning('%s %s returned %s: %s', method, url, resp.status_code, message)
            raise ApiError(message, status_code=resp.status_code)
        return body

    @staticmethod
    def _parse_body(resp):
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError:
            return None

    # ------------------------------------------------------------------
    # Collections
    # ------------------------------------------------------------------

    def get_collections(self):
        return self._request('GET', '/api/collections', 'Failed to fetch collections')

    def get_collection(self, collection_id):
        return self._request('GET', f'/api/collections/{collection_id}', 'Failed to fetch collection')

    def create_collection(self, data):
        return self._request('POST', '/api/collections', 'Failed to create collection',
                             auth=True, json=data)

    def update_collection(self, collection_id, data):
        return self._request('PUT', f'/api/collections/{collection_id}', 'Failed to update collection',
                             auth=True, json=data)

    def delete_collection(self, collection_id):
        return self._request('DELETE', f'/api/collections/{collection_id}', 'Failed to delete collection',
                             auth=True)

    # ------------------------------------------------------------------
    # Subcategories
    # ------------------------------------------------------------------

    def get_subcategories(self, collection_id):
        return self._request('GET', f'/api/collections/{collection_id}/subcategories',
                             'Failed to fetch subcategories')

    def create_subcategory(self, data):
        return self._request('POST', '/api/subcategories', 'Failed to create subcategory',
                             auth=True, json=data)

    def delete_subcategory(self, subcategory_id):
        return self._request('DELETE', f'/api/subcategories/{subcategory_id}', 'Failed to delete subcategory',
                             auth=True)

    # ------------------------------------------------------------------
    # Blog
    # ------------------------------------------------------------------

    def get_blog_posts(self):
        return self._request('GET', '/api/blog', 'Failed to fetch blog posts')

    def get_blog_post(self, slug):
        return self._request('GET', f'/api/blog/{slug}', 'Failed to fetch blog post')

    def create_blog_post(self, fields, cover_file=None):
        return self._request('POST', '/api/blog', 'Failed to create blog post',
                             auth=True, files=self._blog_parts(fields, cover_file))

    def update_blog_post(self, post_id, fields, cover_file=None):
        return self._request('PUT', f'/api/blog/{post_id}', 'Failed to update blog post',
                             auth=True, files=self._blog_parts(fields, cover_file))

    def delete_blog_post(self, post_id):
        return self._request('DELETE', f'/api/blog/{post_id}', 'Failed to delete blog post',
                             auth=True)

    @staticmethod
    def _blog_parts(fields, cover_file):
        """Every field as a multipart part, so the body is multipart even without a cover."""
        parts = {name: (None, str(value)) for name, value in fields.items() if value is not None}
        if cover_file:
            parts['cover_image'] = _file_part(cover_file)
        return parts

    # ------------------------------------------------------------------
    # Social media
    # ------------------------------------------------------------------

    def get_social_media(self):
        return self._request('GET', '/api/social', 'Failed to fetch social media')

    def get_visible_social_media(self):
        return self._request('GET', '/api/social/visible', 'Failed to fetch visible social media')

    def create_social_media(self, data):
        return self._request('POST', '/api/social', 'Failed to create social media link',
                             auth=True, json=data)

    def update_social_media(self, link_id, data):
        return self._request('PUT', f'/api/social/{link_id}', 'Failed to update social media link',
                             auth=True, json=data)

    def delete_social_media(self, link_id):
        return self._request('DELETE', f'/api/social/{link_id}', 'Failed to delete social media link',
                             auth=True)

    # ------------------------------------------------------------------
    # Contact
    # ------------------------------------------------------------------

    def get_contact(self):
        return self._request('GET', '/api/contact', 'Failed to fetch contact info')

    def update_contact(self, data):
        return self._request('PUT', '/api/contact', 'Failed to update contact info',
                             auth=True, json=data)

    # ------------------------------------------------------------------
    # Uploads
    # ------------------------------------------------------------------

    def upload_image(self, file):
        """Upload one image; the body carries the public ``url``."""
        return self._upload('/api/upload', 'image', file, 'Failed to upload image')

    def upload_video(self, file):
        """Upload one video; the body carries the public ``url``."""
        return self._upload('/api/upload-video', 'video', file, 'Failed to upload video')

    def _upload(self, path, field, file, error_message):
        body = self._request('POST', path, error_message, auth=True,
                             files={field: _file_part(file)})
        if not isinstance(body, dict):
            raise ApiError(error_message)
        if body.get('error'):
            raise ApiError(f"Upload failed: {body['error']}")
        if not body.get('url'):
            raise ApiError(error_message)
        return body
