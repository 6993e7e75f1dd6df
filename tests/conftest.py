import json

import pytest

from vawmy import create_app
from vawmy.config import TestConfig
from vawmy.extensions import api


class FakeResponse:
    def __init__(self, status_code=200, body=None):
        self.status_code = status_code
        self._body = body
        self.content = b'' if body is None else json.dumps(body).encode('utf-8')

    def json(self):
        if self._body is None:
            raise ValueError('No JSON body')
        return self._body


class FakeHttp:
    """Stands in for requests.Session: records calls, answers from a route table."""

    def __init__(self, base_url):
        self.base_url = base_url
        self.routes = {}
        self.calls = []

    def on(self, method, path, body=None, status=200):
        self.routes[(method, path)] = (status, body)

    def fail(self, method, path, exc):
        self.routes[(method, path)] = exc

    def handle(self, method, path, handler):
        """``handler(call)`` returns ``(status, body)``."""
        self.routes[(method, path)] = handler

    def serve_uploads(self):
        """Echo each uploaded file's name back as its URL."""
        def echo(call):
            (field, part), = call['files'].items()
            return 200, {'url': f'https://cdn.test/{part[0]}'}
        self.handle('POST', '/api/upload', echo)
        self.handle('POST', '/api/upload-video', echo)

    def request(self, method, url, headers=None, json=None, data=None, files=None, timeout=None):
        path = url[len(self.base_url):]
        call = {'method': method, 'path': path, 'headers': dict(headers or {}),
                'json': json, 'data': data, 'files': files}
        self.calls.append(call)
        route = self.routes.get((method, path), (200, {}))
        if isinstance(route, Exception):
            raise route
        if callable(route):
            route = route(call)
        status, body = route
        return FakeResponse(status, body)

    def find(self, method, path=None):
        return [c for c in self.calls
                if c['method'] == method and (path is None or c['path'] == path)]


@pytest.fixture()
def app():
    return create_app(TestConfig)


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def fake_api(app, monkeypatch):
    fake = FakeHttp(TestConfig.API_URL)
    monkeypatch.setattr(api, 'http', fake)
    return fake


@pytest.fixture()
def admin_client(client, fake_api):
    r = client.post('/admin/login', data={'username': 'admin', 'password': 'changeme'})
    assert r.status_code in (301, 302)
    fake_api.calls.clear()
    return client
