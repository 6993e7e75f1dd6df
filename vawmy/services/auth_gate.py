"""
Admin Auth Gate

Guards the admin panel behind the single shared credential from the app
configuration. The session token is base64("username:password") kept in
the Flask session; it is valid only while it decodes to the currently
configured credential. The token splits on the first ":", so the
configured username must not contain a colon; the password may.

Known limitation: the credential is one deploy-time pair shared by every
admin and the token is a reversible encoding of it. Flask signs the session
cookie but does not encrypt it, so whoever holds the cookie can read the
password. Treat this as an access convenience, not a security boundary.
"""

import base64
import hmac
import logging
import time
from enum import Enum

from flask import current_app, has_request_context, session

logger = logging.getLogger(__name__)

TOKEN_KEY = 'admin_auth'


class AuthState(Enum):
    UNKNOWN = 'unknown'
    AUTHENTICATED = 'authenticated'
    UNAUTHENTICATED = 'unauthenticated'


def encode_token(username, password):
    raw = f'{username}:{password}'.encode('utf-8')
    return base64.b64encode(raw).decode('ascii')


def decode_token(token):
    """Return ``(username, password)`` or raise ValueError."""
    try:
        raw = base64.b64decode(token, validate=True).decode('utf-8')
    except (ValueError, TypeError) as e:
        raise ValueError(f'Malformed admin token: {e}') from e
    username, sep, password = raw.partition(':')
    if not sep:
        raise ValueError('Malformed admin token: missing separator')
    return username, password


def basic_auth_header(token):
    return f'Basic {token}'


def _same(a, b):
    return hmac.compare_digest(a.encode('utf-8'), b.encode('utf-8'))


class AuthGate:
    """Unknown -> Authenticated | Unauthenticated state machine over a token store.

    ``store`` is any mutable mapping: the Flask session in the app, a plain
    dict in tests.
    """

    def __init__(self, store, username, password, login_delay=0.0):
        self.store = store
        self.username = username
        self.password = password
        self.login_delay = login_delay
        self.state = AuthState.UNKNOWN

    @classmethod
    def from_config(cls, store, config):
        return cls(store,
                   config['ADMIN_USERNAME'],
                   config['ADMIN_PASSWORD'],
                   login_delay=config.get('LOGIN_DELAY_SECONDS', 0.0))

    @property
    def is_authenticated(self):
        return self.state is AuthState.AUTHENTICATED

    @property
    def token(self):
        return self.store.get(TOKEN_KEY)

    def matches(self, username, password):
        return _same(username, self.username) and _same(password, self.password)

    def check(self):
        """Validate the stored token against the configured credential."""
        token = self.token
        if not token:
            self.state = AuthState.UNAUTHENTICATED
            return self.state

        try:
            username, password = decode_token(token)
        except ValueError as e:
            logger.warning('Discarding unreadable admin token: %s', e)
            self._invalidate()
            return self.state

        if self.matches(username, password):
            self.state = AuthState.AUTHENTICATED
        else:
            logger.warning('Stored admin token no longer matches the configured credential')
            self._invalidate()
        return self.state

    def login(self, username, password):
        if self.login_delay:
            time.sleep(self.login_delay)

        if self.matches(username or '', password or ''):
            self.store[TOKEN_KEY] = encode_token(username, password)
            self.state = AuthState.AUTHENTICATED
            logger.info('Admin %s signed in', username)
            return True

        self.state = AuthState.UNAUTHENTICATED
        logger.warning('Failed admin sign-in for %r', username)
        return False

    def logout(self):
        self._invalidate()
        logger.info('Admin signed out')

    def refresh_credentials(self):
        """Overwrite the stored token with one derived from the configured credential."""
        self.store[TOKEN_KEY] = encode_token(self.username, self.password)
        self.state = AuthState.AUTHENTICATED
        return self.store[TOKEN_KEY]

    def _invalidate(self):
        self.store.pop(TOKEN_KEY, None)
        self.state = AuthState.UNAUTHENTICATED


def current_gate():
    """Auth gate bound to the current request's session."""
    return AuthGate.from_config(session, current_app.config)


def current_admin_token():
    """The session token when it is still valid, otherwise None."""
    if not has_request_context():
        return None
    gate = current_gate()
    if gate.check() is AuthState.AUTHENTICATED:
        return gate.token
    return None
