"""
Admin Decorator
"""

from functools import wraps
from flask import g, redirect, request, url_for
from vawmy.services.auth_gate import AuthState, current_gate


def admin_required(f):
    """Decorator to ensure the request carries a valid admin session token.

    - Runs the auth gate check on every request
    - A stale or mismatched token is dropped and the visitor is sent to the
      login form, keeping the page they asked for in ``next``
    - The checked gate is left on ``g.auth_gate`` for the view
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        gate = current_gate()
        if gate.check() is not AuthState.AUTHENTICATED:
            return redirect(url_for('admin.admin_login', next=request.full_path.rstrip('?')))
        g.auth_gate = gate
        return f(*args, **kwargs)
    return wrapper
