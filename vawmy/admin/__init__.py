"""
Admin Blueprint

Admin access is gated by the single shared credential from the app
configuration; see vawmy.services.auth_gate for the known limitations.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from vawmy.admin import routes, collections, blog, social, contact  # noqa: E402, F401
