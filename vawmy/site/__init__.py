"""
Site Blueprint

Read-only public pages.
"""

from flask import Blueprint

site_bp = Blueprint('site', __name__)

from vawmy.site import routes  # noqa: E402, F401
