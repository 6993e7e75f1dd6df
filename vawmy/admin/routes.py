"""
Admin Routes

Login, logout, credential refresh and the single-file upload endpoints the
admin forms call as soon as a file is picked.
"""

from flask import current_app, flash, g, jsonify, redirect, render_template, request, url_for
from vawmy.admin import admin_bp
from vawmy.admin.decorators import admin_required
from vawmy.exceptions import ApiError, ValidationError
from vawmy.extensions import api
from vawmy.services.auth_gate import AuthState, current_gate
from vawmy.services.uploads import validate_upload


def _safe_next(target):
    """Only follow local redirect targets."""
    if target and target.startswith('/') and not target.startswith('//'):
        return target
    return None


@admin_bp.route('/login', methods=['GET', 'POST'])
def admin_login():
    """Admin login form against the configured credential."""
    gate = current_gate()
    next_page = _safe_next(request.values.get('next'))

    if gate.check() is AuthState.AUTHENTICATED:
        return redirect(next_page or url_for('admin.admin_index'))

    if request.method == 'POST':
        username = request.form.get('username', '')
        password = request.form.get('password', '')

        if not username or not password:
            return render_template('admin/login.html',
                                   error='Please enter both username and password.',
                                   username=username, next=next_page)

        if gate.login(username, password):
            flash('Welcome, Administrator!', 'success')
            return redirect(next_page or url_for('admin.admin_index'))

        # Keep the username, clear the password
        return render_template('admin/login.html',
                               error='Invalid username or password',
                               username=username, next=next_page)

    return render_template('admin/login.html', error=None, username='', next=next_page)


@admin_bp.route('/logout', methods=['GET', 'POST'])
def admin_logout():
    """Drop the admin token."""
    current_gate().logout()
    flash('You have been logged out of the admin panel.', 'info')
    return redirect(url_for('admin.admin_login'))


@admin_bp.route('/refresh-credentials', methods=['POST'])
@admin_required
def refresh_credentials():
    """Re-derive the stored token from the configured credential and reload."""
    g.auth_gate.refresh_credentials()
    flash('Credentials refreshed.', 'info')
    return redirect(_safe_next(request.form.get('next')) or url_for('admin.admin_index'))


@admin_bp.route('/')
@admin_required
def admin_index():
    return redirect(url_for('admin.manage_collections'))


def _proxy_upload(kind, upload, max_size):
    file = request.files.get(kind)
    try:
        validate_upload(file, kind, max_size)
        body = upload(file)
    except ValidationError as e:
        return jsonify({'error': e.message}), 400
    except ApiError as e:
        return jsonify({'error': e.message}), 502
    return jsonify({'url': body['url']})


@admin_bp.route('/upload', methods=['POST'])
@admin_required
def upload_image():
    """Upload one image immediately and hand its URL back to the form."""
    return _proxy_upload('image', api.upload_image, current_app.config['MAX_IMAGE_SIZE'])


@admin_bp.route('/upload-video', methods=['POST'])
@admin_required
def upload_video():
    """Upload one video immediately and hand its URL back to the form."""
    return _proxy_upload('video', api.upload_video, current_app.config['MAX_VIDEO_SIZE'])
