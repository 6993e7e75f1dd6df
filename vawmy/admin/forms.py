"""
Admin Form Helpers

Parsing of submitted admin forms and the upload step that runs before a
record is saved.
"""

from flask import current_app, request
from vawmy.exceptions import ValidationError
from vawmy.extensions import api
from vawmy.services.uploads import selected_files, upload_all, validate_upload


def url_lines(text):
    """One URL per line; blank lines dropped."""
    return [line.strip() for line in (text or '').splitlines() if line.strip()]


def parse_order(value):
    if value in (None, ''):
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError('Display order must be a whole number')


def form_file(name):
    """The named file input, or None when nothing was picked."""
    file = request.files.get(name)
    return file if file and file.filename else None


def form_files(name):
    return selected_files(request.files.getlist(name))


def upload_files(images=(), videos=()):
    """Validate every picked file, then upload them all in parallel.

    Returns ``(image_urls, video_urls)`` in the order the files were given.
    Worker threads run outside the request context, so the client falls back
    to the configured credential, which is the only credential a valid
    session token can hold.
    """
    config = current_app.config
    for file in images:
        validate_upload(file, 'image', config['MAX_IMAGE_SIZE'])
    for file in videos:
        validate_upload(file, 'video', config['MAX_VIDEO_SIZE'])

    jobs = [(api.upload_image, f) for f in images] + [(api.upload_video, f) for f in videos]
    urls = upload_all(lambda job: job[0](job[1])['url'], jobs, max_workers=config['UPLOAD_WORKERS'])
    return urls[:len(images)], urls[len(images):]
