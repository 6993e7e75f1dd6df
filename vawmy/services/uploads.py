"""
Upload Service

Client-side checks for image/video files and the fan-out/join helper used
when a form carries several files at once.
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor, wait

from vawmy.exceptions import UploadError, ValidationError

logger = logging.getLogger(__name__)

KIND_LABELS = {'image': 'an image', 'video': 'a video'}


def file_size(file):
    """Size in bytes of an uploaded werkzeug FileStorage, leaving the stream rewound."""
    stream = file.stream
    pos = stream.tell()
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(pos)
    return size


def validate_upload(file, kind, max_size):
    """Reject missing files, the wrong MIME family, and oversized files."""
    if not file or not file.filename:
        raise ValidationError(f'Please choose {KIND_LABELS[kind]} file')

    mimetype = file.mimetype or ''
    if not mimetype.startswith(f'{kind}/'):
        raise ValidationError(f'Please upload {KIND_LABELS[kind]} file')

    if file_size(file) > max_size:
        limit_mb = max_size // (1024 * 1024)
        raise ValidationError(f'File size must be less than {limit_mb}MB')


def selected_files(files):
    """Drop the empty parts browsers send for untouched file inputs."""
    return [f for f in files if f and f.filename]


def upload_all(upload, files, max_workers=4):
    """Upload every file in parallel and return the results in input order.

    All uploads are allowed to finish. If any failed, UploadError is raised
    with the first failure's message and the results of the uploads that
    did succeed, so their URLs are not lost.
    """
    files = list(files)
    if not files:
        return []

    with ThreadPoolExecutor(max_workers=max(1, min(max_workers, len(files)))) as pool:
        futures = [pool.submit(upload, f) for f in files]
        wait(futures)

    results = []
    first_error = None
    for future in futures:
        error = future.exception()
        if error is None:
            results.append(future.result())
            continue
        logger.warning('Upload failed: %s', error)
        results.append(None)
        first_error = first_error or error

    if first_error is not None:
        raise UploadError(getattr(first_error, 'message', str(first_error)), results,
                          status_code=getattr(first_error, 'status_code', None)) from first_error
    return results
