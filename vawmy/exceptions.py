"""
Exceptions shared by the API client, the upload helpers and the views.
"""


class ApiError(Exception):
    """A call to the content API failed.

    ``status_code`` is None when the request never got a response
    (connection refused, DNS failure, timeout).
    """

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    @property
    def not_found(self):
        return self.status_code == 404


class UploadError(ApiError):
    """One or more files in a batch failed to upload.

    ``results`` holds one entry per file in input order: the upload result,
    or None where that file failed.
    """

    def __init__(self, message, results, status_code=None):
        super().__init__(message, status_code=status_code)
        self.results = results


class ValidationError(Exception):
    """Submitted data was rejected before reaching the API."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message
