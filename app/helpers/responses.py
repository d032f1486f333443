"""Response envelope used by every API endpoint."""

from http import HTTPStatus


def api_response(data=None, message: str | None = None, status: int = HTTPStatus.OK):
    """Build a ``{success, message?, data?}`` envelope.

    Returns
    -------
    tuple
        The envelope and the status code, ready to be returned from a resource.
    """
    body = {"success": status < HTTPStatus.BAD_REQUEST}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return body, int(status)


def error_response(message: str, status: int):
    """Build the envelope for a failed request."""
    return {"success": False, "message": message}, int(status)
