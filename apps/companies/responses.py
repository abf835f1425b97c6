"""
HTTP response helpers.

Every response body uses the envelope {code, status, content}; content is
the payload on success and the error message on failure. 204 responses
carry no body.
"""

from http import HTTPStatus

from rest_framework import status
from rest_framework.response import Response


def envelope(code, content):
    return Response(
        {
            'code': code,
            'status': HTTPStatus(code).phrase,
            'content': content,
        },
        status=code
    )


def error_message(err):
    return getattr(err, 'message', None) or str(err)


def status_ok(content):
    return envelope(status.HTTP_200_OK, content)


def status_created(content):
    return envelope(status.HTTP_201_CREATED, content)


def status_no_content():
    return Response(status=status.HTTP_204_NO_CONTENT)


def status_bad_request(err):
    return envelope(status.HTTP_400_BAD_REQUEST, error_message(err))


def status_unauthorized(err):
    return envelope(status.HTTP_401_UNAUTHORIZED, error_message(err))


def status_not_found(err):
    return envelope(status.HTTP_404_NOT_FOUND, error_message(err))


def status_conflict(err):
    return envelope(status.HTTP_409_CONFLICT, error_message(err))


def status_internal_server_error(err):
    return envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, error_message(err))
