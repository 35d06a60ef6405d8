# -*- coding: utf-8 -*-
"""
dospace.exceptions
~~~~~~~~~~~~~~~~~~

Exceptions raised by the Spaces client.
"""


class SpacesError(Exception):
    """Base class for every error raised by dospace."""


class ConfigurationError(SpacesError, ValueError):
    """Missing or invalid client configuration, raised before any work is done."""


class DOSpaceError(SpacesError):
    """
    A request to the storage service failed.

    Transport failures (connection, TLS, timeout) carry a status code of 0.
    Protocol failures carry the exact status code, reason phrase, headers and
    body returned by the service.

    Args:
        status_code (int): HTTP status code, or 0 when no response was received
        reason_phrase (str): HTTP reason phrase or a short failure category
        response_headers (dict): Response headers (empty for transport failures)
        response_body (str): Raw response body or a descriptive message
    """

    def __init__(self, status_code, reason_phrase, response_headers, response_body):
        super(DOSpaceError, self).__init__(
            status_code, reason_phrase, response_headers, response_body
        )
        self.status_code = status_code
        self.reason_phrase = reason_phrase
        self.response_headers = response_headers
        self.response_body = response_body

    @property
    def is_transport_error(self):
        """True when the request never produced an HTTP response."""
        return self.status_code == 0

    def __str__(self):
        return (
            'DOSpaceError {{ statusCode: {0}, reasonPhrase: "{1}", '
            'responseBody: "{2}" }}'.format(
                self.status_code, self.reason_phrase, self.response_body
            )
        )
