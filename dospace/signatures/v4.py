# -*- coding: utf-8 -*-
"""
dospace.signatures.v4
~~~~~~~~~~~~~~~~~~~~~

AWS Signature Version 4 implementation.

Requests can be signed two ways: with an ``Authorization`` header
(:meth:`SignatureV4.sign_headers`), or as a pre-signed URL carrying the
signature and its expiry in the query string (:meth:`SignatureV4.sign_url`).
Both share the same canonicalization and key derivation.
"""

import hashlib
import hmac
import logging
from urllib.parse import urlsplit, urlunsplit

from .. import datetime_utils
from ..exceptions import ConfigurationError
from .base import BaseSignature
from .canonical import (
    UNSIGNED_PAYLOAD,
    CanonicalRequest,
    canonical_query_string,
    query_parameters,
)

logger = logging.getLogger(__name__)

ALGORITHM = "AWS4-HMAC-SHA256"
TERMINATOR = "aws4_request"
DEFAULT_EXPIRES = 86400

DEFAULT_PORTS = {"http": 80, "https": 443}


def _host_from_url(url):
    """Return the ``host`` header value for ``url``, keeping non-default ports."""
    parts = urlsplit(url)
    host = parts.netloc.rpartition("@")[2]
    port = parts.port
    if port is not None and DEFAULT_PORTS.get(parts.scheme) == port:
        host = host[: -len(":{0}".format(port))]
    return host


class SignatureV4(BaseSignature):
    """
    AWS Signature Version 4 implementation.

    The signer only reads its credentials, so one instance can sign from
    many threads at once.
    """

    def sign_request(self, request):
        """
        Sign request using an ``Authorization`` header.

        Same as :meth:`sign_headers` with no payload hash.
        """
        return self.sign_headers(request)

    def sign_headers(self, request, content_sha256=None, timestamp=None):
        """
        Return a signed copy of ``request``.

        The copy gets ``x-amz-date``, ``x-amz-content-sha256`` (only when
        ``content_sha256`` is given) and ``Authorization``. The ``host``
        header is always signed, whether or not the request carries one.
        ``request`` itself is left untouched.

        Args:
            request: Object with ``method``, ``url``, ``headers`` and ``copy()``
            content_sha256 (str, optional): Hex SHA-256 of the request body
            timestamp (datetime, optional): Signing time, defaults to now (UTC)

        Returns:
            A new request object of the same type, with auth headers set
        """
        timestamp = timestamp or datetime_utils.get_utc_datetime()
        request_date = datetime_utils.amz_date(timestamp)

        signed = request.copy()
        signed.headers["x-amz-date"] = request_date
        if content_sha256:
            signed.headers["x-amz-content-sha256"] = content_sha256

        headers = dict((k.lower(), v) for k, v in signed.headers.items())
        headers["host"] = _host_from_url(signed.url)

        canonical_request = CanonicalRequest(
            signed.method,
            urlsplit(signed.url).path,
            query_parameters(signed.url),
            headers,
            content_sha256,
        )
        signature = self._sign(canonical_request, timestamp)

        signed.headers["Authorization"] = (
            "{0} Credential={1}, SignedHeaders={2}, Signature={3}".format(
                ALGORITHM,
                self._credential(timestamp),
                canonical_request.signed_headers,
                signature,
            )
        )
        return signed

    def sign_url(
        self, request, expires=DEFAULT_EXPIRES, content_sha256=None, timestamp=None
    ):
        """
        Build a pre-signed URL for ``request``.

        The URL carries the ``X-Amz-*`` authentication parameters and can be
        used without any extra headers until ``expires`` seconds have passed.
        Only ``host`` is signed, and the payload is always treated as
        ``UNSIGNED-PAYLOAD``; a supplied ``content_sha256`` is passed along as
        ``X-Amz-Content-Sha256`` only. ``request`` is not modified.

        Args:
            request: Object with ``method`` and ``url``
            expires (int): Validity window in seconds
            content_sha256 (str, optional): Hex SHA-256 of the request body
            timestamp (datetime, optional): Signing time, defaults to now (UTC)

        Returns:
            str: The pre-signed URL

        Raises:
            ConfigurationError: If ``expires`` is not a positive integer
        """
        if isinstance(expires, bool) or not isinstance(expires, int) or expires <= 0:
            raise ConfigurationError(
                "expires must be a positive number of seconds, got {0!r}".format(
                    expires
                )
            )
        timestamp = timestamp or datetime_utils.get_utc_datetime()
        url = request.url
        parts = urlsplit(url)
        headers = {"host": _host_from_url(url)}

        params = query_parameters(url)
        params["X-Amz-Algorithm"] = ALGORITHM
        params["X-Amz-Credential"] = self._credential(timestamp)
        params["X-Amz-Date"] = datetime_utils.amz_date(timestamp)
        params["X-Amz-Expires"] = str(expires)
        if content_sha256:
            params["X-Amz-Content-Sha256"] = content_sha256
        params["X-Amz-SignedHeaders"] = "host"

        canonical_request = CanonicalRequest(
            request.method, parts.path, params, headers, UNSIGNED_PAYLOAD
        )
        signature = self._sign(canonical_request, timestamp)

        query = "{0}&X-Amz-Signature={1}".format(
            canonical_query_string(params), signature
        )
        return urlunsplit((parts.scheme, parts.netloc, parts.path or "/", query, ""))

    def _credential(self, timestamp):
        """Return ``accessKey/dateStamp/region/service/aws4_request``."""
        return "{0}/{1}".format(
            self.credentials.access_key, self._credential_scope(timestamp)
        )

    def _credential_scope(self, timestamp):
        return "{0}/{1}/{2}/{3}".format(
            datetime_utils.date_stamp(timestamp),
            self.region,
            self.service,
            TERMINATOR,
        )

    def _sign(self, canonical_request, timestamp):
        string_to_sign = self._create_string_to_sign(canonical_request, timestamp)
        logger.debug("Canonical request:\n%s", canonical_request)
        logger.debug("String to sign:\n%s", string_to_sign)
        return self._calculate_signature(
            string_to_sign, datetime_utils.date_stamp(timestamp)
        )

    def _create_string_to_sign(self, canonical_request, timestamp):
        """
        Create the string to sign for Signature Version 4.

        Args:
            canonical_request (CanonicalRequest): The canonicalized request
            timestamp (datetime): Signing time

        Returns:
            str: String to sign
        """
        return "\n".join(
            [
                ALGORITHM,
                datetime_utils.amz_date(timestamp),
                self._credential_scope(timestamp),
                canonical_request.hexdigest(),
            ]
        )

    def _get_signing_key(self, date_stamp):
        """Derive the date, region and service scoped signing key."""

        def _sign(key, msg):
            return hmac.new(key, msg.encode("utf-8"), hashlib.sha256).digest()

        secret = ("AWS4" + self.credentials.secret_key).encode("utf-8")
        k_date = _sign(secret, date_stamp)
        k_region = _sign(k_date, self.region)
        k_service = _sign(k_region, self.service)
        return _sign(k_service, TERMINATOR)

    def _calculate_signature(self, string_to_sign, date_stamp):
        """
        Calculate the signature using the signing key.

        Args:
            string_to_sign (str): The string to sign
            date_stamp (str): Date stamp (YYYYMMDD)

        Returns:
            str: Hex-encoded signature
        """
        return hmac.new(
            self._get_signing_key(date_stamp),
            string_to_sign.encode("utf-8"),
            hashlib.sha256,
        ).hexdigest()
