# -*- coding: utf-8 -*-
"""
dospace.signatures.canonical
~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Canonical request construction for AWS Signature Version 4.

Every piece here must match the service byte for byte: a different sort
order, letter case or whitespace rule yields a signature the server rejects.
"""

import hashlib
from urllib.parse import parse_qsl, quote_plus, urlsplit

UNSIGNED_PAYLOAD = "UNSIGNED-PAYLOAD"


def uri_encode(value):
    """
    Form-encode a query key or value, with spaces as ``%20`` instead of ``+``.

    Args:
        value (str): Raw (decoded) key or value

    Returns:
        str: Percent-encoded string
    """
    return quote_plus(str(value), safe="").replace("+", "%20")


def collapse_whitespace(value):
    """
    Trim a header value and collapse runs of spaces to a single space.

    The replacement is repeated until the value stops changing, since a
    single pass of ``"  " -> " "`` leaves runs of three or more spaces
    partly collapsed.
    """
    result = str(value).strip()
    while True:
        collapsed = result.replace("  ", " ")
        if collapsed == result:
            return result
        result = collapsed


def hash_payload(body):
    """Return the hex SHA-256 digest of a ``bytes`` or ``str`` body."""
    if body is None:
        body = b""
    if isinstance(body, str):
        body = body.encode("utf-8")
    return hashlib.sha256(body).hexdigest()


def query_parameters(url):
    """
    Parse the query of ``url`` into a dict of decoded keys and values.

    Blank values are kept. When a key repeats, the last value wins.
    """
    return dict(parse_qsl(urlsplit(url).query, keep_blank_values=True))


def canonical_query_string(params):
    """Encode and sort ``params`` into the canonical query string."""
    if not params:
        return ""
    pairs = sorted((uri_encode(k), uri_encode(v)) for k, v in params.items())
    return "&".join("{0}={1}".format(k, v) for k, v in pairs)


def normalize_headers(headers):
    """Lower-case header names and collapse their values; drops ``authorization``."""
    normalized = {}
    for key, value in headers.items():
        key_lower = key.lower()
        if key_lower == "authorization":
            continue
        normalized[key_lower] = collapse_whitespace(value)
    return normalized


def canonical_headers(headers):
    """
    Render normalized headers as the canonical headers block.

    Returns:
        str: ``name:value\\n`` lines sorted by name, with no separator
    """
    return "".join(
        "{0}:{1}\n".format(key, headers[key]) for key in sorted(headers.keys())
    )


def signed_headers(headers):
    """Return the sorted header names joined with ``;``."""
    return ";".join(sorted(headers.keys()))


class CanonicalRequest(object):
    """
    The canonical form of a request, as hashed into the string to sign.

    Args:
        method (str): HTTP method
        path (str): Request path, already percent-encoded
        params (dict): Decoded query parameters
        headers (dict): Header name to value mapping
        payload_hash (str, optional): Hex SHA-256 of the body; defaults to
            ``UNSIGNED-PAYLOAD``
    """

    def __init__(self, method, path, params, headers, payload_hash=None):
        normalized = normalize_headers(headers)
        self.method = method.upper()
        self.uri = path or "/"
        self.query_string = canonical_query_string(params)
        self.headers = canonical_headers(normalized)
        self.signed_headers = signed_headers(normalized)
        self.payload_hash = payload_hash or UNSIGNED_PAYLOAD

    def __str__(self):
        return "\n".join(
            [
                self.method,
                self.uri,
                self.query_string,
                self.headers,
                self.signed_headers,
                self.payload_hash,
            ]
        )

    def hexdigest(self):
        """Hex SHA-256 of the canonical request string."""
        return hashlib.sha256(str(self).encode("utf-8")).hexdigest()

    def __repr__(self):
        return "<CanonicalRequest [{0} {1}]>".format(self.method, self.uri)
