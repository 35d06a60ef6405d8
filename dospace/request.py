# -*- coding: utf-8 -*-
"""
dospace.request
~~~~~~~~~~~~~~~

A minimal description of an HTTP request that can be signed.
"""

from requests.structures import CaseInsensitiveDict


class Request(object):
    """
    An HTTP request to be signed.

    Mirrors the attributes of :class:`requests.PreparedRequest` that the
    signer reads (``method``, ``url``, ``headers`` and ``copy()``), so either
    can be handed to :class:`~dospace.signatures.v4.SignatureV4`.

    Args:
        method (str): HTTP method
        url (str): Absolute URL, including any query parameters to sign
        headers (dict, optional): Request headers
    """

    def __init__(self, method, url, headers=None):
        self.method = method
        self.url = url
        self.headers = CaseInsensitiveDict(headers or {})

    def copy(self):
        """Return an independent copy; headers are not shared."""
        return Request(self.method, self.url, self.headers.copy())

    def __eq__(self, other):
        if not isinstance(other, Request):
            return NotImplemented
        return (
            self.method == other.method
            and self.url == other.url
            and self.headers == other.headers
        )

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        return "<Request [{0} {1}]>".format(self.method, self.url)
