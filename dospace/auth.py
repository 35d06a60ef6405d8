# -*- coding: utf-8 -*-
"""
dospace.auth
~~~~~~~~~~~~

Authentication hook for the ``requests`` library.
"""

from requests.auth import AuthBase

from .signatures import SignatureV4


class S3Auth(AuthBase):
    """
    Signs outgoing ``requests`` calls with an ``Authorization`` header.

    Args:
        credentials (Credentials): Identity used to sign requests
        content_sha256 (str, optional): Hex SHA-256 of the request body
    """

    def __init__(self, credentials, content_sha256=None):
        self.signer = SignatureV4(credentials)
        self.content_sha256 = content_sha256

    @property
    def region(self):
        return self.signer.region

    def __call__(self, r):
        return self.signer.sign_headers(r, content_sha256=self.content_sha256)

    def __repr__(self):
        return "<S3Auth {0!r}>".format(self.signer.credentials)
