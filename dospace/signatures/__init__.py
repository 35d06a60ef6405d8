# -*- coding: utf-8 -*-
"""
dospace.signatures
~~~~~~~~~~~~~~~~~~

AWS Signature Version 4 request signing.
"""

from .base import BaseSignature
from .canonical import UNSIGNED_PAYLOAD, CanonicalRequest, hash_payload
from .v4 import DEFAULT_EXPIRES, SignatureV4

__all__ = [
    "BaseSignature",
    "CanonicalRequest",
    "DEFAULT_EXPIRES",
    "SignatureV4",
    "UNSIGNED_PAYLOAD",
    "hash_payload",
]
