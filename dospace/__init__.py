# -*- coding: utf-8 -*-
from .auth import S3Auth
from .client import Client
from .credentials import Credentials
from .exceptions import ConfigurationError, DOSpaceError, SpacesError
from .request import Request
from .signatures import UNSIGNED_PAYLOAD, SignatureV4, hash_payload

__title__ = 'dospace'
__version__ = '1.0.0'
__license__ = 'MIT'
__all__ = [
    "Client",
    "ConfigurationError",
    "Credentials",
    "DOSpaceError",
    "Request",
    "S3Auth",
    "SignatureV4",
    "SpacesError",
    "UNSIGNED_PAYLOAD",
    "hash_payload",
]
