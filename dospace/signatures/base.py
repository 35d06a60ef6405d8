# -*- coding: utf-8 -*-
"""
dospace.signatures.base
~~~~~~~~~~~~~~~~~~~~~~~

Base class for request signature implementations.
"""

from ..credentials import Credentials
from ..exceptions import ConfigurationError


class BaseSignature(object):
    """Base class for request signature implementations."""

    def __init__(self, credentials):
        """
        Initialize the signature implementation.

        Args:
            credentials (Credentials): Identity used to sign requests

        Raises:
            ConfigurationError: If ``credentials`` is not a Credentials instance
        """
        if not isinstance(credentials, Credentials):
            raise ConfigurationError(
                "Expected Credentials, got {0}".format(type(credentials).__name__)
            )
        self.credentials = credentials

    @property
    def region(self):
        return self.credentials.region

    @property
    def service(self):
        return self.credentials.service

    def sign_request(self, request):
        """
        Sign the given request.

        Args:
            request: The request object to sign

        Returns:
            The signed request object
        """
        raise NotImplementedError("Subclasses must implement sign_request")
