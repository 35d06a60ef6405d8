# -*- coding: utf-8 -*-
"""
dospace.credentials
~~~~~~~~~~~~~~~~~~~

The identity a request is signed with.
"""

import os

from .exceptions import ConfigurationError


class Credentials(object):
    """
    Region, key pair and service name used to sign requests.

    Every field must be a non-empty string; anything else raises
    :class:`ConfigurationError` immediately so that a misconfigured client
    fails before any hashing or network work. Instances are read-only and
    the secret key is kept out of ``repr()``.

    Args:
        region (str): Service region, e.g. ``nyc3``
        access_key (str): Access key id
        secret_key (str): Secret access key
        service (str): Service name used in the credential scope
    """

    __slots__ = ("_region", "_access_key", "_secret_key", "_service")

    def __init__(self, region, access_key, secret_key, service="s3"):
        fields = (
            ("region", region),
            ("access_key", access_key),
            ("secret_key", secret_key),
            ("service", service),
        )
        missing = [name for name, value in fields if not _non_empty(value)]
        if missing:
            raise ConfigurationError(
                "Credentials require non-empty {0}".format(", ".join(missing))
            )
        object.__setattr__(self, "_region", region)
        object.__setattr__(self, "_access_key", access_key)
        object.__setattr__(self, "_secret_key", secret_key)
        object.__setattr__(self, "_service", service)

    @classmethod
    def from_environ(cls, region=None, service="s3", environ=None):
        """
        Build credentials from environment variables.

        ``SPACES_ACCESS_KEY_ID``, ``SPACES_SECRET_ACCESS_KEY`` and
        ``SPACES_REGION`` are read first, then the ``AWS_`` equivalents.
        An explicit ``region`` wins over both.
        """
        environ = os.environ if environ is None else environ

        def lookup(*names):
            for name in names:
                if environ.get(name):
                    return environ[name]
            return None

        return cls(
            region or lookup("SPACES_REGION", "AWS_REGION"),
            lookup("SPACES_ACCESS_KEY_ID", "AWS_ACCESS_KEY_ID"),
            lookup("SPACES_SECRET_ACCESS_KEY", "AWS_SECRET_ACCESS_KEY"),
            service,
        )

    @property
    def region(self):
        return self._region

    @property
    def access_key(self):
        return self._access_key

    @property
    def secret_key(self):
        return self._secret_key

    @property
    def service(self):
        return self._service

    def __setattr__(self, name, value):
        raise AttributeError("Credentials are read-only")

    def __eq__(self, other):
        if not isinstance(other, Credentials):
            return NotImplemented
        return (
            self._region,
            self._access_key,
            self._secret_key,
            self._service,
        ) == (other._region, other._access_key, other._secret_key, other._service)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((self._region, self._access_key, self._service))

    def __repr__(self):
        return "<Credentials region={0!r} access_key={1!r} service={2!r}>".format(
            self._region, self._access_key, self._service
        )


def _non_empty(value):
    return isinstance(value, str) and bool(value.strip())
