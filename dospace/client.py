# -*- coding: utf-8 -*-
"""
dospace.client
~~~~~~~~~~~~~~

The client object: holds credentials and an HTTP session, sends signed
requests and turns failures into :class:`~dospace.exceptions.DOSpaceError`.
"""

import logging

import requests
from lxml import etree

from .auth import S3Auth
from .credentials import Credentials
from .exceptions import DOSpaceError, SpacesError
from .operations.listing_requests import ListBucketsRequest, ListObjectsRequest
from .request import Request
from .signatures import DEFAULT_EXPIRES

logger = logging.getLogger(__name__)

USER_AGENT = "dospace (Python Spaces Client)"
DEFAULT_TIMEOUT = 30


class Client(object):
    """
    A client for DigitalOcean Spaces or any other S3-compatible service.

    Args:
        region (str): Service region, e.g. ``nyc3``
        access_key (str): Access key id
        secret_key (str): Secret access key
        service (str): Service name used when signing (default: ``s3``)
        endpoint_url (str, optional): Base URL of the service, defaults to
            ``https://<region>.digitaloceanspaces.com``
        session (requests.Session, optional): Transport used to send requests.
            A new session is created when omitted.
        timeout (float): Connect and read timeout in seconds
        verify (bool): Whether to verify TLS certificates

    Raises:
        ConfigurationError: If any credential field is missing or empty
    """

    def __init__(
        self,
        region,
        access_key,
        secret_key,
        service="s3",
        endpoint_url=None,
        session=None,
        timeout=DEFAULT_TIMEOUT,
        verify=True,
    ):
        self.credentials = Credentials(region, access_key, secret_key, service)
        self.endpoint_url = (
            endpoint_url or "https://{0}.digitaloceanspaces.com".format(region)
        ).rstrip("/")
        self.session = session if session is not None else self._create_session()
        self.auth = S3Auth(self.credentials)
        self.timeout = timeout
        self.verify = verify

    @staticmethod
    def _create_session():
        return requests.Session()

    @property
    def signer(self):
        return self.auth.signer

    def close(self):
        """Release the pooled connections held by the session."""
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def run(self, request):
        """
        Execute an operation.

        Args:
            request (SpacesRequest): The operation to run

        Returns:
            Whatever the operation's ``run()`` returns
        """
        return request.run()

    def get_uri(self, url):
        """
        Send a signed ``GET`` to ``url`` and parse the XML response.

        Args:
            url (str): Absolute URL, query included

        Returns:
            lxml.etree._Element: Root element of the response document

        Raises:
            DOSpaceError: On transport failure, non-2xx status, or a body that
                is not well-formed XML
        """
        response = self._send("GET", url)
        body = response.content.decode("utf-8", "replace")
        headers = dict(response.headers)

        if not 200 <= response.status_code < 300:
            logger.warning(
                "GET %s failed with %s %s", url, response.status_code, response.reason
            )
            raise DOSpaceError(response.status_code, response.reason, headers, body)

        try:
            parser = etree.XMLParser(resolve_entities=False, no_network=True)
            return etree.fromstring(response.content, parser=parser)
        except etree.XMLSyntaxError as e:
            logger.warning("GET %s returned a body that is not XML", url)
            raise DOSpaceError(
                response.status_code, response.reason, headers, body
            ) from e

    def presign_url(
        self, url, expires=DEFAULT_EXPIRES, method="GET", content_sha256=None
    ):
        """
        Return a pre-signed URL for ``url``, valid for ``expires`` seconds.

        Args:
            url (str): Absolute URL, query included
            expires (int): Validity window in seconds (default: one day)
            method (str): HTTP method the URL will be used with
            content_sha256 (str, optional): Hex SHA-256 of the request body

        Returns:
            str: The pre-signed URL
        """
        return self.signer.sign_url(
            Request(method, url), expires=expires, content_sha256=content_sha256
        )

    def list_buckets(self):
        """
        List the buckets owned by these credentials.

        Returns:
            list: Dictionaries with ``name`` and ``creation_date``
        """
        return self.run(ListBucketsRequest(self))

    def list_objects(self, bucket, prefix=None):
        """
        Iterate over the objects in ``bucket``.

        Args:
            bucket (str): Bucket name
            prefix (str, optional): Only list keys starting with this prefix

        Returns:
            iterator: Object metadata dictionaries
        """
        return self.run(ListObjectsRequest(self, bucket, prefix))

    def _send(self, method, url):
        try:
            return self.session.request(
                method,
                url,
                headers={"User-Agent": USER_AGENT},
                auth=self.auth,
                timeout=self.timeout,
                verify=self.verify,
            )
        except requests.exceptions.SSLError as e:
            logger.warning("TLS failure for %s %s: %s", method, url, e)
            raise DOSpaceError(
                0, "SSL/TLS Error", {}, "SSL/TLS handshake failed: {0}".format(e)
            ) from e
        except requests.exceptions.ConnectionError as e:
            logger.warning("Connection failure for %s %s: %s", method, url, e)
            raise DOSpaceError(
                0,
                "Connection failed",
                {},
                "Failed to connect to {0}: {1}".format(self.endpoint_url, e),
            ) from e
        except requests.exceptions.Timeout as e:
            logger.warning("Timeout for %s %s: %s", method, url, e)
            raise DOSpaceError(
                0,
                "Request timed out",
                {},
                "No response within {0} seconds: {1}".format(self.timeout, e),
            ) from e
        except SpacesError:
            raise
        except Exception as e:
            logger.warning("Unexpected failure for %s %s: %r", method, url, e)
            raise DOSpaceError(
                0,
                "Unknown Error",
                {},
                "An unexpected error occurred: {0}".format(e),
            ) from e

    def __repr__(self):
        return "<Client {0} {1!r}>".format(self.endpoint_url, self.credentials)
