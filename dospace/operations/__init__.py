# -*- coding: utf-8 -*-
"""
dospace.operations
~~~~~~~~~~~~~~~~~~

Base class for operations run through a :class:`~dospace.client.Client`.
"""

from urllib.parse import quote, urlencode, urlsplit


class SpacesRequest(object):
    """
    Base class for all operations.

    Handles URL generation and hands the signed request to the client.

    Args:
        conn: The client object
        params (dict, optional): Query parameters to add to the request URL
    """

    def __init__(self, conn, params=None):
        self.conn = conn
        self.endpoint_url = conn.endpoint_url
        self.params = params or {}

    def service_url(self):
        """
        URL of the service root, used for account-level operations.

        Examples:
            >>> request.service_url()
            'https://nyc3.digitaloceanspaces.com/'
        """
        return self.endpoint_url + "/" + self._build_query_string()

    def bucket_url(self, key, bucket):
        """
        Generate the URL of a key inside a bucket, virtual host style.

        Args:
            key (str): The object key (can be empty for bucket operations)
            bucket (str): The bucket name

        Returns:
            str: Complete URL for the request

        Examples:
            >>> request.bucket_url('my-file.txt', 'my-bucket')
            'https://my-bucket.nyc3.digitaloceanspaces.com/my-file.txt'
        """
        parts = urlsplit(self.endpoint_url)
        url = "{0}://{1}.{2}/{3}".format(
            parts.scheme, bucket, parts.netloc, quote((key or "").lstrip("/"))
        )
        return url + self._build_query_string()

    def _build_query_string(self):
        """
        Build query string from parameters, skipping ``None`` values.

        Returns:
            str: Query string starting with '?' or empty string
        """
        params = sorted((k, v) for k, v in self.params.items() if v is not None)
        if not params:
            return ""
        return "?" + urlencode(params, quote_via=quote)

    def run(self):
        """
        Execute the request.

        Raises:
            NotImplementedError: If not implemented by subclass
        """
        raise NotImplementedError("Subclasses must implement the run() method")

    def _get(self, url):
        """Send a signed GET through the client and return the parsed XML root."""
        return self.conn.get_uri(url)
