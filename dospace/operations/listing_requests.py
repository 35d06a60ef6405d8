# -*- coding: utf-8 -*-
"""
dospace.operations.listing_requests
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Listing operations (buckets, objects in a bucket).
"""

import datetime
import logging

from . import SpacesRequest

logger = logging.getLogger(__name__)

# XML namespace helper
XML_PARSE_STRING = "{{http://s3.amazonaws.com/doc/2006-03-01/}}{0}"

TIMESTAMP_FORMATS = ("%Y-%m-%dT%H:%M:%S.%fZ", "%Y-%m-%dT%H:%M:%SZ")


def parse_timestamp(value):
    """Parse an ISO 8601 timestamp as returned in listing responses."""
    for fmt in TIMESTAMP_FORMATS:
        try:
            return datetime.datetime.strptime(value, fmt)
        except ValueError:
            continue
    raise ValueError("Unrecognized timestamp {0!r}".format(value))


class ListBucketsRequest(SpacesRequest):
    """List every bucket owned by the client's credentials."""

    def run(self):
        """
        Execute the list request.

        Returns:
            list: Dictionaries with keys 'name' and 'creation_date'
        """
        k = XML_PARSE_STRING.format
        root = self._get(self.service_url())
        buckets = []
        for tag in root.iter(k("Bucket")):
            name = tag.find(k("Name"))
            created = tag.find(k("CreationDate"))
            if name is None:
                continue
            buckets.append(
                {
                    "name": name.text,
                    "creation_date": (
                        parse_timestamp(created.text) if created is not None else None
                    ),
                }
            )
        return buckets


class ListObjectsRequest(SpacesRequest):
    """
    List objects in a bucket.

    Provides an iterator interface that follows pagination automatically.

    Args:
        conn: Client object
        bucket (str): Bucket name
        prefix (str, optional): Only list objects with this prefix
    """

    def __init__(self, conn, bucket, prefix=None):
        super(ListObjectsRequest, self).__init__(conn)
        self.bucket = bucket
        self.prefix = prefix

    def run(self):
        """
        Execute the list request.

        Returns:
            iterator: Iterator over object metadata dictionaries
        """
        return iter(self)

    def __iter__(self):
        """
        Iterate over all objects in the bucket with the given prefix.

        Yields:
            dict: Object metadata with keys: 'key', 'size', 'last_modified',
                  'etag', 'storage_class'
        """
        marker = None
        more = True
        k = XML_PARSE_STRING.format

        while more:
            self.params = {"prefix": self.prefix, "marker": marker}
            root = self._get(self.bucket_url("", self.bucket))

            for tag in root.findall(k("Contents")):
                obj_info = self._extract_object_info(tag, k)
                if obj_info:
                    yield obj_info
                    marker = obj_info["key"]

            next_marker = root.find(k("NextMarker"))
            if next_marker is not None and next_marker.text:
                marker = next_marker.text

            truncated_element = root.find(k("IsTruncated"))
            more = (
                truncated_element is not None
                and truncated_element.text == "true"
                and marker is not None
            )

    def _extract_object_info(self, tag, k):
        """
        Extract object information from XML element.

        Args:
            tag: XML element containing object data
            k: XML namespace formatter function

        Returns:
            dict: Object metadata or None if the entry is malformed
        """
        try:
            key_elem = tag.find(k("Key"))
            size_elem = tag.find(k("Size"))
            modified_elem = tag.find(k("LastModified"))
            etag_elem = tag.find(k("ETag"))
            storage_elem = tag.find(k("StorageClass"))
            if any(
                elem is None
                for elem in (key_elem, size_elem, modified_elem, etag_elem)
            ):
                return None

            return {
                "key": key_elem.text,
                "size": int(size_elem.text),
                "last_modified": parse_timestamp(modified_elem.text),
                "etag": etag_elem.text.strip('"'),
                "storage_class": (
                    storage_elem.text if storage_elem is not None else "STANDARD"
                ),
            }
        except (ValueError, AttributeError, TypeError) as e:
            logger.warning("Skipping malformed listing entry: %s", e)
            return None
