# -*- coding: utf-8 -*-
"""
dospace.datetime_utils
~~~~~~~~~~~~~~~~~~~~~~

Wall clock helpers used when signing.
"""

from datetime import datetime, timezone

AMZ_DATE_FORMAT = "%Y%m%dT%H%M%SZ"
DATE_STAMP_FORMAT = "%Y%m%d"


def get_utc_datetime():
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def to_utc(value):
    """Normalize ``value`` to UTC. Naive datetimes are taken to be UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def amz_date(value):
    """Format ``value`` as a SigV4 timestamp, e.g. ``20240101T000000Z``."""
    return to_utc(value).strftime(AMZ_DATE_FORMAT)


def date_stamp(value):
    """Format ``value`` as a SigV4 date stamp, e.g. ``20240101``."""
    return to_utc(value).strftime(DATE_STAMP_FORMAT)
