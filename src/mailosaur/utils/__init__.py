"""Utility functions for the Mailosaur client."""

from .datetime_utils import format_rfc3339, parse_iso_timestamp

__all__ = ["format_rfc3339", "parse_iso_timestamp"]
