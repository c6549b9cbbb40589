"""Seekable byte-source helpers used by line based generators."""

from .linereader import LineReaderSeeker, strip_line_ending

__all__ = ["LineReaderSeeker", "strip_line_ending"]
