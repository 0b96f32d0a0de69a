"""
Business entities representing core domain concepts.

Exports:
- MediaFile: Abstract media record (shared attributes and report contract)
- MediaKind: Closed set of media variants
- VideoFile: Video variant with resolution, frame rate and codec
- UnsupportedFormatError: Raised when a video format is not accepted
"""

from videoinfo.core.entities.media import MediaFile, MediaKind
from videoinfo.core.entities.video import UnsupportedFormatError, VideoFile

__all__ = [
    "MediaFile",
    "MediaKind",
    "VideoFile",
    "UnsupportedFormatError",
]
