from uri_segments._editor import (
    SegmentEditor,
    remove_last_segment,
    replace_last_segment,
)
from uri_segments.exceptions import (
    InvalidArgumentError,
    UriFormatError,
    UriSegmentsException,
)
from uri_segments.utils._boundaries import (
    SegmentBoundaries,
    locate_segment_boundaries,
)

__all__ = [
    "InvalidArgumentError",
    "SegmentBoundaries",
    "SegmentEditor",
    "UriFormatError",
    "UriSegmentsException",
    "locate_segment_boundaries",
    "remove_last_segment",
    "replace_last_segment",
]
