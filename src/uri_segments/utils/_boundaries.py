from dataclasses import dataclass


@dataclass(frozen=True)
class SegmentBoundaries:
    """Offsets into a URI's text that delimit its last path segment."""

    # Start of the "?query#fragment" suffix, len(text) when there is none
    suffix_start: int

    # End of the path, excluding a single trailing slash
    path_end: int

    # First "/" after the authority, None when the URI has no path
    first_path_slash: int | None

    # Separator before the last segment, never before first_path_slash
    last_slash: int | None

    @property
    def has_path(self) -> bool:
        return self.first_path_slash is not None


def find_suffix_start(text: str) -> int:
    for index, char in enumerate(text):
        if char in "?#":
            return index

    return len(text)


def find_path_end(text: str, suffix_start: int) -> int:
    if suffix_start > 0 and text[suffix_start - 1] == "/":
        return suffix_start - 1

    return suffix_start


def find_first_path_slash(text: str, suffix_start: int) -> int | None:
    """
    Find the first "/" following the authority.

    The authority starts right after the first "://". Both searches stop at
    suffix_start, so slashes inside the query or fragment are ignored.
    """
    separator = text.find("://", 0, suffix_start)

    if separator == -1:
        return None

    slash = text.find("/", separator + 3, suffix_start)

    return None if slash == -1 else slash


def find_last_slash(
    text: str, path_end: int, first_path_slash: int | None
) -> int | None:
    slash = text.rfind("/", 0, path_end)

    if slash == -1:
        return None

    # The slash belongs to "scheme://": the path is just "/"
    if first_path_slash is not None and slash < first_path_slash:
        return first_path_slash

    return slash


def locate_segment_boundaries(text: str) -> SegmentBoundaries:
    suffix_start = find_suffix_start(text)
    path_end = find_path_end(text, suffix_start)
    first_path_slash = find_first_path_slash(text, suffix_start)

    return SegmentBoundaries(
        suffix_start=suffix_start,
        path_end=path_end,
        first_path_slash=first_path_slash,
        last_slash=find_last_slash(text, path_end, first_path_slash),
    )
