from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TypeVar

from pydantic import AnyUrl, ValidationError
from pydantic.type_adapter import TypeAdapter

from .exceptions import InvalidArgumentError, UriFormatError
from .utils._boundaries import locate_segment_boundaries

logger = logging.getLogger(__name__)

UrlAdapter: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)

UriT = TypeVar("UriT", str, AnyUrl)


@dataclass(frozen=True)
class SegmentEditor:
    """Replace or remove the last path segment of absolute URIs.

    The query and fragment of the original URI are always carried over
    unchanged. Plain strings are edited as given; ``AnyUrl`` values are edited
    through their canonical string form and parsed back into an ``AnyUrl``.
    """

    # Parse spliced string results through AnyUrl and reject invalid ones?
    validate: bool = True

    # Keep a trailing slash when replacing (".../a/b/" + "c" -> ".../a/c/")?
    preserve_trailing_slash: bool = False

    def replace_last_segment(self, uri: UriT, replacement: str) -> UriT:
        """
        Return a new URI whose last path segment is ``replacement``.

        A URI without a path gets ``/replacement`` appended before its query.
        A trailing slash on the original path is dropped unless
        ``preserve_trailing_slash`` is set.

        Raises:
            InvalidArgumentError: if ``uri`` or ``replacement`` is None
            UriFormatError: if the result is not a valid absolute URI
        """
        if uri is None:
            raise InvalidArgumentError("uri")

        if replacement is None:
            raise InvalidArgumentError("replacement")

        text = str(uri)
        boundaries = locate_segment_boundaries(text)
        suffix = text[boundaries.suffix_start :]

        if not boundaries.has_path:
            result = f"{text[: boundaries.suffix_start]}/{replacement}{suffix}"
        elif boundaries.last_slash is None:
            result = f"{text}/{replacement}"
        else:
            new_segment = replacement

            # A root path ("/") has no trailing slash to keep
            if self.preserve_trailing_slash and (
                boundaries.last_slash < boundaries.path_end < boundaries.suffix_start
            ):
                new_segment += "/"

            result = f"{text[: boundaries.last_slash + 1]}{new_segment}{suffix}"

        return self._build(uri, result)

    def remove_last_segment(self, uri: UriT) -> UriT:
        """
        Return a new URI without its last path segment.

        The separator before the removed segment is kept, so ``/a/b`` becomes
        ``/a/``. URIs without path segments are returned unchanged.

        Raises:
            InvalidArgumentError: if ``uri`` is None
            UriFormatError: if the result is not a valid absolute URI
        """
        if uri is None:
            raise InvalidArgumentError("uri")

        text = str(uri)
        boundaries = locate_segment_boundaries(text)

        if (
            boundaries.first_path_slash is None
            or boundaries.last_slash is None
            or boundaries.last_slash < boundaries.first_path_slash
        ):
            return uri

        result = (
            f"{text[: boundaries.last_slash + 1]}{text[boundaries.suffix_start :]}"
        )

        if result == text:
            return uri

        return self._build(uri, result)

    def _build(self, original: UriT, text: str) -> UriT:
        logger.debug("Spliced URI %s -> %s", original, text)

        if isinstance(original, str) and not self.validate:
            return text

        try:
            url = UrlAdapter.validate_python(text)
        except ValidationError as exc:
            logger.warning("Spliced URI is not a valid absolute URI: %s", exc)

            raise UriFormatError(text, str(exc)) from exc

        if isinstance(original, str):
            return text

        return url


default_editor = SegmentEditor()


def replace_last_segment(uri: UriT, replacement: str) -> UriT:
    return default_editor.replace_last_segment(uri, replacement)


def remove_last_segment(uri: UriT) -> UriT:
    return default_editor.remove_last_segment(uri)
