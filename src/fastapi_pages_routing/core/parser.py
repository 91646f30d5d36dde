"""Path segment parser for page routing.

Converts page file paths and route patterns into typed segments:
- [param] -> dynamic segment, binds exactly one path segment
- [...param] -> catch-all segment, binds every remaining path segment
- anything else -> static segment, matched literally
"""

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath

from fastapi_pages_routing.exceptions import PathParseError


class SegmentType(Enum):
    """Type of a URL path segment."""

    STATIC = "static"
    DYNAMIC = "dynamic"
    CATCH_ALL = "catch_all"


@dataclass(frozen=True)
class PathSegment:
    """A parsed URL path segment with type and name."""

    name: str
    segment_type: SegmentType
    original: str

    @property
    def is_parameter(self) -> bool:
        """Check if this segment represents a path parameter."""
        return self.segment_type in (SegmentType.DYNAMIC, SegmentType.CATCH_ALL)


_CATCH_ALL_PATTERN = re.compile(r"^\[\.\.\.([^\[\]/.][^\[\]/]*)\]$")
_DYNAMIC_PATTERN = re.compile(r"^\[([^\[\]/.][^\[\]/]*)\]$")
_EMPTY_PARAMETER_PATTERN = re.compile(r"^\[(\.\.\.)?\]$")

INDEX_SEGMENT = "index"


def parse_path_segment(segment: str) -> PathSegment:
    """Parse a single path segment into a PathSegment.

    Args:
        segment: One slash-free piece of a route pattern.

    Returns:
        PathSegment with detected type and extracted name.

    Raises:
        PathParseError: If segment has invalid syntax.

    Examples:
        "blog" -> PathSegment(name="blog", segment_type=STATIC, ...)
        "[slug]" -> PathSegment(name="slug", segment_type=DYNAMIC, ...)
        "[...parts]" -> PathSegment(name="parts", segment_type=CATCH_ALL, ...)
    """
    if not segment:
        raise PathParseError("Empty segment")

    if match := _CATCH_ALL_PATTERN.match(segment):
        return PathSegment(
            name=match.group(1),
            segment_type=SegmentType.CATCH_ALL,
            original=segment,
        )

    if match := _DYNAMIC_PATTERN.match(segment):
        return PathSegment(
            name=match.group(1),
            segment_type=SegmentType.DYNAMIC,
            original=segment,
        )

    if "[" not in segment and "]" not in segment:
        return PathSegment(
            name=segment,
            segment_type=SegmentType.STATIC,
            original=segment,
        )

    raise PathParseError(f"Invalid path segment '{segment}': {_describe_bracket_error(segment)}")


def _describe_bracket_error(segment: str) -> str:
    if _EMPTY_PARAMETER_PATTERN.match(segment):
        return "empty parameter name"
    if segment.startswith("[") and not segment.endswith("]"):
        return "unterminated bracket"
    if segment.endswith("]") and not segment.startswith("["):
        return "unopened bracket"
    return "use [param], [...param], or plain text without brackets"


def split_path(path: str) -> list[str]:
    """Split a slash-prefixed path into its raw segments.

    The root path yields no segments. No normalization happens here, so
    ``/a//b`` keeps its empty middle segment and ``/a/`` its empty tail.

    Examples:
        "/" -> []
        "/blog/[slug]" -> ["blog", "[slug]"]
    """
    if path == "/":
        return []
    return path[1:].split("/")


def parse_pattern(pattern: str) -> list[PathSegment]:
    """Parse a normalized route pattern into PathSegments.

    Args:
        pattern: Slash-prefixed route pattern, e.g. ``/users/[...parts]``.

    Returns:
        List of parsed PathSegment objects, empty for the root pattern.

    Raises:
        PathParseError: If the pattern is not slash-prefixed, has a trailing
            slash or an empty segment, places a catch-all before another
            segment, or binds the same parameter name twice.
    """
    if not pattern.startswith("/"):
        raise PathParseError(f"Route pattern must start with '/': {pattern!r}")
    if pattern != "/" and pattern.endswith("/"):
        raise PathParseError(f"Route pattern must not end with '/': {pattern!r}")

    segments: list[PathSegment] = []
    seen_names: set[str] = set()
    catch_all_seen = False

    for part in split_path(pattern):
        if catch_all_seen:
            raise PathParseError(
                f"Catch-all parameter must be the last path segment in {pattern!r}. "
                f"Found '{part}' after catch-all."
            )

        try:
            segment = parse_path_segment(part)
        except PathParseError as exc:
            raise PathParseError(f"{exc} in pattern {pattern!r}") from exc

        if segment.is_parameter:
            if segment.name in seen_names:
                raise PathParseError(
                    f"Duplicate parameter name '{segment.name}' in pattern {pattern!r}"
                )
            seen_names.add(segment.name)

        segments.append(segment)

        if segment.segment_type == SegmentType.CATCH_ALL:
            catch_all_seen = True

    return segments


def extract_parameters(pattern: str) -> tuple[tuple[str, ...], str]:
    """Extract parameter names and the catch-all name from a pattern.

    Returns:
        Tuple of (parameter names in order of appearance, catch-all name).
        The catch-all name is an empty string when the pattern has none.

    Raises:
        PathParseError: If the pattern is malformed.

    Examples:
        "/users/[...parts]" -> (("parts",), "parts")
        "/blog/[slug]" -> (("slug",), "")
        "/about" -> ((), "")
    """
    segments = parse_pattern(pattern)
    names = tuple(s.name for s in segments if s.is_parameter)
    catch_all = ""
    if segments and segments[-1].segment_type == SegmentType.CATCH_ALL:
        catch_all = segments[-1].name
    return names, catch_all


def to_pattern(relative_path: str | PurePath, suffix: str = ".py") -> str:
    """Convert a page file path, relative to the pages directory, to a pattern.

    Removes the file suffix, converts the path to forward slashes and
    collapses a trailing ``index`` into its parent directory.

    Examples:
        "about.py" -> "/about"
        "blog/[slug].py" -> "/blog/[slug]"
        "blog/index.py" -> "/blog"
        "index.py" -> "/"
    """
    if not isinstance(relative_path, PurePath):
        relative_path = PurePath(relative_path)
    posix = relative_path.as_posix()
    if suffix and posix.endswith(suffix):
        posix = posix[: -len(suffix)]

    url_path = "/" + posix
    if url_path == "/" + INDEX_SEGMENT:
        return "/"
    if url_path.endswith("/" + INDEX_SEGMENT):
        url_path = url_path[: -len(INDEX_SEGMENT) - 1]
    return url_path
