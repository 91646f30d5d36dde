"""Exception hierarchy for page routing errors."""

from collections.abc import Iterable


class FileBasedRoutingError(Exception):
    """Base exception for all page routing errors.

    This is the parent class for all exceptions raised by the
    fastapi-pages-routing package. Catching this exception
    will catch all routing-related errors.

    Example:
        try:
            router = PageRouter.from_directory("pages")
        except FileBasedRoutingError as e:
            logger.error(f"Failed to build routes: {e}")
    """


class PathParseError(FileBasedRoutingError):
    """Raised when a route pattern or one of its segments is malformed.

    Examples of invalid syntax:
        - Unterminated bracket: [slug
        - Empty parameter name: [] or [...]
        - Catch-all not in final position: /files/[...path]/raw
        - Empty segment: /blog//post

    Example:
        PathParseError("Invalid segment '[slug' in '/blog/[slug': unterminated bracket")
    """


class RouteDiscoveryError(FileBasedRoutingError):
    """Raised when the pages directory doesn't exist or can't be scanned.

    Example:
        RouteDiscoveryError("Base path does not exist: /app/pages")
    """


class DuplicateRouteError(FileBasedRoutingError):
    """Raised when two page files resolve to the same route pattern.

    Example:
        DuplicateRouteError(
            "Duplicate route /blog\\n  First: blog.py\\n  Second: blog/index.py"
        )
    """


class RouteConflictError(FileBasedRoutingError):
    """Raised when two patterns claim one parameter slot under different names.

    A tree position holds a single dynamic child and a single catch-all
    child, so ``/blog/[slug]`` and ``/blog/[id]`` cannot coexist.

    Example:
        RouteConflictError(
            "Dynamic segment '[id]' in /blog/[id] conflicts with existing parameter 'slug'"
        )
    """


class RouteBuildError(FileBasedRoutingError):
    """Raised after a full build pass when one or more routes were rejected.

    Every individual failure is kept in ``errors`` so that all configuration
    problems are reported at once instead of one per run.
    """

    def __init__(self, errors: Iterable[FileBasedRoutingError]) -> None:
        self.errors: tuple[FileBasedRoutingError, ...] = tuple(errors)
        lines = [f"{len(self.errors)} route(s) rejected:"]
        lines.extend(f"  - {type(e).__name__}: {e}" for e in self.errors)
        super().__init__("\n".join(lines))
