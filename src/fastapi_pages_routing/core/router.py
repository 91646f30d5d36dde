"""Route tree construction and the PageRouter facade.

Composes scanner, parser, tree and registry. Construction errors are
collected over a full pass and raised together as a RouteBuildError.
"""

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from fastapi_pages_routing.core.registry import RouteRegistry
from fastapi_pages_routing.core.route import Route, RouteMatch
from fastapi_pages_routing.core.scanner import scan_pages
from fastapi_pages_routing.core.tree import RouteTree
from fastapi_pages_routing.exceptions import FileBasedRoutingError, RouteBuildError

logger = logging.getLogger(__name__)


def build_tree(routes: Iterable[Route]) -> RouteTree:
    """Build a frozen RouteTree from routes.

    Args:
        routes: Routes to insert, in any order.

    Returns:
        The frozen tree.

    Raises:
        RouteBuildError: If any route was rejected. Every failure of the
            pass is listed, not only the first one.
    """
    tree = RouteTree()
    errors: list[FileBasedRoutingError] = []

    for route in routes:
        try:
            tree.insert(route)
        except FileBasedRoutingError as exc:
            _log_rejected(route, exc)
            errors.append(exc)

    if errors:
        raise RouteBuildError(errors)

    tree.freeze()
    return tree


class PageRouter:
    """Route tree plus registry, built once and then only read.

    Usage::

        router = PageRouter.from_directory("pages")
        result = router.match("/blog/hello-world")
        if result is None:
            ...  # not found
        result.route.pattern  # "/blog/[slug]"
        result.params  # (("slug", "hello-world"),)
    """

    __slots__ = ("registry", "tree")

    def __init__(self) -> None:
        self.tree = RouteTree()
        self.registry = RouteRegistry()

    @classmethod
    def from_routes(cls, routes: Iterable[Route]) -> "PageRouter":
        """Create a frozen PageRouter from routes.

        Raises:
            RouteBuildError: If any route was rejected.
        """
        router = cls()
        errors = router._add_all(routes)
        return router._finish(errors)

    @classmethod
    def from_directory(cls, base_path: str | Path, *, suffix: str = ".py") -> "PageRouter":
        """Create a frozen PageRouter from a pages directory.

        Args:
            base_path: Root pages directory.
            suffix: File suffix marking a page file.

        Raises:
            RouteDiscoveryError: If base_path doesn't exist or isn't a directory.
            RouteBuildError: If any page has a malformed pattern or collides
                with another page.
        """
        pages = scan_pages(base_path, suffix=suffix)

        logger.info(
            "Discovered page files",
            extra={"count": len(pages), "base_path": str(base_path)},
        )

        routes: list[Route] = []
        errors: list[FileBasedRoutingError] = []

        for page in pages:
            try:
                routes.append(Route.from_pattern(page.pattern, source=page.relative_path))
            except FileBasedRoutingError as exc:
                logger.warning(
                    "Rejected page file",
                    extra={"source": page.relative_path, "error": str(exc)},
                )
                errors.append(exc)

        router = cls()
        errors.extend(router._add_all(routes))
        return router._finish(errors)

    def _add_all(self, routes: Iterable[Route]) -> list[FileBasedRoutingError]:
        """Add every route, returning the failures instead of raising."""
        errors: list[FileBasedRoutingError] = []
        for route in routes:
            try:
                self.add(route)
            except FileBasedRoutingError as exc:
                _log_rejected(route, exc)
                errors.append(exc)
        return errors

    def _finish(self, errors: list[FileBasedRoutingError]) -> "PageRouter":
        """Raise the collected failures, or freeze and return the router."""
        if errors:
            raise RouteBuildError(errors)

        self.freeze()

        logger.info(
            "Route tree build complete",
            extra={"route_count": len(self), "node_count": len(self.tree)},
        )

        return self

    def add(self, route: Route) -> None:
        """Add a route to the tree and the registry.

        The tree validates first, so a rejected route touches neither.

        Raises:
            RuntimeError: If the router is frozen.
            PathParseError, RouteConflictError, DuplicateRouteError: If the
                route is rejected.
        """
        self.tree.insert(route)
        self.registry.register(route)

    def freeze(self) -> None:
        self.tree.freeze()

    def match(self, path: str) -> RouteMatch | None:
        return self.tree.match(path)

    def lookup(self, pattern: str) -> Route | None:
        return self.registry.lookup(pattern)

    @property
    def routes(self) -> Iterator[Route]:
        return iter(self.registry)

    def __contains__(self, pattern: object) -> bool:
        return pattern in self.registry

    def __len__(self) -> int:
        return len(self.registry)


def _log_rejected(route: Route, exc: FileBasedRoutingError) -> None:
    logger.warning(
        "Rejected route",
        extra={"pattern": route.pattern, "source": route.source, "error": str(exc)},
    )
