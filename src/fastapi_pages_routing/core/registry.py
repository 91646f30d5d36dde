"""Registry of routes keyed by pattern string."""

from collections.abc import Iterator

from fastapi_pages_routing.core.route import Route
from fastapi_pages_routing.exceptions import DuplicateRouteError


class RouteRegistry:
    """All known routes by exact pattern, independent of the tree shape.

    Used for introspection and reverse lookups ("does /blog/[slug] exist"),
    not for resolving request paths.
    """

    __slots__ = ("_routes",)

    def __init__(self) -> None:
        self._routes: dict[str, Route] = {}

    def register(self, route: Route) -> None:
        """Register a route under its pattern.

        Raises:
            DuplicateRouteError: If the pattern is already registered.
        """
        current = self._routes.get(route.pattern)
        if current is not None:
            raise DuplicateRouteError(
                f"Duplicate route {route.pattern}\n"
                f"  First: {current.source or current.pattern}\n"
                f"  Second: {route.source or route.pattern}"
            )
        self._routes[route.pattern] = route

    def lookup(self, pattern: str) -> Route | None:
        """Return the route registered under exactly ``pattern``, or None."""
        return self._routes.get(pattern)

    def __contains__(self, pattern: object) -> bool:
        return pattern in self._routes

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> Iterator[Route]:
        yield from self._routes.values()


def register_route(registry: RouteRegistry, route: Route) -> None:
    registry.register(route)


def lookup_by_pattern(registry: RouteRegistry, pattern: str) -> Route | None:
    return registry.lookup(pattern)
