"""Route and match result types."""

from dataclasses import dataclass, field

from fastapi_pages_routing.core.parser import extract_parameters
from fastapi_pages_routing.exceptions import PathParseError


@dataclass(frozen=True)
class Route:
    """A routable URL pattern discovered from one page file.

    Attributes:
        pattern: Normalized pattern, e.g. ``/about``, ``/blog/[slug]``,
            ``/users/[...parts]``.
        parameters: Parameter names in left-to-right order of appearance,
            including the catch-all name at its position.
        catch_all: Name bound to the trailing multi-segment wildcard, or an
            empty string when the pattern has none.
        source: Page file the route was discovered from, relative to the
            pages directory. Not part of route equality.
    """

    pattern: str
    parameters: tuple[str, ...] = ()
    catch_all: str = ""
    source: str | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        """Reject parameters that disagree with the names in the pattern."""
        object.__setattr__(self, "parameters", tuple(self.parameters))
        parameters, catch_all = extract_parameters(self.pattern)
        if self.parameters != parameters or self.catch_all != catch_all:
            raise PathParseError(
                f"Route parameters do not match pattern {self.pattern!r}: "
                f"expected parameters={parameters!r}, catch_all={catch_all!r}, "
                f"got parameters={self.parameters!r}, catch_all={self.catch_all!r}"
            )

    @classmethod
    def from_pattern(cls, pattern: str, source: str | None = None) -> "Route":
        """Create a Route, deriving its parameters from the pattern.

        Raises:
            PathParseError: If the pattern is malformed.

        Examples:
            Route.from_pattern("/user/[username]/post/[post_id]").parameters
                -> ("username", "post_id")
            Route.from_pattern("/users/[...parts]").catch_all -> "parts"
        """
        parameters, catch_all = extract_parameters(pattern)
        return cls(pattern=pattern, parameters=parameters, catch_all=catch_all, source=source)

    @property
    def is_static(self) -> bool:
        """Check if the route has no parameters at all."""
        return not self.parameters


@dataclass(frozen=True)
class RouteMatch:
    """A resolved request path.

    Attributes:
        route: The Route terminating the winning tree path.
        params: ``(name, value)`` bindings in the order they were bound,
            which is the order the names appear in ``route.pattern``.
    """

    route: Route
    params: tuple[tuple[str, str], ...] = ()

    def as_dict(self) -> dict[str, str]:
        return dict(self.params)
