"""Route pattern tree with static, dynamic, and catch-all branches.

Nodes are stored in one list and reference their children by index. The
tree is built once, frozen, and then only read, so a frozen tree can be
shared between threads without locking.
"""

import logging

from fastapi_pages_routing.core.parser import PathSegment, SegmentType, parse_pattern, split_path
from fastapi_pages_routing.core.route import Route, RouteMatch
from fastapi_pages_routing.exceptions import DuplicateRouteError, RouteConflictError

logger = logging.getLogger(__name__)

ROOT = 0


class _Node:
    """One segment position in the URL space."""

    __slots__ = ("catch_all_child", "dynamic_child", "parameter", "route", "static_children")

    def __init__(self, parameter: str = "") -> None:
        # Literal segment text -> node index
        self.static_children: dict[str, int] = {}
        # Single [param] child
        self.dynamic_child: int | None = None
        # Single [...param] child, always terminal
        self.catch_all_child: int | None = None
        # Bound name, only set on dynamic and catch-all nodes
        self.parameter = parameter
        self.route: Route | None = None


class RouteTree:
    """Prefix tree of route patterns keyed by path segment.

    Usage::

        tree = RouteTree()
        tree.insert(Route.from_pattern("/blog/archive"))
        tree.insert(Route.from_pattern("/blog/[slug]"))
        tree.freeze()
        tree.match("/blog/hello")  # RouteMatch(route=..., params=(("slug", "hello"),))
    """

    __slots__ = ("_frozen", "_nodes")

    def __init__(self) -> None:
        self._nodes: list[_Node] = [_Node()]
        self._frozen = False

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Make the tree read-only. No more routes can be inserted."""
        self._frozen = True

    def insert(self, route: Route) -> None:
        """Insert a route, creating nodes for each segment as needed.

        The route is validated against the existing tree before anything is
        created, so a rejected route leaves the tree unchanged. A catch-all
        segment ends the walk.

        Raises:
            RuntimeError: If the tree is frozen.
            PathParseError: If the route pattern is malformed.
            RouteConflictError: If a dynamic or catch-all slot on the path is
                already bound to a different parameter name.
            DuplicateRouteError: If a route already terminates at the same node.
        """
        if self._frozen:
            msg = "Cannot insert routes into a frozen route tree."
            raise RuntimeError(msg)

        segments = parse_pattern(route.pattern)
        self._check_insertable(route, segments)

        node_id = ROOT
        for segment in segments:
            node = self._nodes[node_id]
            match segment.segment_type:
                case SegmentType.STATIC:
                    child = node.static_children.get(segment.name)
                    if child is None:
                        child = self._new_node()
                        node.static_children[segment.name] = child
                case SegmentType.DYNAMIC:
                    if node.dynamic_child is None:
                        node.dynamic_child = self._new_node(segment.name)
                    child = node.dynamic_child
                case SegmentType.CATCH_ALL:
                    if node.catch_all_child is None:
                        node.catch_all_child = self._new_node(segment.name)
                    node_id = node.catch_all_child
                    break  # catch-all must be last
            node_id = child

        self._nodes[node_id].route = route

        logger.debug(
            "Inserted route",
            extra={"pattern": route.pattern, "source": route.source, "node_count": len(self)},
        )

    def _new_node(self, parameter: str = "") -> int:
        self._nodes.append(_Node(parameter))
        return len(self._nodes) - 1

    def _check_insertable(self, route: Route, segments: list[PathSegment]) -> None:
        """Walk the existing nodes along the route and reject conflicts."""
        node_id: int | None = ROOT

        for segment in segments:
            node = self._nodes[node_id]
            match segment.segment_type:
                case SegmentType.STATIC:
                    node_id = node.static_children.get(segment.name)
                case SegmentType.DYNAMIC:
                    node_id = node.dynamic_child
                case SegmentType.CATCH_ALL:
                    node_id = node.catch_all_child

            if node_id is None:
                # Everything below here is new, nothing left to collide with
                return

            existing = self._nodes[node_id].parameter
            if segment.is_parameter and existing != segment.name:
                kind = "Catch-all" if segment.segment_type == SegmentType.CATCH_ALL else "Dynamic"
                raise RouteConflictError(
                    f"{kind} segment '{segment.original}' in {route.pattern} conflicts with "
                    f"existing parameter '{existing}' at the same position"
                )

        current = self._nodes[node_id].route
        if current is not None:
            raise DuplicateRouteError(
                f"Duplicate route {route.pattern}\n"
                f"  First: {current.source or current.pattern}\n"
                f"  Second: {route.source or route.pattern}"
            )

    def match(self, path: str) -> RouteMatch | None:
        """Resolve a request path to a route and its parameter bindings.

        Depth-first search over an explicit choice stack. At every level the
        static child is explored first, then the dynamic child, then the
        catch-all child, so a static branch that dead-ends deeper down falls
        back to its dynamic and catch-all siblings.

        A catch-all binds the slash-joined remainder and needs at least one
        segment. Paths without a leading slash or with an empty segment
        (``//a``, ``/a/``) never match.

        Returns:
            RouteMatch for the winning route, or None when nothing matches.
        """
        if not path.startswith("/"):
            return None
        parts = split_path(path)
        if "" in parts:
            return None

        end = len(parts)
        stack: list[tuple[int, int, tuple[tuple[str, str], ...]]] = [(ROOT, 0, ())]

        while stack:
            node_id, index, params = stack.pop()
            node = self._nodes[node_id]

            if index == end:
                if node.route is not None:
                    return RouteMatch(route=node.route, params=params)
                continue

            part = parts[index]

            # Pushed in reverse precedence so the static branch is popped first
            if node.catch_all_child is not None:
                catch_all = self._nodes[node.catch_all_child]
                remainder = "/".join(parts[index:])
                stack.append((node.catch_all_child, end, (*params, (catch_all.parameter, remainder))))

            if node.dynamic_child is not None:
                dynamic = self._nodes[node.dynamic_child]
                stack.append((node.dynamic_child, index + 1, (*params, (dynamic.parameter, part))))

            child = node.static_children.get(part)
            if child is not None:
                stack.append((child, index + 1, params))

        return None


def insert_route(tree: RouteTree, route: Route) -> None:
    """Insert ``route`` into ``tree``. See RouteTree.insert."""
    tree.insert(route)


def match(tree: RouteTree, path: str) -> RouteMatch | None:
    """Resolve ``path`` against ``tree``. See RouteTree.match."""
    return tree.match(path)
