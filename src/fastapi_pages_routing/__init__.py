"""File-system page routing with a static > dynamic > catch-all route tree."""

# Primary API and core types
from fastapi_pages_routing.core.parser import PathSegment, SegmentType, to_pattern
from fastapi_pages_routing.core.registry import RouteRegistry
from fastapi_pages_routing.core.route import Route, RouteMatch
from fastapi_pages_routing.core.router import PageRouter, build_tree
from fastapi_pages_routing.core.scanner import PageFile, scan_pages
from fastapi_pages_routing.core.tree import RouteTree

# Exceptions
from fastapi_pages_routing.exceptions import (
    DuplicateRouteError,
    FileBasedRoutingError,
    PathParseError,
    RouteBuildError,
    RouteConflictError,
    RouteDiscoveryError,
)
from fastapi_pages_routing.fastapi.router import create_router_from_path, page_resolver

__all__ = [
    # Primary API
    "PageRouter",
    "build_tree",
    "create_router_from_path",
    "page_resolver",
    # Core types
    "PageFile",
    "PathSegment",
    "Route",
    "RouteMatch",
    "RouteRegistry",
    "RouteTree",
    "SegmentType",
    "scan_pages",
    "to_pattern",
    # Exceptions
    "DuplicateRouteError",
    "FileBasedRoutingError",
    "PathParseError",
    "RouteBuildError",
    "RouteConflictError",
    "RouteDiscoveryError",
]

__version__ = "0.1.0"
