"""FastAPI adapter for page routing.

Resolves request paths through a PageRouter. What the application does
with the resolved page is up to the application.
"""

import logging
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request

from fastapi_pages_routing.core.route import RouteMatch
from fastapi_pages_routing.core.router import PageRouter

logger = logging.getLogger(__name__)

PAGE_PATH_PARAM = "page_path"


def page_resolver(page_router: PageRouter) -> Callable[[Request], Awaitable[RouteMatch]]:
    """Create a FastAPI dependency that resolves the request to a page.

    The dependency reads the ``page_path`` path parameter when the endpoint
    declares one (so router prefixes are excluded) and falls back to the
    full request path otherwise.

    Args:
        page_router: The built router to resolve against.

    Returns:
        An async dependency returning the RouteMatch. It raises
        HTTPException(404) when no page matches.

    Example:
        resolve = page_resolver(PageRouter.from_directory("pages"))

        @app.get("/{page_path:path}")
        async def render(page: RouteMatch = Depends(resolve)):
            ...
    """

    async def resolve_page(request: Request) -> RouteMatch:
        if PAGE_PATH_PARAM in request.path_params:
            path = "/" + request.path_params[PAGE_PATH_PARAM]
        else:
            path = request.url.path

        result = page_router.match(path)
        if result is None:
            logger.debug("No page matched", extra={"path": path})
            raise HTTPException(status_code=404, detail=f"No page matches {path!r}")
        return result

    return resolve_page


def create_router_from_path(
    base_path: str | Path,
    *,
    prefix: str = "",
    suffix: str = ".py",
) -> APIRouter:
    """Create a FastAPI APIRouter that resolves requests against a pages directory.

    Builds a PageRouter from the directory and exposes a single
    ``GET /{page_path:path}`` endpoint describing the resolved page.

    Args:
        base_path: Root pages directory.
        prefix: Optional URL prefix for the endpoint.
        suffix: File suffix marking a page file.

    Returns:
        A FastAPI APIRouter. The underlying PageRouter is available as its
        ``page_router`` attribute.

    Raises:
        RouteDiscoveryError: If base_path doesn't exist or isn't a directory.
        RouteBuildError: If any page is malformed or collides with another.

    Example:
        from fastapi import FastAPI
        from fastapi_pages_routing import create_router_from_path

        app = FastAPI()
        app.include_router(create_router_from_path("pages"))
    """
    page_router = PageRouter.from_directory(base_path, suffix=suffix)
    resolve_page = page_resolver(page_router)

    router = APIRouter(prefix=prefix)

    async def describe_page(page: RouteMatch = Depends(resolve_page)) -> dict[str, Any]:
        """Describe the page resolved for the request path."""
        return {
            "pattern": page.route.pattern,
            "params": page.as_dict(),
            "source": page.route.source,
        }

    router.add_api_route(
        path=f"/{{{PAGE_PATH_PARAM}:path}}",
        endpoint=describe_page,
        methods=["GET"],
        tags=["pages"],
    )
    router.page_router = page_router  # type: ignore[attr-defined]

    logger.info(
        "Page router created",
        extra={"route_count": len(page_router), "prefix": prefix or "(none)"},
    )

    return router
