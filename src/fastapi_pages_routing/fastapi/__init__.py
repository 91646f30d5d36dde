"""FastAPI adapter for page routing."""

from fastapi_pages_routing.fastapi.router import create_router_from_path, page_resolver

__all__ = ["create_router_from_path", "page_resolver"]
