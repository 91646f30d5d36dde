"""Basic example demonstrating fastapi-pages-routing.

This minimal FastAPI application uses create_router_from_path() to
resolve request paths against the pages/ directory.

Run with:
    uvicorn main:app --reload

Resolved pages:
    GET /                -> pages/index.py
    GET /about           -> pages/about.py
    GET /blog            -> pages/blog/index.py
    GET /blog/archive    -> pages/blog/archive.py
    GET /blog/{slug}     -> pages/blog/[slug].py
    GET /docs/{path...}  -> pages/docs/[...path].py
"""

from pathlib import Path

from fastapi import FastAPI
from fastapi_pages_routing import create_router_from_path

app = FastAPI(title="Basic Example")
app.include_router(create_router_from_path(Path(__file__).parent / "pages"))
