"""Tests for the FastAPI router adapter module."""

from pathlib import Path

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from fastapi_pages_routing.core.route import Route, RouteMatch
from fastapi_pages_routing.core.router import PageRouter
from fastapi_pages_routing.exceptions import RouteBuildError, RouteDiscoveryError
from fastapi_pages_routing.fastapi.router import create_router_from_path, page_resolver


@pytest.fixture
def blog_pages(create_page_tree):
    return create_page_tree(
        {
            "index.py": "",
            "about.py": "",
            "blog": {"archive.py": "", "[slug].py": ""},
            "users": {"[...parts].py": ""},
        }
    )


class TestCreateRouterFromPath:
    """Test the APIRouter factory."""

    def test_resolves_static_page(self, blog_pages: Path):
        app = FastAPI()
        app.include_router(create_router_from_path(blog_pages))
        client = TestClient(app)

        response = client.get("/about")

        assert response.status_code == 200
        assert response.json() == {"pattern": "/about", "params": {}, "source": "about.py"}

    def test_resolves_root_page(self, blog_pages: Path):
        app = FastAPI()
        app.include_router(create_router_from_path(blog_pages))
        client = TestClient(app)

        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["source"] == "index.py"

    def test_resolves_dynamic_page(self, blog_pages: Path):
        app = FastAPI()
        app.include_router(create_router_from_path(blog_pages))
        client = TestClient(app)

        response = client.get("/blog/hello-world")

        assert response.status_code == 200
        assert response.json() == {
            "pattern": "/blog/[slug]",
            "params": {"slug": "hello-world"},
            "source": "blog/[slug].py",
        }

    def test_static_beats_dynamic(self, blog_pages: Path):
        app = FastAPI()
        app.include_router(create_router_from_path(blog_pages))
        client = TestClient(app)

        assert client.get("/blog/archive").json()["pattern"] == "/blog/archive"

    def test_resolves_catch_all_page(self, blog_pages: Path):
        app = FastAPI()
        app.include_router(create_router_from_path(blog_pages))
        client = TestClient(app)

        response = client.get("/users/a/b/c")

        assert response.status_code == 200
        assert response.json()["params"] == {"parts": "a/b/c"}

    def test_unknown_path_returns_404(self, blog_pages: Path):
        app = FastAPI()
        app.include_router(create_router_from_path(blog_pages))
        client = TestClient(app)

        response = client.get("/nonexistent/path")

        assert response.status_code == 404
        assert "/nonexistent/path" in response.json()["detail"]

    def test_zero_segment_catch_all_returns_404(self, blog_pages: Path):
        app = FastAPI()
        app.include_router(create_router_from_path(blog_pages))
        client = TestClient(app)

        assert client.get("/users").status_code == 404

    def test_prefix(self, blog_pages: Path):
        app = FastAPI()
        app.include_router(create_router_from_path(blog_pages, prefix="/pages"))
        client = TestClient(app)

        response = client.get("/pages/blog/first")

        assert response.status_code == 200
        assert response.json()["params"] == {"slug": "first"}
        assert client.get("/blog/first").status_code == 404

    def test_custom_suffix(self, create_page_tree):
        base = create_page_tree({"about.go": ""})
        app = FastAPI()
        app.include_router(create_router_from_path(base, suffix=".go"))
        client = TestClient(app)

        assert client.get("/about").json()["source"] == "about.go"

    def test_exposes_page_router(self, blog_pages: Path):
        router = create_router_from_path(blog_pages)

        assert isinstance(router.page_router, PageRouter)
        assert "/blog/[slug]" in router.page_router

    def test_missing_directory_raises(self, tmp_path: Path):
        with pytest.raises(RouteDiscoveryError):
            create_router_from_path(tmp_path / "missing")

    def test_conflicting_pages_raise(self, create_page_tree):
        base = create_page_tree({"blog": {"[slug].py": "", "[id]": {"edit.py": ""}}})

        with pytest.raises(RouteBuildError):
            create_router_from_path(base)


class TestPageResolver:
    """Test the dependency factory on a hand-written app."""

    def _app(self, page_router: PageRouter, path: str) -> FastAPI:
        app = FastAPI()
        resolve = page_resolver(page_router)

        @app.get(path)
        async def render(page: RouteMatch = Depends(resolve)):
            return {"pattern": page.route.pattern, "params": page.as_dict()}

        return app

    def test_uses_page_path_parameter(self):
        page_router = PageRouter.from_routes([Route.from_pattern("/docs/[...path]")])
        client = TestClient(self._app(page_router, "/site/{page_path:path}"))

        response = client.get("/site/docs/intro/setup")

        assert response.status_code == 200
        assert response.json() == {
            "pattern": "/docs/[...path]",
            "params": {"path": "intro/setup"},
        }

    def test_falls_back_to_request_path(self):
        page_router = PageRouter.from_routes([Route.from_pattern("/health")])
        client = TestClient(self._app(page_router, "/health"))

        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"pattern": "/health", "params": {}}

    def test_no_match_raises_404(self):
        page_router = PageRouter.from_routes([Route.from_pattern("/blog/[slug]")])
        client = TestClient(self._app(page_router, "/{page_path:path}"))

        assert client.get("/blog/a/b").status_code == 404
