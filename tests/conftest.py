"""Shared pytest fixtures for fastapi-pages-routing tests."""

from pathlib import Path
from typing import Any

import pytest

from fastapi_pages_routing.core.route import Route
from fastapi_pages_routing.core.tree import RouteTree


@pytest.fixture
def create_page_file(tmp_path: Path):
    """Create a page file at a path relative to a pages directory.

    Returns a callable that accepts:
    - relative_path: File path relative to the pages directory
      (e.g., "about.py" or "blog/[slug].py")
    - content: File content (defaults to a one-line docstring)
    - parent_dir: Pages directory (defaults to tmp_path)

    Returns the Path to the created file.
    """

    def _create(
        relative_path: str,
        content: str = '"""Page."""\n',
        parent_dir: Path | None = None,
    ) -> Path:
        base = parent_dir or tmp_path
        page_file = base / relative_path
        page_file.parent.mkdir(parents=True, exist_ok=True)
        page_file.write_text(content)
        return page_file

    return _create


@pytest.fixture
def create_page_tree(tmp_path: Path, create_page_file):
    """Create a pages directory from a dict specification.

    Accepts a dict where:
    - Keys are file or directory names (e.g., "index.py", "blog", "[slug].py")
    - Values are either:
      - str: content of the file named by the key
      - dict: nested directory

    Example:
        {
            "index.py": "",
            "blog": {
                "archive.py": "",
                "[slug].py": "",
            },
        }

    Returns the tmp_path root containing the tree.
    """

    def _create(spec: dict[str, Any], parent_dir: Path | None = None) -> Path:
        base = parent_dir or tmp_path

        for key, value in spec.items():
            if isinstance(value, str):
                create_page_file(key, content=value, parent_dir=base)
            elif isinstance(value, dict):
                subdir = base / key
                subdir.mkdir(parents=True, exist_ok=True)
                _create(value, parent_dir=subdir)
            else:
                msg = f"Invalid spec value type: {type(value)}"
                raise TypeError(msg)

        return base

    return _create


@pytest.fixture
def make_tree():
    """Build an unfrozen RouteTree from a list of patterns."""

    def _make(*patterns: str) -> RouteTree:
        tree = RouteTree()
        for pattern in patterns:
            tree.insert(Route.from_pattern(pattern))
        return tree

    return _make
