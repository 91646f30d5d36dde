"""Directory scanner for page routing.

Walks the pages directory to discover page files and convert their
relative paths into route patterns.
"""

from dataclasses import dataclass
from pathlib import Path

from fastapi_pages_routing.core.parser import to_pattern
from fastapi_pages_routing.exceptions import RouteDiscoveryError


@dataclass(frozen=True)
class PageFile:
    """A discovered page file with its route pattern.

    Attributes:
        relative_path: Posix-style path relative to the pages directory
            (e.g., blog/[slug].py)
        file_path: Absolute path to the page file
        pattern: Route pattern derived from relative_path (e.g., /blog/[slug])
    """

    relative_path: str
    file_path: Path
    pattern: str


def scan_pages(base_path: Path | str, *, suffix: str = ".py") -> list[PageFile]:
    """Scan a directory tree for page files.

    Walks the directory tree recursively and turns every file ending in
    ``suffix`` into a PageFile. Cache directories, hidden entries, private
    files (leading underscore) and symlinks resolving outside the base
    directory are skipped. Patterns are not validated here.

    Args:
        base_path: Root pages directory.
        suffix: File suffix marking a page file.

    Returns:
        List of PageFile objects sorted by relative path.

    Raises:
        RouteDiscoveryError: If base_path doesn't exist or isn't a directory.

    Examples:
        pages = scan_pages("pages")
        for page in pages:
            print(f"{page.pattern} -> {page.relative_path}")
    """
    base = Path(base_path).resolve()

    if not base.exists():
        raise RouteDiscoveryError(f"Base path does not exist: {base}")
    if not base.is_dir():
        raise RouteDiscoveryError(f"Base path is not a directory: {base}")

    pages: list[PageFile] = []

    for page_file in base.rglob(f"*{suffix}"):
        if not page_file.is_file():
            continue

        relative = page_file.relative_to(base)

        # Skip __pycache__ directories
        if "__pycache__" in relative.parts:
            continue

        # Skip hidden entries (starting with .)
        if any(part.startswith(".") for part in relative.parts):
            continue

        # Private modules (_helpers.py, __init__.py) are not pages
        if page_file.name.startswith("_"):
            continue

        # Security: Resolve symlinks and verify file is within base path
        if not _is_path_within(page_file.resolve(), base):
            continue

        pages.append(
            PageFile(
                relative_path=relative.as_posix(),
                file_path=page_file,
                pattern=to_pattern(relative, suffix),
            )
        )

    return sorted(pages, key=lambda p: p.relative_path)


def _is_path_within(path: Path, base: Path) -> bool:
    """Check if a resolved path is within a base directory.

    Args:
        path: Resolved path to check.
        base: Base directory path.

    Returns:
        True if path is within base, False otherwise.
    """
    try:
        path.relative_to(base)
        return True
    except ValueError:
        return False
