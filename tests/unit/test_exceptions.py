"""Unit tests for exception hierarchy."""

import pytest

from fastapi_pages_routing.exceptions import (
    DuplicateRouteError,
    FileBasedRoutingError,
    PathParseError,
    RouteBuildError,
    RouteConflictError,
    RouteDiscoveryError,
)


class TestFileBasedRoutingError:
    """Tests for the base exception class."""

    def test_inherits_from_exception(self) -> None:
        """FileBasedRoutingError inherits from Exception."""
        assert issubclass(FileBasedRoutingError, Exception)

    def test_message_is_preserved(self) -> None:
        """Exception message is accessible."""
        error = FileBasedRoutingError("specific error details")
        assert str(error) == "specific error details"


@pytest.mark.parametrize(
    "error_class",
    [PathParseError, RouteDiscoveryError, DuplicateRouteError, RouteConflictError],
)
class TestSubclasses:
    """Every specific error is a FileBasedRoutingError."""

    def test_inherits_from_file_based_routing_error(self, error_class) -> None:
        assert issubclass(error_class, FileBasedRoutingError)

    def test_can_be_caught_with_base_class(self, error_class) -> None:
        try:
            raise error_class("boom")
        except FileBasedRoutingError as e:
            assert isinstance(e, error_class)
            assert str(e) == "boom"


class TestRouteBuildError:
    """Tests for the aggregate build error."""

    def test_keeps_every_error(self) -> None:
        errors = [
            PathParseError("Empty segment in pattern '//a'"),
            DuplicateRouteError("Duplicate route /blog"),
        ]

        error = RouteBuildError(errors)

        assert error.errors == tuple(errors)

    def test_message_lists_every_error(self) -> None:
        error = RouteBuildError(
            [
                RouteConflictError("Dynamic segment '[id]' conflicts"),
                DuplicateRouteError("Duplicate route /blog"),
            ]
        )

        message = str(error)
        assert message.startswith("2 route(s) rejected:")
        assert "RouteConflictError: Dynamic segment '[id]' conflicts" in message
        assert "DuplicateRouteError: Duplicate route /blog" in message

    def test_accepts_any_iterable(self) -> None:
        error = RouteBuildError(PathParseError(str(i)) for i in range(3))
        assert len(error.errors) == 3

    def test_is_file_based_routing_error(self) -> None:
        with pytest.raises(FileBasedRoutingError):
            raise RouteBuildError([])
