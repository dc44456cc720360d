"""Tests for ServiceResult and ServiceError."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from tminus.services.result import ServiceError, ServiceResult, failure


class TestServiceResult:
    def test_defaults(self) -> None:
        result = ServiceResult(ok=True, op="show")
        assert result.data == {}
        assert result.warnings == []
        assert result.error is None

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="show")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]

    def test_json_dump(self) -> None:
        result = ServiceResult(ok=True, op="add_event", data={"url": "?a=1%40UTC"})
        assert '"url": "?a=1%40UTC"' in result.model_dump_json(indent=2)


class TestFailure:
    def test_builds_error(self) -> None:
        result = failure("remove_event", "INDEX_OUT_OF_RANGE", "No event", index=4)
        assert not result.ok
        assert result.error == ServiceError(
            code="INDEX_OUT_OF_RANGE", message="No event", detail={"index": 4}
        )

    def test_no_detail(self) -> None:
        result = failure("show", "X", "y")
        assert result.error is not None
        assert result.error.detail == {}
