"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

from filteroption.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InvalidQueryParamError,
    ValidationError,
)


class TestBaseError:
    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause
        assert "root" in err.to_dict()["cause"]

    def test_str_is_valid_json(self) -> None:
        parsed = json.loads(str(BaseError("oops", code="oops")))
        assert parsed["code"] == "oops"


class TestInvalidQueryParamError:
    def test_hierarchy(self) -> None:
        err = InvalidQueryParamError("pageSize", "x", "expected an integer")
        assert isinstance(err, ValidationError)
        assert isinstance(err, DomainError)
        assert not isinstance(err, ApplicationError)

    def test_to_dict_includes_field_errors(self) -> None:
        err = InvalidQueryParamError("pageSize", "x", "expected an integer")
        d = err.to_dict()
        assert d["code"] == "invalid_query_param"
        assert d["errors"] == [{"field": "pageSize", "value": "x", "reason": "expected an integer"}]
        assert "pageSize" in d["message"]
