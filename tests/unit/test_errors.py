"""
Error Taxonomy and Sentinel Tests
Tests for lean_imt/schemas/errors.py and lean_imt/imt/nodes.py
"""
import copy
import pickle

import pytest

from lean_imt.imt import ZERO, is_zero
from lean_imt.schemas.errors import (
    ConfigurationException,
    DuplicateLeafException,
    ErrorCodes,
    IMTError,
    IMTException,
    InsufficientSiblingPathException,
    InvalidSiblingPathException,
    LeafNotFoundException,
    ZeroLeafException,
    describe_node,
)


class TestExceptions:
    """Tests for the exception hierarchy."""

    @pytest.mark.parametrize(
        "exc, code",
        [
            (ZeroLeafException(), ErrorCodes.ZERO_LEAF),
            (DuplicateLeafException("a"), ErrorCodes.DUPLICATE_LEAF),
            (LeafNotFoundException("a"), ErrorCodes.LEAF_NOT_FOUND),
            (InsufficientSiblingPathException(2, 1), ErrorCodes.INSUFFICIENT_SIBLING_PATH),
            (InvalidSiblingPathException(), ErrorCodes.INVALID_SIBLING_PATH),
            (ConfigurationException("bad"), ErrorCodes.CONFIGURATION_ERROR),
        ],
    )
    def test_codes_and_base_class(self, exc, code):
        assert exc.code == code
        assert isinstance(exc, IMTException)
        assert str(exc) == exc.message

    def test_only_invalid_path_is_retryable(self):
        assert InvalidSiblingPathException().retryable is True
        assert DuplicateLeafException("a").retryable is False
        assert InsufficientSiblingPathException(0, 0).retryable is False

    def test_bytes_leaf_described_as_hex(self):
        exc = DuplicateLeafException(b"\xde\xad")

        assert exc.details == {"leaf": "0xdead"}
        assert exc.leaf == b"\xde\xad"

    def test_describe_node(self):
        assert describe_node("x") == "'x'"
        assert describe_node(ZERO) == "ZERO"
        assert describe_node(bytearray(b"\x01")) == "0x01"

    def test_repr(self):
        exc = LeafNotFoundException("a")

        assert repr(exc) == "LeafNotFoundException(code='LEAF_NOT_FOUND', message='Leaf does not exist')"


class TestErrorModel:
    """Tests for conversion between exceptions and IMTError."""

    def test_to_error_model(self):
        exc = InvalidSiblingPathException(leaf_index=3)

        model = exc.to_error_model()

        assert isinstance(model, IMTError)
        assert model.code == ErrorCodes.INVALID_SIBLING_PATH
        assert model.details == {"leaf_index": 3}
        assert model.retryable is True

    def test_model_dump(self):
        model = InsufficientSiblingPathException(1, 0).to_error_model()

        assert model.model_dump() == {
            "code": ErrorCodes.INSUFFICIENT_SIBLING_PATH,
            "message": "Not enough sibling nodes: missing sibling at level 1",
            "details": {"level": 1, "supplied": 0},
            "retryable": False,
        }

    def test_extra_fields_forbidden(self):
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            IMTError(code="X", message="m", unexpected=True)


class TestZeroSentinel:
    """Tests for the ZERO sentinel."""

    def test_rendering(self):
        assert str(ZERO) == "0"
        assert repr(ZERO) == "ZERO"

    def test_distinct_from_domain_values(self):
        for value in ["0", 0, b"\x00" * 32, None, ""]:
            assert ZERO != value
            assert not is_zero(value)
        assert is_zero(ZERO)

    def test_singleton(self):
        assert type(ZERO)() is ZERO

    def test_survives_copy_and_pickle(self):
        assert copy.copy(ZERO) is ZERO
        assert copy.deepcopy(ZERO) is ZERO
        assert pickle.loads(pickle.dumps(ZERO)) is ZERO

    def test_hashable(self):
        assert {ZERO: 1}[ZERO] == 1
