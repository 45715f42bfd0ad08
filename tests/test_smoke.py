"""Tests for the hmmflow package surface."""

import importlib

import pytest

import hmmflow
from hmmflow.core.errors import (
    DimensionError,
    EmptyObservationError,
    HMMError,
    InvalidObservationError,
    LabelOutOfRangeError,
    NegativeValueError,
    TooFewOutcomesError,
    TooFewStatesError,
)


class TestImport:
    """Test the names exported from the package root."""

    def test_version_is_semver_like(self) -> None:
        assert isinstance(hmmflow.__version__, str)
        parts = hmmflow.__version__.split(".")
        assert len(parts) >= 3, f"Version {hmmflow.__version__!r} is not semver-like"

    def test_reimport(self) -> None:
        importlib.reload(hmmflow)
        assert hmmflow.__version__

    def test_public_names(self) -> None:
        """Every name in __all__ is importable from the package root."""
        for name in hmmflow.__all__:
            assert hasattr(hmmflow, name), name

    def test_root_exports_are_core_objects(self) -> None:
        from hmmflow.core.matrices import Matrix, Vector
        from hmmflow.temporal.hmm import HiddenMarkovModel

        assert hmmflow.Vector is Vector
        assert hmmflow.Matrix is Matrix
        assert hmmflow.HiddenMarkovModel is HiddenMarkovModel


class TestErrorHierarchy:
    """Every hmmflow error can be caught as HMMError and ValueError."""

    @pytest.mark.parametrize(
        "error",
        [
            DimensionError,
            TooFewStatesError,
            NegativeValueError,
            TooFewOutcomesError,
            InvalidObservationError,
            EmptyObservationError,
            LabelOutOfRangeError,
        ],
    )
    def test_subclasses_hmm_error(self, error) -> None:
        assert issubclass(error, HMMError)
        assert issubclass(error, ValueError)

    def test_observation_errors(self) -> None:
        assert issubclass(EmptyObservationError, InvalidObservationError)
        assert issubclass(LabelOutOfRangeError, InvalidObservationError)
        assert not issubclass(EmptyObservationError, LabelOutOfRangeError)

    def test_errors_exported(self) -> None:
        for name in ("HMMError", "DimensionError", "LabelOutOfRangeError"):
            assert name in hmmflow.__all__
