"""hmmflow: Hidden Markov Model inference.

This package provides small immutable vector and matrix containers and a
first-order Hidden Markov Model that decodes the most probable hidden
state sequence for a batch of observations with the Viterbi algorithm.
"""

from importlib.metadata import PackageNotFoundError, version as _dist_version

try:
    __version__ = _dist_version("hmmflow")
except PackageNotFoundError:
    # Running from a source checkout that was never installed.
    __version__ = "0.1.0"

from .core.errors import (
    DimensionError,
    EmptyObservationError,
    HMMError,
    InvalidObservationError,
    LabelOutOfRangeError,
    NegativeValueError,
    TooFewOutcomesError,
    TooFewStatesError,
)
from .core.matrices import Matrix, Vector
from .temporal.hmm import HiddenMarkovModel

__all__ = [
    "Vector",
    "Matrix",
    "HiddenMarkovModel",
    "HMMError",
    "DimensionError",
    "TooFewStatesError",
    "NegativeValueError",
    "TooFewOutcomesError",
    "InvalidObservationError",
    "EmptyObservationError",
    "LabelOutOfRangeError",
]
