"""Error types raised by hmmflow.

Every error derives from :class:`HMMError`, which is itself a
:class:`ValueError`, so callers that already guard against bad input
with ``except ValueError`` keep working.
"""


class HMMError(ValueError):
    """Base class for all hmmflow errors."""


class DimensionError(HMMError):
    """Container data is empty, ragged, or has the wrong shape."""


class TooFewStatesError(HMMError):
    """A model was given fewer than two hidden states."""


class NegativeValueError(HMMError):
    """A probability or potential is negative, infinite, or not a number."""


class TooFewOutcomesError(HMMError):
    """The emission matrix has fewer than two observable labels."""


class InvalidObservationError(HMMError):
    """An observation sequence cannot be decoded."""


class EmptyObservationError(InvalidObservationError):
    """The observation sequence is empty."""


class LabelOutOfRangeError(InvalidObservationError):
    """An observation label is not a column of the emission matrix."""
