"""First-order Hidden Markov Model with Viterbi (MAP) decoding."""

from __future__ import annotations

import logging
import numbers
from typing import List, Sequence

import numpy as np

from hmmflow.core.errors import (
    DimensionError,
    EmptyObservationError,
    LabelOutOfRangeError,
    NegativeValueError,
    TooFewOutcomesError,
    TooFewStatesError,
)
from hmmflow.core.matrices import Matrix, Vector

logger = logging.getLogger(__name__)


def _require(value, kind, name):
    if not isinstance(value, kind):
        raise TypeError(
            f"Expected {kind.__name__} for {name}, got {type(value).__name__}"
        )


def _warn_on_zeros(costs, name):
    if np.isposinf(costs.to_numpy()).any():
        logger.warning(
            "%s contain zero probabilities; those events are treated as impossible",
            name,
        )


class HiddenMarkovModel:
    """Hidden Markov Model of order 1.

    States and observable labels are identified by integer ids starting
    at zero.  All parameters are stored as costs, ``-log2(p)``, so the
    most probable explanation is the one with the lowest total cost.
    The probabilities do not have to be normalised; they are treated as
    potentials.

    Parameters
    ----------
    initials : Vector
        Initial weight of each state.  Its length sets the number of
        states.
    transitions : Matrix
        ``transitions[i, j]`` is the weight of moving from state *i* to
        state *j*.  Must be ``state_count x state_count``.
    emissions : Matrix
        ``emissions[i, k]`` is the weight of observing label *k* while in
        state *i*.  Must have ``state_count`` rows; its column count sets
        the number of labels.

    Raises
    ------
    TooFewStatesError
        If there are fewer than two states.
    NegativeValueError
        If any parameter is negative or not finite.
    DimensionError
        If the matrix shapes do not agree with the number of states.
    TooFewOutcomesError
        If there are fewer than two labels.
    """

    def __init__(self, initials: Vector, transitions: Matrix, emissions: Matrix):
        _require(initials, Vector, "initials")
        _require(transitions, Matrix, "transitions")
        _require(emissions, Matrix, "emissions")

        state_count = len(initials)
        if state_count < 2:
            raise TooFewStatesError(
                f"A model needs at least 2 states, got {state_count}"
            )
        if not initials.is_positive():
            raise NegativeValueError(
                "Initial probabilities must be finite and non-negative"
            )
        if not transitions.is_positive():
            raise NegativeValueError(
                "Transition probabilities must be finite and non-negative"
            )
        if not emissions.is_positive():
            raise NegativeValueError(
                "Emission probabilities must be finite and non-negative"
            )
        if transitions.shape != (state_count, state_count):
            raise DimensionError(
                f"Transition matrix shape {transitions.shape} does not match "
                f"number of states ({state_count})"
            )
        if emissions.rows != state_count:
            raise DimensionError(
                f"Emission matrix has {emissions.rows} rows, expected {state_count}"
            )
        label_count = emissions.cols
        if label_count < 2:
            raise TooFewOutcomesError(
                f"A model needs at least 2 observable labels, got {label_count}"
            )

        self._state_count = state_count
        self._label_count = label_count
        self._init_costs = initials.minus_log()
        self._transition_costs = transitions.minus_log()
        self._emission_costs = emissions.minus_log()

        _warn_on_zeros(self._init_costs, "Initial probabilities")
        _warn_on_zeros(self._transition_costs, "Transition probabilities")
        _warn_on_zeros(self._emission_costs, "Emission probabilities")
        logger.debug(
            "Built HMM with %d states and %d labels", state_count, label_count
        )

    @classmethod
    def from_probabilities(
        cls,
        initials: Sequence[float],
        transitions: Sequence[Sequence[float]],
        emissions: Sequence[Sequence[float]],
    ) -> HiddenMarkovModel:
        """Build a model from plain (nested) sequences of probabilities.

        Raises
        ------
        DimensionError
            If either matrix is empty or ragged.
        """
        return cls(Vector(initials), Matrix(transitions), Matrix(emissions))

    @property
    def state_count(self) -> int:
        return self._state_count

    @property
    def label_count(self) -> int:
        return self._label_count

    @property
    def init_costs(self) -> Vector:
        return self._init_costs

    @property
    def transition_costs(self) -> Matrix:
        return self._transition_costs

    @property
    def emission_costs(self) -> Matrix:
        return self._emission_costs

    def __repr__(self) -> str:
        return (
            f"HiddenMarkovModel(state_count={self._state_count}, "
            f"label_count={self._label_count})"
        )

    def _check_observations(self, observations: Sequence[int]) -> List[int]:
        labels = list(observations)
        if not labels:
            raise EmptyObservationError("Observation sequence is empty")
        for t, label in enumerate(labels):
            if (
                not isinstance(label, numbers.Integral)
                or isinstance(label, bool)
                or not 0 <= label < self._label_count
            ):
                raise LabelOutOfRangeError(
                    f"Observation {t} has label {label!r}; labels must be "
                    f"integers in [0, {self._label_count})"
                )
        return [int(label) for label in labels]

    def map_estimate(self, observations: Sequence[int]) -> List[int]:
        """Decode the most probable hidden state sequence (Viterbi).

        Parameters
        ----------
        observations : sequence of int
            Observed label ids, each in ``[0, label_count)``.

        Returns
        -------
        list of int
            One state id per observation.

        Raises
        ------
        EmptyObservationError
            If *observations* is empty.
        LabelOutOfRangeError
            If a label is not a valid emission column.
        """
        labels = self._check_observations(observations)
        logger.debug("Decoding %d observations", len(labels))

        # Forward pass: cost[j] is the cheapest way to be in state j.
        cost = self._init_costs
        traceback: List[List[int]] = []
        for label in labels:
            combined = cost.add(self._emission_costs.column(label))
            scored = self._transition_costs.add_to_rows(combined)
            cost = scored.min_by_column()
            traceback.append(scored.argmin_by_column())

        state = cost.argmin()
        logger.debug("Best path cost %.6f", cost[state])

        path = [0] * len(labels)
        for t in range(len(labels) - 1, -1, -1):
            state = traceback[t][state]
            path[t] = state
        return path
