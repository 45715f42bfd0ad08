"""Temporal models for hmmflow."""

from hmmflow.temporal.hmm import HiddenMarkovModel

__all__ = ["HiddenMarkovModel"]
