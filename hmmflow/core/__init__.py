"""Core module for hmmflow.

This module contains the numeric containers the decoder is built on and
the error types shared across the package.
"""

from .matrices import Matrix, Vector
from .errors import HMMError

__all__ = ["Vector", "Matrix", "HMMError"]
