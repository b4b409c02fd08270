"""Exceptions raised by arraysorter."""

from __future__ import annotations


class SorterError(Exception):
    """Base class for all arraysorter errors."""


class InvalidArgumentError(SorterError, ValueError):
    """Raised when a sequence or algorithm argument is absent or unusable."""


class UnsupportedAlgorithmError(SorterError, NotImplementedError):
    """Raised when no implementation is registered for an algorithm identifier."""
