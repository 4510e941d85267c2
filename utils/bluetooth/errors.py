"""Exceptions raised by report mutators and the report codec."""

from __future__ import annotations


class EIRError(Exception):
    """Base class for report errors."""


class InvalidArgument(EIRError, ValueError):
    """Missing input, wrong-length buffer or a value outside its wire width."""


class InternalError(EIRError, RuntimeError):
    """A supporting object could not be constructed."""
