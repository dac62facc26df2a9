#!/usr/bin/env python3
# =============================================================================
#     File: errors.py
#  Created: 2025-06-18 11:40
#   Author: Bernie Roesler
#
"""
Exceptions raised by `sparseinv.sinv`.
"""
# =============================================================================

from numpy.linalg import LinAlgError


class SparseInverseError(Exception):
    """Base class for all errors raised while computing a sparse inverse."""


class InvalidDimensionError(SparseInverseError, ValueError):
    """The input matrix is not square."""


class NotSparseInputError(SparseInverseError, TypeError):
    """A dense (or otherwise unsupported) input was given."""


class ComplexUnsupportedError(SparseInverseError, TypeError):
    """The matrix, or its factor, has complex values."""


class NotPositiveDefiniteError(SparseInverseError, LinAlgError):
    """The factorization found a non-positive pivot.

    Parameters
    ----------
    minor : int
        1-based index of the column at which the factorization failed, in the
        internal (permuted) order.
    """

    def __init__(self, minor, msg=None):
        self.minor = minor
        if msg is None:
            msg = f"Matrix is not positive definite (minor: {minor})."
        super().__init__(msg)

# =============================================================================
# =============================================================================
