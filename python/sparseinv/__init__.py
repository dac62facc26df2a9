#!/usr/bin/env python3
# =============================================================================
#     File: __init__.py
#  Created: 2025-06-18 09:47
#   Author: Bernie Roesler
#
"""
sparseinv: sparse inverse of symmetric positive definite matrices.

Computes the entries of ``inv(A)`` on the pattern of the Cholesky factor of
`A` (including fill-in), using the Takahashi recursion on a sparse LDL'
factorization.

Example usage:
    from scipy import sparse
    import sparseinv
    A = sparse.csc_array([[2., -1, 0], [-1, 2, -1], [0, -1, 2]])
    Z = sparseinv.sinv(A)
    print(Z.toarray())

Author: Bernie Roesler
Date: 2025-06-18
Version: 0.1
"""
# =============================================================================

from ._csc import CSCMatrix, SparseColumn, cumsum
from ._ldl import (
    CholOptions,
    LDLFactor,
    ORDERS,
    Status,
    SymbolicFactor,
    analyze,
    factorize,
    rcm
)
from ._sinv import permute_lower, sinv, sinv_factor, symmetric_fill, takahashi
from .errors import (
    ComplexUnsupportedError,
    InvalidDimensionError,
    NotPositiveDefiniteError,
    NotSparseInputError,
    SparseInverseError
)
from .utils import (
    davis_example_chol,
    from_ndarray,
    from_scipy_sparse,
    is_symmetric,
    to_scipy_sparse
)


__version__ = '0.1.0'

__all__ = [
    'CSCMatrix',
    'SparseColumn',
    'cumsum',
    'CholOptions',
    'LDLFactor',
    'ORDERS',
    'Status',
    'SymbolicFactor',
    'analyze',
    'factorize',
    'rcm',
    'permute_lower',
    'sinv',
    'sinv_factor',
    'symmetric_fill',
    'takahashi',
    'ComplexUnsupportedError',
    'InvalidDimensionError',
    'NotPositiveDefiniteError',
    'NotSparseInputError',
    'SparseInverseError',
    'davis_example_chol',
    'from_ndarray',
    'from_scipy_sparse',
    'is_symmetric',
    'to_scipy_sparse',
]

# =============================================================================
# =============================================================================
