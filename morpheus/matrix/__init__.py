"""
Dense matrix module.

Public API:
    Matrix  - rectangular float64 matrix with element-wise, scalar,
              product and transpose operations
"""

from morpheus.matrix.matrix import Matrix

__all__ = [
    "Matrix",
]
