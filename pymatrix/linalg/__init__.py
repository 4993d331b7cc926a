"""
Matrix decompositions for PyMatrix.

All functions follow these conventions:
    - Computation is delegated to SciPy / NumPy (LAPACK under the hood)
    - Each operation returns a frozen result dataclass of Matrix factors
    - Errors are raised immediately with clear messages
"""

from pymatrix.linalg.decompositions import (
    CholeskyResult,
    LUResult,
    QRResult,
    SVDResult,
    EigenResult,
    cholesky,
    lu,
    qr,
    svd,
    eigen,
    decompose,
)

__all__ = [
    "CholeskyResult",
    "LUResult",
    "QRResult",
    "SVDResult",
    "EigenResult",
    "cholesky",
    "lu",
    "qr",
    "svd",
    "eigen",
    "decompose",
]
