"""
Core numeric primitives and data contracts.

Foundation of the geodesic computations: error-aware elementary math
(src.core.math) and JSON Schema contracts for its data (src.core.contracts).
"""
