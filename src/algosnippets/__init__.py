from algosnippets.matrix import DimensionMismatchError, format_rows, identity, matrix_mul
from algosnippets.topk import InvalidArgumentError, top_k

__all__ = [
    "DimensionMismatchError",
    "InvalidArgumentError",
    "format_rows",
    "identity",
    "matrix_mul",
    "top_k",
]
