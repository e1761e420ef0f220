from ._batching import Batching, BatchSource
from ._buffering import Dedup, MultiPeek
from ._groupby import Group, GroupBy
from ._merge import Merge
from ._product import Product, append_tuple, iproduct
from ._structural import FnMap, Interleave, PutBack, Step

__all__ = [
    "BatchSource",
    "Batching",
    "Dedup",
    "FnMap",
    "Group",
    "GroupBy",
    "Interleave",
    "Merge",
    "MultiPeek",
    "Product",
    "PutBack",
    "Step",
    "append_tuple",
    "iproduct",
]
