import logging

from ._adaptors import (
    Batching,
    BatchSource,
    Dedup,
    FnMap,
    Group,
    GroupBy,
    Interleave,
    Merge,
    MultiPeek,
    Product,
    PutBack,
    Step,
    append_tuple,
    iproduct,
)
from ._core import (
    Config,
    ConfigurationError,
    ContractViolationError,
    Restartable,
    Source,
    can_restart,
    get_config,
    set_config,
)
from ._iter import Adaptor, IntoSource, Iter, Seq, Stride, into_source, times
from ._results import NONE, NoneOption, Option, OptionUnwrapError, Some

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NONE",
    "Adaptor",
    "BatchSource",
    "Batching",
    "Config",
    "ConfigurationError",
    "ContractViolationError",
    "Dedup",
    "FnMap",
    "Group",
    "GroupBy",
    "Interleave",
    "IntoSource",
    "Iter",
    "Merge",
    "MultiPeek",
    "NoneOption",
    "Option",
    "OptionUnwrapError",
    "Product",
    "PutBack",
    "Restartable",
    "Seq",
    "Some",
    "Source",
    "Step",
    "Stride",
    "append_tuple",
    "can_restart",
    "get_config",
    "into_source",
    "iproduct",
    "set_config",
    "times",
]
