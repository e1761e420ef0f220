from ._base import Adaptor
from ._sources import IntoSource, Iter, Seq, Stride, into_source, times

__all__ = ["Adaptor", "IntoSource", "Iter", "Seq", "Stride", "into_source", "times"]
