"""
Conversion Context - settings shared by decode calls
"""
from typing import Optional

from .temporal import PostgresTemporalCodec, TemporalCodec


class ConversionContext:
    """Decode configuration"""

    def __init__(self, temporal_codec: Optional[TemporalCodec] = None):
        # date/time/timestamp payloads are handed to this codec
        self.temporal_codec = temporal_codec if temporal_codec is not None else PostgresTemporalCodec()

    def __repr__(self):
        return f"{self.__class__.__name__}(temporal_codec={self.temporal_codec!r})"


DEFAULT_CONTEXT = ConversionContext()
