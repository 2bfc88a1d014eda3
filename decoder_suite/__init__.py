"""
DeCoder Suite - multi-scheme text encoder and decoder.

Fifteen schemes (Morse, Base64, Caesar, HTML entities and more) behind a
single transform() call, a chunked batch processor with progress and
cancellation, and a bounded history of recent conversions.
"""

__version__ = "1.0.0"

from .batch import (
    CancellationToken,
    output_filename,
    process_batch,
    process_batch_async,
    process_file,
)
from .engine import decode, encode, transform
from .errors import (
    BatchCancelledError,
    DeCoderError,
    EmptyInputError,
    InvalidOptionError,
    MalformedEncodedInput,
    UnknownSchemeError,
    UnsupportedReverseConversion,
)
from .history import HistoryLedger
from .models import ConversionOptions, ConversionResult
from .registry import Scheme, all_schemes, scheme_from_name, supports_reverse
from .session import ConversionSession

__all__ = [
    "__version__",
    "Scheme",
    "all_schemes",
    "supports_reverse",
    "scheme_from_name",
    "ConversionOptions",
    "ConversionResult",
    "transform",
    "encode",
    "decode",
    "process_batch",
    "process_batch_async",
    "process_file",
    "output_filename",
    "CancellationToken",
    "HistoryLedger",
    "ConversionSession",
    "DeCoderError",
    "EmptyInputError",
    "UnsupportedReverseConversion",
    "MalformedEncodedInput",
    "InvalidOptionError",
    "UnknownSchemeError",
    "BatchCancelledError",
]
