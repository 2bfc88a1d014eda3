from datetime import datetime
from typing import Optional

from .engine import transform
from .errors import EmptyInputError
from .history import HistoryLedger
from .models import ConversionOptions, ConversionResult
from .registry import Scheme


class ConversionSession:
    """Runs conversions and keeps the recent ones in a HistoryLedger."""

    def __init__(self, ledger: Optional[HistoryLedger] = None):
        self.ledger = ledger if ledger is not None else HistoryLedger()

    def convert(self, text: str, scheme: Scheme, options: Optional[ConversionOptions] = None) -> ConversionResult:
        if not text:
            raise EmptyInputError()
        if options is None:
            options = ConversionOptions()

        output = transform(scheme, text, options)
        result = ConversionResult(
            input=text,
            output=output,
            scheme=scheme,
            reverse=options.reverse,
            timestamp=datetime.now(),
        )
        self.ledger.record(result)
        return result

    def export(self) -> str:
        return self.ledger.export()
