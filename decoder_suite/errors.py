"""
Failure taxonomy for the DeCoder engine.

Every error is recoverable and carries enough context for a caller to
report it. Only the CLI turns these into exit messages.
"""


class DeCoderError(Exception):
    """Base class for all engine errors."""


class EmptyInputError(DeCoderError):
    """Raised by callers that refuse to convert an empty text."""

    def __init__(self, message: str = "Please enter some text to convert"):
        super().__init__(message)


class UnsupportedReverseConversion(DeCoderError):
    """A decode was requested for an encode-only scheme."""

    def __init__(self, scheme):
        self.scheme = scheme
        super().__init__(f"{scheme.display_name} does not support decoding.")


class MalformedEncodedInput(DeCoderError):
    """Encoded input could not be decoded (Base64 only)."""

    def __init__(self, scheme, detail: str):
        self.scheme = scheme
        self.detail = detail
        super().__init__(f"Malformed {scheme.display_name} input: {detail}")


class InvalidOptionError(DeCoderError):
    def __init__(self, name: str, value, allowed: str):
        self.name = name
        self.value = value
        super().__init__(f"{name} must be {allowed}, got {value!r}")


class UnknownSchemeError(DeCoderError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown scheme: {name!r}")


class BatchCancelledError(DeCoderError):
    """The batch was cancelled between chunks; no output is kept."""

    def __init__(self, completed: int, total: int):
        self.completed = completed
        self.total = total
        super().__init__(f"Batch cancelled after {completed}/{total} chunk(s).")
