"""Exceptions raised by magicsig."""


class MagicSigError(Exception):
    """Base exception for signature analysis."""


class NullInputError(MagicSigError, TypeError):
    """Raised when a required input (stream, signature, buffer) is missing."""


class InvalidStateError(MagicSigError, RuntimeError):
    """Raised when a stream is present but cannot be read or seeked."""


class InvalidArgumentError(MagicSigError, ValueError):
    """Raised for malformed signature text, offsets or signature collections."""


class ConfigError(MagicSigError):
    """Raised when a signature catalog file cannot be processed."""
