"""Exceptions raised by barcode encoders.

All of them derive from :class:`ValueError`, so code catching
``ValueError`` around an encoder keeps working.

    BarcodeError
    ├── InvalidInput
    │   ├── InvalidCharacter
    │   ├── InvalidLength
    │   └── ChecksumMismatch
    ├── UnsupportedConversion
    └── ConfigurationConflict
"""

__all__ = [
    "BarcodeError",
    "InvalidInput",
    "InvalidCharacter",
    "InvalidLength",
    "ChecksumMismatch",
    "UnsupportedConversion",
    "ConfigurationConflict",
]


class BarcodeError(ValueError):
    """Base class of all barcode encoding errors."""


class InvalidInput(BarcodeError):
    """Data can't be encoded by the chosen symbology."""


class InvalidCharacter(InvalidInput):
    """Data contains a character outside of the symbology alphabet."""


class InvalidLength(InvalidInput):
    """Data has a length the symbology (or its checksum) doesn't accept."""


class ChecksumMismatch(InvalidInput):
    """Check characters embedded in the data are not the computed ones."""


class UnsupportedConversion(BarcodeError):
    """UPC-A number can't be compressed to UPC-E (or the other way)."""


class ConfigurationConflict(BarcodeError):
    """Encoder options are unknown or contradict each other."""
