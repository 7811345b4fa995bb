import logging

from .encoding import (
    BarcodeEncoding,
    Codabar,
    Code11,
    Code128,
    Code39,
    Code93,
    Control,
    Coop2of5,
    Ean8,
    Ean13,
    Interleaved2of5,
    Matrix2of5,
    Plessey,
    PostNet,
    Standard2of5,
    UpcA,
    UpcE,
    UpcSupplemental2,
    UpcSupplemental5,
    upca_to_upce,
    upce_to_upca,
)
from .errors import (
    BarcodeError,
    ChecksumMismatch,
    ConfigurationConflict,
    InvalidCharacter,
    InvalidInput,
    InvalidLength,
    UnsupportedConversion,
)
from .options import EncodingOptions
from .rle import RunLengths
from .symbology import Symbology, get_encoding

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
