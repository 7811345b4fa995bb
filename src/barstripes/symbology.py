"""Closed set of supported symbologies and their encoder classes."""
import logging
from enum import Enum

from .encoding.codabar import Codabar
from .encoding.code11 import Code11
from .encoding.code128 import Code128
from .encoding.code39 import Code39
from .encoding.code93 import Code93
from .encoding.ean import Ean8, Ean13, UpcA
from .encoding.plessey import Plessey
from .encoding.postnet import PostNet
from .encoding.two_of_five import (
    Coop2of5,
    Interleaved2of5,
    Matrix2of5,
    Standard2of5,
)
from .encoding.upc_supplemental import UpcSupplemental2, UpcSupplemental5
from .encoding.upce import UpcE
from .errors import ConfigurationConflict

logger = logging.getLogger(__name__)


class Symbology(str, Enum):
    EAN13 = "ean13"
    EAN8 = "ean8"
    UPCA = "upca"
    UPCE = "upce"
    UPC_SUPPLEMENTAL_2 = "upc_supplemental_2"
    UPC_SUPPLEMENTAL_5 = "upc_supplemental_5"
    CODE39 = "code39"
    CODE93 = "code93"
    CODE128 = "code128"
    CODABAR = "codabar"
    CODE11 = "code11"
    INTERLEAVED_2OF5 = "interleaved2of5"  # ITF
    STANDARD_2OF5 = "standard2of5"  # Also known as industrial 2 of 5
    MATRIX_2OF5 = "matrix2of5"
    COOP_2OF5 = "coop2of5"
    PLESSEY = "plessey"  # MSI Plessey
    POSTNET = "postnet"

    @property
    def encoding_class(self):
        return ENCODINGS[self]


ENCODINGS = {
    Symbology.EAN13: Ean13,
    Symbology.EAN8: Ean8,
    Symbology.UPCA: UpcA,
    Symbology.UPCE: UpcE,
    Symbology.UPC_SUPPLEMENTAL_2: UpcSupplemental2,
    Symbology.UPC_SUPPLEMENTAL_5: UpcSupplemental5,
    Symbology.CODE39: Code39,
    Symbology.CODE93: Code93,
    Symbology.CODE128: Code128,
    Symbology.CODABAR: Codabar,
    Symbology.CODE11: Code11,
    Symbology.INTERLEAVED_2OF5: Interleaved2of5,
    Symbology.STANDARD_2OF5: Standard2of5,
    Symbology.MATRIX_2OF5: Matrix2of5,
    Symbology.COOP_2OF5: Coop2of5,
    Symbology.PLESSEY: Plessey,
    Symbology.POSTNET: PostNet,
}


def get_encoding(symbology, options=None, **kwargs):
    """Creates encoder of a symbology

    :param symbology:   Symbology member or its value, e.g. "ean13"
    :param options:     EncodingOptions, or pass its fields as keywords
    :return:            BarcodeEncoding instance"""
    try:
        symbology = Symbology(symbology)
    except ValueError:
        raise ConfigurationConflict(
            "Unknown symbology {!r}, use one of {}".format(
                symbology, ", ".join(s.value for s in Symbology)
            )
        ) from None
    logger.debug("Creating %s encoder", symbology.value)
    return ENCODINGS[symbology](options, **kwargs)
