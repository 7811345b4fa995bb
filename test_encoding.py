import logging

import pytest

from barstripes import (
    BarcodeError,
    ChecksumMismatch,
    Code39,
    ConfigurationConflict,
    Ean13,
    EncodingOptions,
    InvalidCharacter,
    InvalidInput,
    RunLengths,
    Symbology,
    get_encoding,
)

SAMPLES = [
    (Symbology.EAN13, {"add_check": True}, "750105453010"),
    (Symbology.EAN8, {"add_check": True}, "9638507"),
    (Symbology.UPCA, {"add_check": True}, "03600029145"),
    (Symbology.UPCE, {}, "01234565"),
    (Symbology.UPC_SUPPLEMENTAL_2, {"add_check": True}, "12"),
    (Symbology.UPC_SUPPLEMENTAL_5, {"add_check": True}, "52495"),
    (Symbology.CODE39, {"add_check": True}, "CODE 39"),
    (Symbology.CODE93, {"add_check": True}, "TEST93"),
    (Symbology.CODE93, {"add_check": True, "auto_promote": True}, "Hi!"),
    (Symbology.CODE128, {}, "Hello 123456 World"),
    (Symbology.CODABAR, {}, "A40156B"),
    (Symbology.CODE11, {}, "123-4530"),
    (Symbology.INTERLEAVED_2OF5, {"add_check": True}, "1234"),
    (Symbology.STANDARD_2OF5, {"add_check": True}, "1234"),
    (Symbology.MATRIX_2OF5, {"add_check": True}, "1234"),
    (Symbology.COOP_2OF5, {"add_check": True}, "1234"),
    (Symbology.PLESSEY, {"add_check": True}, "1234567"),
    (Symbology.POSTNET, {"add_check": True}, "12345"),
]


@pytest.mark.parametrize("symbology,options,data", SAMPLES)
def test_rle_round_trip(symbology, options, data):
    encoding = get_encoding(symbology, **options)
    pattern = encoding.encode(data)
    rle = encoding.encode_rle(data)
    assert rle.total == len(pattern)
    assert rle.pattern() == pattern
    assert RunLengths.parse(str(rle)) == rle
    assert pattern.startswith("1")


@pytest.mark.parametrize("symbology,options,data", SAMPLES)
def test_validate_is_repeatable(symbology, options, data):
    encoding = get_encoding(symbology, **options)
    assert encoding.validate(data)
    assert encoding.validate(data)
    assert encoding.encode(data) == encoding.encode(data)


def test_every_symbology_has_encoding():
    assert len(Symbology) == 17
    for symbology in Symbology:
        encoding = get_encoding(symbology.value)
        assert isinstance(encoding, symbology.encoding_class)
        assert encoding.name


def test_unknown_symbology():
    with pytest.raises(ConfigurationConflict):
        get_encoding("qrcode")


def test_bar_and_space_chars():
    pattern = Ean13(bar_char="#", space_char=" ").encode("5901234123457")
    assert pattern.startswith("# #")
    assert set(pattern) == {"#", " "}


def test_options():
    options = EncodingOptions(add_check=True)
    assert Ean13(options).encode("750105453010") == \
        Ean13(add_check=True).encode("750105453010")
    assert EncodingOptions.names() == \
        ("add_check", "bar_char", "space_char", "auto_promote")
    with pytest.raises(ConfigurationConflict):
        EncodingOptions(bar_char="##")
    with pytest.raises(ConfigurationConflict):
        EncodingOptions(bar_char="x", space_char="x")
    with pytest.raises(ConfigurationConflict):
        EncodingOptions(auto_promote=True)
    with pytest.raises(ConfigurationConflict):
        EncodingOptions.from_mapping({"addcheck": True})
    with pytest.raises(ConfigurationConflict):
        Ean13(options, add_check=False)
    with pytest.raises(ConfigurationConflict):
        Code39(add_check=True, auto_promote=True)
    with pytest.raises(ConfigurationConflict):
        Ean13(colour="red")


def test_options_are_immutable():
    encoding = Ean13()
    with pytest.raises(AttributeError):
        encoding.options.add_check = True


def test_error_hierarchy():
    assert issubclass(InvalidCharacter, InvalidInput)
    assert issubclass(ChecksumMismatch, InvalidInput)
    assert issubclass(InvalidInput, BarcodeError)
    assert issubclass(ConfigurationConflict, BarcodeError)
    assert issubclass(BarcodeError, ValueError)


def test_nothing_is_produced_for_bad_data():
    with pytest.raises(InvalidCharacter):
        Ean13().bars("59012341234x7")


def test_encode_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="barstripes"):
        Ean13().encode("5901234123457")
    assert "EAN-13" in caplog.text
