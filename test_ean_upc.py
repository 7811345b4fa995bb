import pytest

from barstripes import (
    ChecksumMismatch,
    Ean8,
    Ean13,
    InvalidCharacter,
    InvalidLength,
    UnsupportedConversion,
    UpcA,
    UpcE,
    UpcSupplemental2,
    UpcSupplemental5,
    upca_to_upce,
    upce_to_upca,
)
from barstripes.encoding.upc_supplemental import UpcSupplemental


def test_ean13_check_digit():
    assert Ean13().check_digit("750105453010") == "7"
    assert Ean13(add_check=True).with_check_digit("750105453010") == \
        "7501054530107"
    assert Ean13().validate("7501054530107")


def test_ean13_pattern():
    expected = (
        "101"
        "0001011" "0100111" "0110011" "0010011" "0111101" "0011101"
        "01010"
        "1100110" "1101100" "1000010" "1011100" "1001110" "1000100"
        "101"
    )
    assert Ean13().encode("5901234123457") == expected
    assert len(Ean13(add_check=True).encode("750105453010")) == 95


def test_ean13_errors():
    with pytest.raises(ChecksumMismatch):
        Ean13().encode("5901234123458")
    with pytest.raises(InvalidLength):
        Ean13().encode("590123412345")
    with pytest.raises(InvalidLength):
        Ean13().check_digit("5901234123")
    with pytest.raises(InvalidCharacter):
        Ean13().check_digit("59012341234x")
    with pytest.raises(InvalidCharacter):
        Ean13().encode(5901234123457)


def test_ean8_pattern():
    expected = (
        "101"
        "0001011" "0101111" "0111101" "0110111"
        "01010"
        "1001110" "1110010" "1000100" "1011100"
        "101"
    )
    assert Ean8(add_check=True).encode("9638507") == expected
    assert Ean8().encode("96385074") == expected


def test_upca():
    assert UpcA().check_digit("03600029145") == "2"
    upca = UpcA(add_check=True).encode("03600029145")
    assert len(upca) == 95
    assert upca == Ean13().encode("0036000291452")


def test_upca_to_upce():
    assert upca_to_upce("012345000065") == "01234565"
    assert upca_to_upce("01234500006") == "01234565"
    assert upca_to_upce("012000003455") == "01234505"
    assert upca_to_upce("012300000451") == "01234531"
    assert upca_to_upce("012340000053") == "01234543"
    with pytest.raises(UnsupportedConversion):
        upca_to_upce("012345678905")
    with pytest.raises(InvalidLength):
        upca_to_upce("0123450000")
    with pytest.raises(InvalidCharacter):
        upca_to_upce("0123450000x5")


def test_upce_to_upca():
    assert upce_to_upca("01234565") == "012345000065"
    assert upce_to_upca("0123456") == "01234500006"
    assert upce_to_upca("123456") == "01234500006"
    assert upce_to_upca("01234505") == "012000003455"


def test_upce_round_trip():
    for upca in ("012345000065", "012000003455", "012300000451",
                 "012340000053"):
        assert upce_to_upca(upca_to_upce(upca)) == upca


def test_upce_pattern():
    expected = (
        "101"
        "0110011" "0010011" "0111101" "0011101" "0111001" "0101111"
        "010101"
    )
    assert UpcE().encode("01234565") == expected
    assert UpcE().encode("012345000065") == expected
    assert UpcE(add_check=True).encode("01234500006") == expected
    assert UpcE(add_check=True).encode("123456") == expected
    assert UpcE(add_check=True).with_check_digit("0123456") == "01234565"


def test_upce_number_system_1():
    # parity of number system 1 is the complement
    expected = (
        "101"
        "0011001" "0010011" "0100001" "0011101" "0110001" "0000101"
        "010101"
    )
    assert UpcE().encode("11234562") == expected


def test_upce_errors():
    assert not UpcE().validate("21234565")
    with pytest.raises(InvalidCharacter):
        UpcE().encode("21234565")
    with pytest.raises(ChecksumMismatch):
        UpcE().encode("01234566")
    with pytest.raises(UnsupportedConversion):
        UpcE().encode("012345678905")
    # UPC-A numbers that don't compress can't be encoded
    assert not UpcE().validate("012345678905")
    assert not UpcE(add_check=True).validate("01234567890")
    assert UpcE().validate("012345000065")
    assert UpcE(add_check=True).validate("01234500006")


def test_supplements():
    expected = "1011" "0011001" "01" "0010011"
    assert UpcSupplemental2(add_check=True).encode("12") == expected
    assert UpcSupplemental2().encode("120") == expected
    assert UpcSupplemental2().check_digit("07") == "3"
    assert UpcSupplemental5().check_digit("52495") == "1"
    assert len(UpcSupplemental5(add_check=True).encode("52495")) == 47
    assert len(UpcSupplemental2(add_check=True).encode("99")) == 20
    with pytest.raises(ChecksumMismatch):
        UpcSupplemental2().encode("121")


def test_supplement5_parity():
    # check digit 1 selects G L G L L
    expected = (
        "1011"
        "0111001" "01" "0010011" "01" "0011101" "01" "0001011" "01" "0110001"
    )
    assert UpcSupplemental5().encode("524951") == expected


def test_supplement_base_is_abstract():
    with pytest.raises(TypeError):
        UpcSupplemental()
