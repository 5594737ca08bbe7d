import pytest

from ashmow.uuid_util import Uuid

KNOWN = "2e1f12dc-2f89-4791-b61d-23a9b17fd3a5"


def test_string_round_trip():
    assert str(Uuid.from_string(KNOWN)) == KNOWN


def test_parsed_bytes_match_text():
    parsed = Uuid.from_string(KNOWN)
    assert parsed.data == bytes.fromhex(KNOWN.replace("-", ""))


def test_upper_case_parses_like_lower_case():
    assert Uuid.from_string(KNOWN.upper()) == Uuid.from_string(KNOWN)


def test_non_hex_digits_read_as_zero():
    parsed = Uuid.from_string("zzzzzzzz-zzzz-zzzz-zzzz-zzzzzzzzzzzz")
    assert parsed == Uuid(bytes(16))
    assert str(parsed) == "00000000-0000-0000-0000-000000000000"


def test_random_round_trips_through_text():
    value = Uuid.random()
    text = str(value)
    assert len(text) == 36
    assert Uuid.from_string(text) == value


def test_random_values_differ():
    values = {Uuid.random() for _ in range(20)}
    assert len(values) == 20


def test_equal_values_hash_alike():
    assert len({Uuid.from_string(KNOWN), Uuid.from_string(KNOWN)}) == 1


def test_short_text_raises():
    with pytest.raises(ValueError):
        Uuid.from_string("2e1f12dc-2f89")


def test_wrong_byte_count_raises():
    with pytest.raises(ValueError):
        Uuid(b"\x00" * 15)