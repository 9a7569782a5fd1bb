"""Tests for structured-object encodings."""

import plistlib
from datetime import UTC, datetime, timedelta, timezone
from decimal import Decimal
from enum import Enum
from uuid import UUID

import pytest

from prefkit.coding import (
    CODING_ERRORS,
    DATE_KEY,
    OFFSET_KEY,
    CodingType,
    decode_object,
    dumps_plist,
    encode_object,
    from_plist_value,
    loads_plist,
    to_plist_value,
)
from tests.helpers import Address, Profile, Stamp, WindowFrame, sample_profile


class Mood(Enum):
    CALM = "calm"


def test_to_plist_value_drops_none_fields():
    """Test None mapping entries are omitted."""
    assert to_plist_value({"a": 1, "b": None}) == {"a": 1}


def test_to_plist_value_rejects_none_in_lists():
    """Test None cannot appear where it cannot be omitted."""
    with pytest.raises(TypeError):
        to_plist_value([1, None])


def test_to_plist_value_converts_non_plist_types():
    """Test values without a plist form use their JSON form."""
    value = {
        "id": UUID("12345678-1234-5678-1234-567812345678"),
        "price": Decimal("9.50"),
        "mood": Mood.CALM,
        "tags": ("a", "b"),
        1: "int key",
    }

    assert to_plist_value(value) == {
        "id": "12345678-1234-5678-1234-567812345678",
        "price": "9.50",
        "mood": "calm",
        "tags": ["a", "b"],
        "1": "int key",
    }


def test_aware_timestamps_keep_their_offset():
    """Test aware timestamps are stored in UTC with their offset and come back aware."""
    local = datetime(2024, 3, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))

    stored = to_plist_value(local)
    assert stored == {DATE_KEY: datetime(2024, 3, 1, 10, 0), OFFSET_KEY: 7200.0}

    restored = from_plist_value({"when": [stored]})
    assert restored["when"][0] == local
    assert restored["when"][0].utcoffset() == timedelta(hours=2)
    assert from_plist_value(to_plist_value(datetime(2024, 3, 1, tzinfo=UTC))).tzinfo is UTC


def test_naive_timestamps_stay_naive():
    """Test naive timestamps are stored and read back unchanged."""
    naive = datetime(2024, 3, 1, 12, 0, 30)

    assert to_plist_value(naive) == naive
    restored = loads_plist(dumps_plist({"when": naive}))
    assert restored == {"when": naive}
    assert restored["when"].tzinfo is None


def test_mapping_resembling_a_timestamp_is_kept():
    """Test only the exact two-key form is read back as a timestamp."""
    value = {DATE_KEY: datetime(2024, 3, 1), OFFSET_KEY: 0, "extra": 1}

    assert from_plist_value(value) == value


def test_plist_bytes_are_binary():
    """Test the structured encoding is a binary property list."""
    data = dumps_plist({"a": [1, 2.5, True, b"x"]})

    assert data.startswith(b"bplist00")
    assert loads_plist(data) == {"a": [1, 2.5, True, b"x"]}


def test_loads_plist_rejects_xml():
    """Test only the binary format is accepted."""
    xml = plistlib.dumps({"a": 1}, fmt=plistlib.FMT_XML)

    with pytest.raises(plistlib.InvalidFileException):
        loads_plist(xml)


@pytest.mark.parametrize("coding", list(CodingType))
def test_encode_decode_model(coding):
    """Test a model survives each encoding."""
    profile = sample_profile(avatar=None)

    data = encode_object(profile, coding)

    assert isinstance(data, bytes)
    assert decode_object(data, Profile, coding) == profile


def test_encode_with_explicit_type():
    """Test object_type controls how containers are serialized."""
    frames = [WindowFrame(0, 0, 10, 10), WindowFrame(5, 5, 20, 20, pinned=True)]

    data = encode_object(frames, CodingType.JSON, list[WindowFrame])

    assert decode_object(data, list[WindowFrame], CodingType.JSON) == frames


def test_plist_omits_optional_fields():
    """Test optional None fields are left out of the property list."""
    data = encode_object(Address(city="Paris"), CodingType.PLIST)

    assert plistlib.loads(data) == {"city": "Paris"}
    assert decode_object(data, Address) == Address(city="Paris")


@pytest.mark.parametrize(
    ("written", "read"),
    [(CodingType.JSON, CodingType.PLIST), (CodingType.PLIST, CodingType.JSON)],
)
def test_encodings_are_not_interchangeable(written, read):
    """Test decoding with the other encoding fails."""
    data = encode_object(Address(city="Paris"), written)

    with pytest.raises(CODING_ERRORS):
        decode_object(data, Address, read)


@pytest.mark.parametrize("coding", list(CodingType))
def test_encode_unknown_type_fails(coding):
    """Test objects pydantic cannot serialize raise a coding error."""
    with pytest.raises(CODING_ERRORS):
        encode_object(object(), coding)


def test_decode_garbage_fails():
    """Test random bytes raise a coding error."""
    with pytest.raises(CODING_ERRORS):
        decode_object(b"\x00\x01garbage", Address, CodingType.PLIST)
    with pytest.raises(CODING_ERRORS):
        decode_object(b"\x00\x01garbage", Address, CodingType.JSON)


@pytest.mark.parametrize("coding", list(CodingType))
def test_naive_timestamp_model(coding):
    """Test naive timestamp fields survive each encoding unchanged."""
    stamp = Stamp(label="sync", at=datetime(2024, 1, 2, 3, 4, 5))

    restored = decode_object(encode_object(stamp, coding), Stamp, coding)

    assert restored == stamp
    assert restored.at.tzinfo is None
