from __future__ import annotations

from wpspin.core.mac import is_valid, last_three_bytes, normalize, split_bytes, wan_last_two_bytes


def test_normalize_strips_separators_and_uppercases() -> None:
    assert normalize("00:1a:2b:33:44:55") == "001A2B334455"
    assert normalize("00-1a-2b-33-44-55") == "001A2B334455"
    assert normalize(None) == ""


def test_is_valid() -> None:
    assert is_valid("00:11:22:33:44:55")
    assert is_valid("001122334455")
    assert not is_valid("00:11:22:33:44")
    assert not is_valid("00:11:22:33:44:GG")
    assert not is_valid(None)


def test_last_three_bytes() -> None:
    assert last_three_bytes("00:11:22:33:44:55") == "334455"
    assert last_three_bytes("0011") == "0011"


def test_split_bytes_pads_missing_with_zero() -> None:
    assert split_bytes("00:11:22:33:44:55") == ["00", "11", "22", "33", "44", "55"]
    assert split_bytes("AABBCC") == ["AA", "BB", "CC", "00", "00", "00"]


def test_wan_last_two_bytes_decrements_last_digit() -> None:
    assert wan_last_two_bytes("00:11:22:33:44:55") == "4453"
    assert wan_last_two_bytes("00:11:22:33:44:5a") == "4458"


def test_wan_last_two_bytes_special_values() -> None:
    assert wan_last_two_bytes("00:11:22:33:00:00") == "fffe"
    assert wan_last_two_bytes("00:11:22:33:00:01") == "ffff"


def test_wan_last_two_bytes_underflow_is_twos_complement() -> None:
    assert wan_last_two_bytes("00:11:22:33:44:51") == "445ffffffff"


def test_wan_last_two_bytes_short_input() -> None:
    assert wan_last_two_bytes("0011") == "0000"
