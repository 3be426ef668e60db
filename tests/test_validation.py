import pytest

from router_lib.config import (
    MalformedInputError,
    apply_mask,
    format_address,
    parse_address,
    parse_mask_length,
    parse_prefix,
    validate_ipv4,
)


SAMPLE_ADDRESSES = [0, 1, 0x7F000001, 0xC0A80132, 0xFFFFFFFF]


def test_parse_address_orders_octets_most_significant_first():
    assert parse_address("192.168.1.50") == (192 << 24) | (168 << 16) | (1 << 8) | 50
    assert parse_address("0.0.0.0") == 0
    assert parse_address("255.255.255.255") == 0xFFFFFFFF


def test_parse_address_strips_surrounding_whitespace():
    assert parse_address("  10.0.0.1\n") == 0x0A000001


def test_parse_address_accepts_leading_zeros():
    assert parse_address("010.001.000.009") == parse_address("10.1.0.9")


@pytest.mark.parametrize("text", [
    "256.0.0.1",
    "1.2.3.999",
    "1.2.3",
    "1.2.3.4.5",
    "1..3.4",
    "a.b.c.d",
    "-1.2.3.4",
    "1.2.3.4/24",
    "",
])
def test_parse_address_rejects_malformed_text(text):
    with pytest.raises(MalformedInputError):
        parse_address(text)


def test_format_address():
    assert format_address(0xC0A80132) == "192.168.1.50"
    assert format_address(0) == "0.0.0.0"
    assert format_address(0xFFFFFFFF) == "255.255.255.255"


@pytest.mark.parametrize("text", ["192.168.1.50", "0.0.0.0", "255.255.255.255", "10.20.30.40"])
def test_format_parse_round_trip(text):
    assert format_address(parse_address(text)) == text


@pytest.mark.parametrize("addr", SAMPLE_ADDRESSES)
def test_zero_length_mask_matches_everything(addr):
    assert apply_mask(addr, 0) == 0


@pytest.mark.parametrize("addr", SAMPLE_ADDRESSES)
def test_full_length_mask_keeps_address(addr):
    assert apply_mask(addr, 32) == addr


def test_apply_mask_clears_host_bits():
    assert apply_mask(parse_address("192.168.1.50"), 24) == parse_address("192.168.1.0")
    assert apply_mask(parse_address("10.1.2.3"), 8) == parse_address("10.0.0.0")
    assert apply_mask(parse_address("10.0.0.7"), 30) == parse_address("10.0.0.4")
    assert apply_mask(0xFFFFFFFF, 1) == 0x80000000


@pytest.mark.parametrize("mask_length", [-1, 33, 64])
def test_apply_mask_rejects_out_of_range_lengths(mask_length):
    with pytest.raises(MalformedInputError):
        apply_mask(0x0A000000, mask_length)


def test_parse_mask_length():
    assert parse_mask_length("24") == 24
    assert parse_mask_length("0") == 0
    with pytest.raises(MalformedInputError):
        parse_mask_length("33")
    with pytest.raises(MalformedInputError):
        parse_mask_length("x")


def test_parse_prefix_does_not_mask():
    assert parse_prefix("10.1.2.3/8") == (parse_address("10.1.2.3"), 8)
    with pytest.raises(MalformedInputError):
        parse_prefix("10.0.0.0")
    with pytest.raises(MalformedInputError):
        parse_prefix("10.0.0.0/8/8")


def test_validators():
    assert validate_ipv4("10.0.0.1")
    assert not validate_ipv4("10.0.0.256")
