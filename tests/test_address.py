"""Tests for the state abbreviation extractor."""

import pytest

from quote_checkout.services.address import extract_region


@pytest.mark.parametrize(
    "address,expected",
    [
        ("123 Test St, NJ 07102", "NJ"),
        ("55 Ocean Ave, Miami, fl 33139", "FL"),
        ("9 Elm Rd Austin TX 73301-1234", "TX"),
        ("1 Main St, Springfield,IL62701", "IL"),
    ],
)
def test_trailing_state_and_zip_wins(address, expected):
    assert extract_region(address) == expected


def test_falls_back_to_first_two_letter_token():
    assert extract_region("400 Broad Road, Trenton NJ") == "NJ"


def test_fallback_can_pick_a_short_name_token():
    # Heuristic limitation: "Jo" is read as a region code.
    assert extract_region("Jo Smith, 12 Pine Road, Portland OR") == "JO"


def test_trailing_pattern_beats_earlier_two_letter_tokens():
    assert extract_region("Apt 2B, Al Lane, Dover, DE 19901") == "DE"


@pytest.mark.parametrize("address", ["123 Main Street", "", "   ", None, "12345"])
def test_defaults_to_us(address):
    assert extract_region(address) == "US"


def test_surrounding_whitespace_is_ignored():
    assert extract_region("  10 Park Pl, NY 10007  \n") == "NY"
