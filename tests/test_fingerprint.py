from decimal import Decimal

import pytest

from sms_ingest.fingerprint import compute_dedupe_key, rolling_hash


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", 0),
        ("a", 97),
        ("ab", 97 * 31 + 98),
        ("hello", 99162322),
        # Wraps to exactly the minimum signed 32-bit value.
        ("polygenelubricants", -(2**31)),
    ],
)
def test_rolling_hash_vectors(text, expected):
    assert rolling_hash(text) == expected


def test_rolling_hash_iterates_utf16_code_units():
    # Rupee sign is one BMP unit; the emoji contributes a surrogate pair.
    assert format(abs(rolling_hash("₹\N{GRINNING FACE}")), "x") == "95e3dc"


def test_payload_is_dash_joined():
    key = compute_dedupe_key(amount=Decimal("1"), description="", date="", sender="")
    assert key == format(abs(rolling_hash("1---")), "x")


def test_key_matches_client_fingerprints():
    assert (
        compute_dedupe_key(
            amount=Decimal("1250"), description="Zomato", date="2024-05-01", sender="HDFCBNK"
        )
        == "78a46a73"
    )
    assert (
        compute_dedupe_key(
            amount=Decimal("3500"),
            description="UPI: ramesh@upi",
            date="2024-05-01",
            sender="ICICIB",
        )
        == "1ecb18fc"
    )


def test_trailing_zeros_do_not_change_key():
    a = compute_dedupe_key(amount=Decimal("1250.50"), description="X", date="2024-05-01", sender="S")
    b = compute_dedupe_key(amount=Decimal("1250.5"), description="X", date="2024-05-01", sender="S")
    assert a == b


@pytest.mark.parametrize(
    "changed",
    [
        {"amount": Decimal("1251")},
        {"description": "Swiggy"},
        {"date": "2024-05-02"},
        {"sender": "ICICIB"},
    ],
)
def test_each_component_contributes(changed):
    base = {
        "amount": Decimal("1250"),
        "description": "Zomato",
        "date": "2024-05-01",
        "sender": "HDFCBNK",
    }
    assert compute_dedupe_key(**base) != compute_dedupe_key(**{**base, **changed})


def test_key_is_lowercase_hex():
    key = compute_dedupe_key(
        amount=Decimal("99.99"), description="UPI: a@b", date="2023-12-31", sender="X"
    )
    assert key == key.lower()
    int(key, 16)
