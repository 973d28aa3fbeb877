import pytest

from sms_ingest import parse_message
from sms_ingest.extractors import DESCRIPTION_RULES, clean_description, first_match

RECEIVED = "2024-05-01T10:15:00Z"


def test_rule_order_is_pinned():
    assert [r.name for r in DESCRIPTION_RULES] == ["upi_handle", "at_to_info", "labeled_field"]


def test_upi_handle_beats_at_to_merchant():
    assert first_match("Rs 600 paid at Cafe Mocha via UPI vpa cafemocha@okhdfc") == (
        "upi_handle",
        "UPI: cafemocha@okhdfc",
    )


def test_at_to_merchant_beats_labeled_field():
    assert first_match("Rs 90 paid to Ramesh on 03-05 Info: groceries") == (
        "at_to_info",
        "Ramesh",
    )


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Rs 450 debited. Info: UPI/P2M/8812/ZOMATO", "UPI/P2M/8812/ZOMATO"),
        ("Rs 80 spent on card. Msg: CHAI POINT", "CHAI POINT"),
    ],
)
def test_labeled_field(text, expected):
    assert first_match(text) == ("labeled_field", expected)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Rs. 1250 debited at Zomato. Ref: 12345", "Zomato"),
        ("Rs 500 paid to Swiggy on 12-03-24", "Swiggy"),
        ("Rs 500 paid to Big Basket txn 4411", "Big Basket"),
        ("Rs 500 paid to Chai Wala using card", "Chai Wala"),
        ("Rs 200 debited at Uber. Avl bal Rs 5,000", "Uber"),
        ("Rs 500 debited Info ZEPTO", "ZEPTO"),
    ],
)
def test_at_to_info_name_boundaries(text, expected):
    assert first_match(text) == ("at_to_info", expected)


def test_marker_words_inside_names_do_not_end_them():
    # "Onkar" starts with "on" but is not the "on" marker.
    assert first_match("Rs 500 paid to Onkar Stores") == ("at_to_info", "Onkar Stores")


def test_at_and_to_inside_words_are_not_markers():
    assert first_match("Rs 500 debited from Tomato Data Systems") is None


def test_no_rule_matches_falls_back_to_sender():
    tx = parse_message("INR 200 debited from card XX1234", "AXISBK", RECEIVED)

    assert tx is not None
    assert tx.description == "AXISBK"


def test_empty_sender_falls_back_to_placeholder():
    tx = parse_message("INR 200 debited from card XX1234", "", RECEIVED)

    assert tx is not None
    assert tx.description == "Bank Transaction"


def test_long_merchant_is_truncated():
    tx = parse_message(
        "Rs 1000 paid to Sri Venkateswara Enterprises Private Limited on 03-05",
        "HDFCBK",
        RECEIVED,
    )

    assert tx is not None
    assert tx.description == "Sri Venkateswara Enterprises P"
    assert len(tx.description) == 30


def test_long_upi_handle_keeps_prefix():
    tx = parse_message(
        "Rs 7000 sent to vpa averyveryverylonghandlename@okicici on 01-05",
        "HDFCBK",
        RECEIVED,
    )

    assert tx is not None
    assert tx.description == "UPI: averyveryverylonghandlena"
    assert tx.description.startswith("UPI: ")
    assert tx.category == "Transfer/Rent"


def test_clean_description_strips_trailing_punctuation_after_truncation():
    assert clean_description("Shop, Main Road", max_chars=5) == "Shop"
    assert clean_description("  Zomato.  ", max_chars=30) == "Zomato"


def test_clean_description_never_reduces_upi_to_bare_prefix():
    assert clean_description("UPI: .abc@upi", max_chars=6) == "UPI: ."
