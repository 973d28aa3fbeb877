"""Static keyword tables used by the parser.

Every table is an ordered tuple built once at import time and never mutated.
Order matters for ``CATEGORY_TABLE``: categories are mutually exclusive and
the first entry with a keyword hit wins.
"""

from __future__ import annotations

from .models import Category

# Messages containing any of these (substring, lowercased) are not
# transactions: OTPs, promotions, loan offers, balance and due reminders.
IGNORE_KEYWORDS: tuple[str, ...] = (
    "otp",
    "verification",
    "code",
    "expire",
    "loan",
    "offer",
    "approve",
    "request",
    "balance",
    "outstanding",
    "due",
    "login",
)

# Whole words that confirm a monetary movement.
INTENT_VERBS: tuple[str, ...] = (
    "debited",
    "credited",
    "paid",
    "spent",
    "sent",
    "received",
    "refunded",
    "deposited",
    "reversed",
    "withdrawn",
    "purchased",
    "transferred",
)

# Substrings that flip the direction to CREDIT.
CREDIT_TERMS: tuple[str, ...] = (
    "credited",
    "received",
    "refund",
    "reversed",
    "deposited",
)

CATEGORY_TABLE: tuple[tuple[Category, tuple[str, ...]], ...] = (
    (
        Category.FOOD_AND_DINING,
        (
            "zomato",
            "swiggy",
            "pizza",
            "burger",
            "kfc",
            "mcdonalds",
            "starbucks",
            "cafe",
            "coffee",
            "restaurant",
            "dining",
            "food",
            "bakery",
            "blinkit",
            "zepto",
        ),
    ),
    (
        Category.TRANSPORTATION,
        (
            "uber",
            "ola",
            "rapido",
            "petrol",
            "fuel",
            "pump",
            "shell",
            "indian oil",
            "hpcl",
            "bpcl",
            "metro",
            "toll",
            "parking",
            "fastag",
        ),
    ),
    (
        Category.ENTERTAINMENT,
        (
            "netflix",
            "spotify",
            "youtube",
            "prime",
            "hotstar",
            "cinema",
            "movie",
            "bookmyshow",
            "pvr",
            "inox",
            "theatre",
            "game",
            "steam",
            "playstation",
        ),
    ),
    (
        Category.SHOPPING,
        (
            "amazon",
            "flipkart",
            "myntra",
            "ajio",
            "zara",
            "h&m",
            "uniqlo",
            "decathlon",
            "retail",
            "store",
            "fashion",
            "cloth",
            "mall",
            "mart",
            "supermarket",
        ),
    ),
    (
        Category.UTILITIES,
        (
            "electricity",
            "power",
            "bescom",
            "water",
            "gas",
            "bill",
            "recharge",
            "jio",
            "airtel",
            "vi",
            "vodafone",
            "bsnl",
            "broadband",
            "internet",
            "wifi",
        ),
    ),
    (
        Category.HEALTH,
        (
            "pharmacy",
            "medical",
            "hospital",
            "clinic",
            "doctor",
            "apollo",
            "1mg",
            "pharmeasy",
            "medplus",
        ),
    ),
    (
        Category.TRAVEL,
        (
            "irctc",
            "rail",
            "flight",
            "indigo",
            "air india",
            "makemytrip",
            "hotel",
            "booking.com",
            "airbnb",
            "goibibo",
        ),
    ),
)

# Keywords this short must match a whole word ("vi" is not "via").
SHORT_KEYWORD_MAX_LEN = 3

UPI_PREFIX = "UPI: "
FALLBACK_DESCRIPTION = "Bank Transaction"


__all__ = [
    "CATEGORY_TABLE",
    "CREDIT_TERMS",
    "FALLBACK_DESCRIPTION",
    "IGNORE_KEYWORDS",
    "INTENT_VERBS",
    "SHORT_KEYWORD_MAX_LEN",
    "UPI_PREFIX",
]
