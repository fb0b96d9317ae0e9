"""Noise-line classification for OCR'd receipts."""

from __future__ import annotations

import re

# Lowercase substrings marking non-product lines. Words that also occur
# inside grocery names ("cash" → cashew, "card" → cardamom, "tender" →
# tenderloin, "vat" → cultivated) are left out, narrowed, or matched as words.
STOP_WORDS: tuple[str, ...] = (
    # totals
    "subtotal", "sub total", "total", "amount due", "balance",
    # taxes
    "tax",
    # payment
    "visa", "mastercard", "amex", "debit", "credit", "tendered",
    "change due", "payment", "paid",
    # discounts
    "discount", "coupon", "savings", "you saved",
    # store metadata
    "thank you", "clerk", "cashier", "receipt", "transaction",
    "terminal", "approval", "auth code", "tel:", "phone", "www.",
    "store #", "order #", "invoice",
    # Spanish
    "gracias", "efectivo", "tarjeta", "cambio",
)

_SEPARATOR_ONLY = re.compile(r"[-=*_\s]+")
_DATE_ONLY = re.compile(
    r"\d{1,2}/\d{1,2}/(?:\d{2}|\d{4})(?:\s+\d{1,2}:\d{2}(?::\d{2})?)?"
)
_VAT = re.compile(r"\bvat\b")
_DIGITS_ONLY = re.compile(r"\d+")


def should_ignore(line: str) -> bool:
    """Return True when a receipt line cannot describe a product."""
    text = line.strip()
    if len(text) < 3:
        return True
    if _SEPARATOR_ONLY.fullmatch(text):
        return True
    if _DATE_ONLY.fullmatch(text):
        return True
    if _DIGITS_ONLY.fullmatch(text):
        return True

    lowered = text.lower()
    if _VAT.search(lowered):
        return True
    return any(word in lowered for word in STOP_WORDS)
