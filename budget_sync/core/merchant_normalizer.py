"""
Merchant Normalization Module

Converts raw bank-feed merchant strings into clean vendor names
used as fuzzy-match keys and as display names for new vendors.
"""
import re

# Common noise patterns to strip (applied in order)
NOISE_PATTERNS = [
    re.compile(r'\bBANK\s*PAYMENT\b', re.IGNORECASE),
    re.compile(r'\bCARD\s*PAYMENT\b', re.IGNORECASE),
    re.compile(r'\bDIRECT\s*DEBIT\b', re.IGNORECASE),
    re.compile(r'\bSTANDING\s*ORDER\b', re.IGNORECASE),
    re.compile(r'\bFASTER\s*PAYMENT\b', re.IGNORECASE),
    re.compile(r'\bONLINE\s*PAYMENT\b', re.IGNORECASE),
    re.compile(r'\bCONTACTLESS\b', re.IGNORECASE),
    re.compile(r'\bPAYMENT\s*TO\b', re.IGNORECASE),
    re.compile(r'\bPAYMENT\s*FROM\b', re.IGNORECASE),
    re.compile(r'\bREF\s*[:.]?\s*\S+', re.IGNORECASE),  # Reference codes
    re.compile(r'\bVIA\s+\w+', re.IGNORECASE),  # "VIA APPLE PAY" etc.
    re.compile(r'\b(LTD|LIMITED|PLC|INC|LLC|CO)\b\.?', re.IGNORECASE),  # Legal suffixes
    re.compile(r'\b(GB|UK|US)\b', re.IGNORECASE),  # Country codes
    re.compile(r'\d{2}/\d{2}/?\d{0,4}'),  # Dates
    re.compile(r'\*+\d+'),  # Card fragments like *1234
]


def _strip_noise(text: str) -> str:
    # Removing one phrase can expose another (e.g. "CARD GB PAYMENT"),
    # so keep going until a full pass changes nothing.
    while True:
        stripped = text
        for pattern in NOISE_PATTERNS:
            stripped = pattern.sub(' ', stripped)
        if stripped == text:
            return text
        text = stripped


def _title_case(text: str) -> str:
    return ' '.join(word.capitalize() for word in text.split(' '))


def normalize_vendor_name(raw: str) -> str:
    """
    Normalize a raw merchant name into a display-ready vendor name.

    Strips payment-method boilerplate, references, legal suffixes, country
    codes, dates and card fragments, collapses whitespace and title-cases
    each word.

    Args:
        raw: Merchant or description string from a bank feed or CSV row

    Returns:
        The cleaned name, or the trimmed original if nothing is left
    """
    name = _strip_noise(raw.strip())

    # Collapse whitespace
    name = re.sub(r'\s+', ' ', name).strip()

    if not name:
        return raw.strip()

    return _title_case(name)
