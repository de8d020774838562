"""
Rule Matcher Engine

Suggests a budget category for a vendor name using the ordered keyword
rules in category_rules:
- High-confidence brand rules are tried first, then medium-confidence keywords
- First matching rule wins; there is no scoring between matches
- Suggestions are keywords, resolved against the user's categories separately
"""
import re
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Pattern, Sequence, Tuple, TypeVar

from .category_rules import HIGH_CONFIDENCE_RULES, MEDIUM_CONFIDENCE_RULES, Rule

HIGH = 'high'
MEDIUM = 'medium'
LOW = 'low'  # reserved for matches against the user's own category names

CONFIDENCE_LEVELS = (HIGH, MEDIUM, LOW)


@dataclass(frozen=True)
class CategorySuggestion:
    """Category guess for a vendor, shown to the user for confirmation"""
    category_keyword: str
    group_keyword: str  # used to create the category if the user has none
    confidence: str  # 'high', 'medium' or 'low'
    reason: str


@dataclass(frozen=True)
class CompiledRule:
    regex: Pattern
    category_keyword: str
    group_keyword: str
    confidence: str


def compile_rules(rules: Iterable[Rule], confidence: str) -> Tuple[CompiledRule, ...]:
    if confidence not in CONFIDENCE_LEVELS:
        raise ValueError(f"Unknown confidence level: {confidence!r}")
    return tuple(
        CompiledRule(re.compile(pattern, re.IGNORECASE), category, group, confidence)
        for pattern, category, group in rules
    )


COMPILED_RULES: Tuple[CompiledRule, ...] = (
    compile_rules(HIGH_CONFIDENCE_RULES, HIGH)
    + compile_rules(MEDIUM_CONFIDENCE_RULES, MEDIUM)
)

_SEPARATORS = re.compile(r'[_\-–—]+')
_BANK_PREFIX = re.compile(
    r'^(card payment to|payment to|direct debit to|standing order to|'
    r'transfer to|transfer from|pos |visa |mastercard |debit )'
)
_TRAILING_REF = re.compile(r'\s+ref[:\s].*$')
_TRAILING_CODE = re.compile(r'\s+\d{6,}$')  # text is lowercased, so only digit runs remain


def preprocess_vendor(vendor_name: str) -> str:
    """
    Lowercase a vendor string and strip bank boilerplate around it.

    Example: "CARD PAYMENT TO Tesco-Express REF 99" -> "tesco express"
    """
    text = vendor_name.lower().strip()
    text = _SEPARATORS.sub(' ', text)
    text = re.sub(r'\s+', ' ', text)
    text = _BANK_PREFIX.sub('', text)
    text = _TRAILING_REF.sub('', text)
    text = _TRAILING_CODE.sub('', text)
    return text.strip()


def suggest_category(vendor_name: str,
                     rules: Sequence[CompiledRule] = COMPILED_RULES) -> Optional[CategorySuggestion]:
    """
    Suggest a category for a vendor name.

    Args:
        vendor_name: Raw or normalized vendor string from the import
        rules: Ordered rules to try (default: the built-in table)

    Returns:
        CategorySuggestion from the first matching rule, or None
    """
    text = preprocess_vendor(vendor_name)

    for rule in rules:
        if rule.regex.search(text):
            return CategorySuggestion(
                category_keyword=rule.category_keyword,
                group_keyword=rule.group_keyword,
                confidence=rule.confidence,
                reason=f'Matched "{rule.category_keyword}" by keyword',
            )

    return None


CategoryT = TypeVar('CategoryT', bound=Dict)


def resolve_category(suggestion: CategorySuggestion,
                     categories: Iterable[CategoryT]) -> Optional[CategoryT]:
    """
    Find the user's category matching a suggestion.

    Tried in order, first hit wins:
        1. Exact name match (case-insensitive)
        2. Category name contained in the keyword
        3. Keyword contained in the category name

    Args:
        suggestion: Suggestion from suggest_category
        categories: The user's categories as dicts with at least 'id' and 'name'

    Returns:
        The matching category dict, or None
    """
    keyword = suggestion.category_keyword.lower()
    categories = [c for c in categories if c.get('name')]

    for category in categories:
        if category['name'].lower() == keyword:
            return category

    for category in categories:
        if category['name'].lower() in keyword:
            return category

    for category in categories:
        if keyword in category['name'].lower():
            return category

    return None
