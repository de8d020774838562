"""Tests for keyword category suggestions and category resolution."""

import pytest

from budget_sync.core.category_rules import GOING_OUT
from budget_sync.core.rule_matcher import (
    COMPILED_RULES,
    HIGH,
    LOW,
    MEDIUM,
    CategorySuggestion,
    compile_rules,
    preprocess_vendor,
    resolve_category,
    suggest_category,
)


def make_suggestion(keyword, confidence=HIGH):
    return CategorySuggestion(keyword, 'Food', confidence, f'Matched "{keyword}" by keyword')


class TestPreprocessVendor:

    def test_strips_prefix_separators_and_reference(self):
        assert preprocess_vendor('CARD PAYMENT TO Tesco-Express REF 99') == 'tesco express'

    def test_strips_pos_prefix_and_trailing_code(self):
        assert preprocess_vendor('POS SAINSBURYS 123456') == 'sainsburys'

    def test_short_trailing_number_is_kept(self):
        assert preprocess_vendor('Shell 4521') == 'shell 4521'

    def test_collapses_whitespace(self):
        assert preprocess_vendor('  Pret   A  Manger ') == 'pret a manger'


class TestSuggestCategory:

    def test_brand_is_high_confidence(self):
        suggestion = suggest_category('TESCO STORES 2093')
        assert suggestion.category_keyword == 'Groceries'
        assert suggestion.confidence == HIGH

    def test_fast_food_is_dining_out(self):
        suggestion = suggest_category('MCDONALDS 4521 LONDON')
        assert suggestion.category_keyword == 'Dining Out'
        assert suggestion.group_keyword == GOING_OUT
        assert suggestion.confidence == HIGH

    def test_generic_keyword_is_medium_confidence(self):
        suggestion = suggest_category('SOME RANDOM GROCERY STORE LTD')
        assert suggestion.category_keyword == 'Groceries'
        assert suggestion.confidence == MEDIUM

    def test_unrecognized_vendor(self):
        assert suggest_category('Completely Unrecognizable Co') is None

    def test_pos_prefixed_code(self):
        suggestion = suggest_category('POS SAINSBURYS 123456')
        assert (suggestion.category_keyword, suggestion.confidence) == ('Groceries', HIGH)

    def test_more_specific_rule_listed_first_wins(self):
        assert suggest_category('UBER EATS').category_keyword == 'Dining Out'
        assert suggest_category('UBER TRIP').category_keyword == 'Transport'

    @pytest.mark.parametrize('raw', ['CO-OP GROUP 123', 'Co_op Food', 'COOP'])
    def test_co_op_spellings(self, raw):
        assert suggest_category(raw).category_keyword == 'Groceries'

    def test_high_tier_beats_medium_tier(self):
        """'petrol' alone is Transport, but a brand rule is tried first."""
        assert suggest_category('PETROL STATION').category_keyword == 'Transport'
        suggestion = suggest_category('TESCO PETROL')
        assert (suggestion.category_keyword, suggestion.confidence) == ('Groceries', HIGH)

    def test_reason_names_the_keyword(self):
        assert suggest_category('NETFLIX.COM').reason == 'Matched "Subscriptions" by keyword'

    def test_custom_rules(self):
        rules = compile_rules([(r'\bacme\b', 'Widgets', 'Business')], LOW)
        suggestion = suggest_category('ACME WIDGET CO', rules)
        assert suggestion == CategorySuggestion('Widgets', 'Business', LOW, 'Matched "Widgets" by keyword')
        assert suggest_category('TESCO', rules) is None

    @pytest.mark.parametrize('raw, category, confidence', [
        ('KRAKEN', 'Investments', HIGH),
        ('HYATT REGENCY', 'Travel', HIGH),
        ('FOOTLOCKER', 'Shopping', HIGH),
        ('TOPSHOP', 'Shopping', HIGH),
        ('SPRINT', 'Bills', HIGH),
        ('TRAVIS PERKINS', 'Home', HIGH),
        ('LINKEDIN LEARNING', 'Education', HIGH),
        ('24 HOUR FITNESS', 'Gym', HIGH),
        ('CLUBHOUSE', 'Family', HIGH),
        ('MONEYSUPERMARKET', 'Insurance', HIGH),
        ('GOLF CLUB', 'Entertainment', MEDIUM),
        ('NEWSPAPER SHOP', 'Shopping', MEDIUM),
        ('PET COVER', 'Insurance', MEDIUM),
        ('COMEDY SHOW', 'Entertainment', MEDIUM),
        ('SCHOOL FUND', 'Charity', MEDIUM),
    ])
    def test_brand_and_keyword_table(self, raw, category, confidence):
        suggestion = suggest_category(raw)
        assert (suggestion.category_keyword, suggestion.confidence) == (category, confidence)

    def test_unknown_confidence_level_is_rejected(self):
        with pytest.raises(ValueError):
            compile_rules([(r'acme', 'Widgets', 'Business')], 'certain')


class TestCompiledRules:

    def test_high_rules_come_first(self):
        confidences = [rule.confidence for rule in COMPILED_RULES]
        first_medium = confidences.index(MEDIUM)
        assert set(confidences[:first_medium]) == {HIGH}
        assert set(confidences[first_medium:]) == {MEDIUM}


class TestResolveCategory:

    def test_exact_match_beats_earlier_substring_match(self):
        categories = [
            {'id': 'c1', 'name': 'Groceries & Household'},
            {'id': 'c2', 'name': 'groceries'},
        ]
        assert resolve_category(make_suggestion('Groceries'), categories)['id'] == 'c2'

    def test_category_name_inside_keyword(self):
        categories = [{'id': 'c1', 'name': 'Dining'}]
        assert resolve_category(make_suggestion('Dining Out'), categories)['id'] == 'c1'

    def test_keyword_inside_category_name(self):
        categories = [{'id': 'c1', 'name': 'Weekly Groceries'}]
        assert resolve_category(make_suggestion('Groceries'), categories)['id'] == 'c1'

    def test_name_inside_keyword_is_tried_before_keyword_inside_name(self):
        categories = [
            {'id': 'a', 'name': 'Weekly Groceries'},
            {'id': 'b', 'name': 'Grocer'},
        ]
        assert resolve_category(make_suggestion('Groceries'), categories)['id'] == 'b'

    def test_no_match(self):
        assert resolve_category(make_suggestion('Transport'), [{'id': 'c1', 'name': 'Rent'}]) is None

    def test_blank_names_never_match(self):
        categories = [{'id': 'x', 'name': ''}, {'id': 'y', 'name': None}]
        assert resolve_category(make_suggestion('Groceries'), categories) is None

    def test_returns_the_callers_dict(self):
        category = {'id': 'c1', 'name': 'Groceries', 'group_name': 'Food'}
        assert resolve_category(make_suggestion('Groceries'), [category]) is category
