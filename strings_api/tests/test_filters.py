from django.test import SimpleTestCase

from strings_api.exceptions import InvalidFilterError
from strings_api.filters import filter_records, matches, validate_criteria
from strings_api.models import FilterCriteria
from strings_api.utils import build_record


class MatchesTests(SimpleTestCase):
    def setUp(self):
        self.abc = build_record("abc")
        self.aba = build_record("aba")
        self.sentence = build_record("a quick fox")

    def test_empty_criteria_matches_everything(self):
        self.assertTrue(matches(self.abc, FilterCriteria()))

    def test_is_palindrome(self):
        self.assertTrue(matches(self.aba, FilterCriteria(is_palindrome=True)))
        self.assertFalse(matches(self.abc, FilterCriteria(is_palindrome=True)))
        self.assertTrue(matches(self.abc, FilterCriteria(is_palindrome=False)))

    def test_length_bounds_are_inclusive(self):
        self.assertTrue(matches(self.abc, FilterCriteria(min_length=3, max_length=3)))
        self.assertFalse(matches(self.abc, FilterCriteria(min_length=4)))
        self.assertFalse(matches(self.abc, FilterCriteria(max_length=2)))

    def test_length_uses_bytes(self):
        record = build_record("éé")
        self.assertTrue(matches(record, FilterCriteria(min_length=4)))

    def test_word_count(self):
        self.assertTrue(matches(self.sentence, FilterCriteria(word_count=3)))
        self.assertFalse(matches(self.abc, FilterCriteria(word_count=3)))

    def test_contains_character_is_case_sensitive(self):
        self.assertTrue(matches(self.sentence, FilterCriteria(contains_character="q")))
        self.assertFalse(matches(self.sentence, FilterCriteria(contains_character="Q")))

    def test_contains_character_accepts_non_letters(self):
        self.assertTrue(matches(self.sentence, FilterCriteria(contains_character=" ")))
        self.assertFalse(matches(self.abc, FilterCriteria(contains_character=" ")))


class FilterRecordsTests(SimpleTestCase):
    def test_clauses_combine_with_and(self):
        records = [build_record("abc"), build_record("aba")]
        result = filter_records(records, FilterCriteria(is_palindrome=True, min_length=3))
        self.assertEqual([r.value for r in result], ["aba"])

    def test_multi_character_filter_is_rejected_without_records(self):
        with self.assertRaises(InvalidFilterError):
            filter_records([], FilterCriteria(contains_character="ab"))

    def test_empty_character_filter_is_rejected(self):
        with self.assertRaises(InvalidFilterError):
            validate_criteria(FilterCriteria(contains_character=""))

    def test_single_multibyte_character_is_accepted(self):
        records = [build_record("café"), build_record("cafe")]
        result = filter_records(records, FilterCriteria(contains_character="é"))
        self.assertEqual([r.value for r in result], ["café"])
