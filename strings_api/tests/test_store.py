from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone

from django.test import SimpleTestCase

from strings_api.exceptions import StringAlreadyExists, StringNotFound
from strings_api.store import StringStore, get_default_store
from strings_api.utils import analyze_string, build_record


class StringStoreTests(SimpleTestCase):
    def setUp(self):
        self.store = StringStore()

    def test_create_then_get_by_value(self):
        created = self.store.create(build_record("hello"))
        fetched = self.store.get_by_value("hello")
        self.assertEqual(fetched, created)
        self.assertEqual(fetched.value, "hello")
        self.assertEqual(fetched.id, analyze_string("hello").sha256_hash)

    def test_duplicate_create_conflicts(self):
        first_seen = datetime(2024, 1, 1, tzinfo=timezone.utc)
        self.store.create(build_record("hello", now=first_seen))

        with self.assertRaises(StringAlreadyExists):
            self.store.create(build_record("hello"))

        self.assertEqual(len(self.store), 1)
        self.assertEqual(self.store.get_by_value("hello").created_at, first_seen)

    def test_get_missing_value(self):
        with self.assertRaises(StringNotFound):
            self.store.get_by_value("missing")

    def test_delete_once(self):
        self.store.create(build_record("hello"))
        self.store.delete_by_value("hello")

        self.assertNotIn("hello", self.store)
        with self.assertRaises(StringNotFound):
            self.store.delete_by_value("hello")

    def test_lookup_is_exact(self):
        self.store.create(build_record("Hello"))
        with self.assertRaises(StringNotFound):
            self.store.get_by_value("hello")

    def test_list_all_returns_a_snapshot(self):
        self.store.create(build_record("one"))
        self.store.create(build_record("two"))

        records = self.store.list_all()
        self.assertEqual(sorted(r.value for r in records), ["one", "two"])

        records.clear()
        self.assertEqual(len(self.store), 2)

    def test_list_all_empty(self):
        self.assertEqual(self.store.list_all(), [])

    def test_instances_are_isolated(self):
        self.store.create(build_record("hello"))
        self.assertNotIn("hello", StringStore())

    def test_default_store_is_shared(self):
        self.assertIs(get_default_store(), get_default_store())

    def test_concurrent_creates_of_same_value(self):
        def attempt(_):
            try:
                self.store.create(build_record("race"))
                return True
            except StringAlreadyExists:
                return False

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(attempt, range(32)))

        self.assertEqual(results.count(True), 1)
        self.assertEqual(len(self.store), 1)

    def test_concurrent_creates_of_distinct_values(self):
        values = [f"value {i}" for i in range(50)]

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(lambda v: self.store.create(build_record(v)), values))

        self.assertEqual(len(self.store), 50)
        self.assertEqual(sorted(r.value for r in self.store.list_all()), sorted(values))
