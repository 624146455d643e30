"""
Tests for working set generation and discovery.
"""

import os
import sys
import unittest

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from algorithms.key_provisioner import discover_key_names, generate_key_names
from fakes import FakeStorageSystem


class TestGenerateKeyNames(unittest.TestCase):

    def test_five_keys(self):
        self.assertEqual(
            generate_key_names(5),
            ["bolt-s3-perf0", "bolt-s3-perf1", "bolt-s3-perf2", "bolt-s3-perf3", "bolt-s3-perf4"],
        )

    def test_deterministic(self):
        self.assertEqual(generate_key_names(50), generate_key_names(50))

    def test_zero_keys(self):
        self.assertEqual(generate_key_names(0), [])

    def test_custom_prefix(self):
        self.assertEqual(generate_key_names(2, prefix="k"), ["k0", "k1"])


class TestDiscoverKeyNames(unittest.IsolatedAsyncioTestCase):

    async def test_preserves_backend_order(self):
        baseline = FakeStorageSystem("s3", {"b": b"1", "a": b"2", "c": b"3"})
        keys = await discover_key_names(baseline, "bench", 10)
        self.assertEqual(keys, ["b", "a", "c"])

    async def test_capped_at_limit(self):
        baseline = FakeStorageSystem("s3", {f"obj{i}": b"x" for i in range(20)})
        keys = await discover_key_names(baseline, "bench", 5)
        self.assertEqual(keys, ["obj0", "obj1", "obj2", "obj3", "obj4"])

    async def test_empty_bucket(self):
        baseline = FakeStorageSystem("s3")
        self.assertEqual(await discover_key_names(baseline, "bench", 1000), [])

    async def test_single_listing_call(self):
        baseline = FakeStorageSystem("s3", {"a": b"1"})
        await discover_key_names(baseline, "bench", 1000)
        self.assertEqual(baseline.calls, [("list", None)])


if __name__ == '__main__':
    unittest.main()
