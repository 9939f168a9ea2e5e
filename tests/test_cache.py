"""
Tests for the graph cache
"""
import unittest
from dataclasses import replace

from campus_route.utils import GraphCache, obj_hash, graph_cache_key

from campus_fixtures import CampusFixtures


class TestObjHash(unittest.TestCase):

    def test_obj_hash_consistency(self):
        obj1 = {'a': 1, 'b': [2, 3]}
        obj2 = {'b': [2, 3], 'a': 1}
        obj3 = {'a': 1, 'b': [2, 4]}

        self.assertEqual(obj_hash(obj1), obj_hash(obj2))
        self.assertNotEqual(obj_hash(obj1), obj_hash(obj3))

    def test_unserializable_object(self):
        self.assertEqual(len(obj_hash(object)), 40)

    def test_graph_key_tracks_pois_and_params(self):
        pois = CampusFixtures.sample_pois()
        key = graph_cache_key(pois, 500.0, 5, True)

        self.assertEqual(key, graph_cache_key(list(pois), 500, 5, True))
        self.assertNotEqual(key, graph_cache_key(pois[:-1], 500.0, 5, True))
        self.assertNotEqual(key, graph_cache_key(pois, 400.0, 5, True))
        self.assertNotEqual(key, graph_cache_key(pois, 500.0, 3, True))
        self.assertNotEqual(key, graph_cache_key(pois, 500.0, 5, False))
        self.assertTrue(key.startswith("graph_"))

    def test_graph_key_uses_exact_coordinates(self):
        pois = CampusFixtures.sample_pois()
        nudged = pois[:-1] + [replace(pois[-1], coords=(pois[-1].coords[0] + 1e-9,
                                                        pois[-1].coords[1]))]

        self.assertNotEqual(graph_cache_key(pois, 500.0, 5, True),
                            graph_cache_key(nudged, 500.0, 5, True))


class TestGraphCache(unittest.TestCase):

    def test_get_put(self):
        cache = GraphCache()
        self.assertIsNone(cache.get("k"))

        cache.put("k", {"graph": 1})
        self.assertEqual(cache.get("k"), {"graph": 1})
        self.assertEqual(cache.get_cache_stats(),
                         {'hits': 1, 'misses': 1, 'size': 1, 'max_entries': 32})

    def test_lru_eviction(self):
        cache = GraphCache(max_entries=2)
        cache.put("a", 1)
        cache.put("b", 2)
        cache.get("a")
        cache.put("c", 3)

        self.assertEqual(cache.get("a"), 1)
        self.assertIsNone(cache.get("b"))
        self.assertEqual(cache.get("c"), 3)
        self.assertEqual(len(cache), 2)

    def test_clear(self):
        cache = GraphCache()
        cache.put("a", 1)
        cache.get("a")
        cache.clear()

        self.assertEqual(len(cache), 0)
        self.assertEqual(cache.get_cache_stats()['hits'], 0)

    def test_invalid_size(self):
        with self.assertRaises(ValueError):
            GraphCache(max_entries=0)


if __name__ == "__main__":
    unittest.main()
