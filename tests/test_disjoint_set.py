import unittest

from labyrinth.disjoint_set import DisjointSet


class DisjointSetTests(unittest.TestCase):
    def test_new_sets_are_singletons(self) -> None:
        ds = DisjointSet(5)
        self.assertEqual(len(ds), 5)
        self.assertEqual([ds.find(i) for i in range(5)], [0, 1, 2, 3, 4])
        self.assertEqual(ds.rank, [0] * 5)

    def test_union_of_joined_elements_returns_false(self) -> None:
        ds = DisjointSet(3)
        self.assertTrue(ds.union(0, 1))
        self.assertFalse(ds.union(1, 0))
        self.assertEqual(ds.find(0), ds.find(1))
        self.assertNotEqual(ds.find(0), ds.find(2))

    def test_tie_attaches_second_root_under_first(self) -> None:
        ds = DisjointSet(2)
        ds.union(0, 1)
        self.assertEqual(ds.parent[1], 0)
        self.assertEqual(ds.rank[0], 1)
        self.assertEqual(ds.rank[1], 0)

    def test_lower_rank_root_goes_under_higher_rank_root(self) -> None:
        ds = DisjointSet(3)
        ds.union(0, 1)
        ds.union(2, 0)
        self.assertEqual(ds.find(2), 0)
        self.assertEqual(ds.rank[0], 1)

    def test_find_compresses_paths(self) -> None:
        ds = DisjointSet(4)
        ds.parent = [0, 0, 1, 2]
        self.assertEqual(ds.find(3), 0)
        self.assertEqual(ds.parent, [0, 0, 0, 0])

    def test_spanning_unions_exhaust_further_merges(self) -> None:
        size = 10
        ds = DisjointSet(size)
        merges = [ds.union(i, i + 1) for i in range(size - 1)]
        self.assertTrue(all(merges))
        for i in range(size):
            for j in range(size):
                self.assertFalse(ds.union(i, j))

    def test_long_chain_does_not_recurse(self) -> None:
        size = 50_000
        ds = DisjointSet(size)
        ds.parent = [max(i - 1, 0) for i in range(size)]
        self.assertEqual(ds.find(size - 1), 0)


if __name__ == "__main__":
    unittest.main()
