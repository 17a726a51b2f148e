import random
import unittest

from labyrinth.cell import CellType
from labyrinth.generation import Edge, SpanningTreeGenerator


class SpanningTreeGeneratorTests(unittest.TestCase):
    def test_half_resolution_dimensions(self) -> None:
        generator = SpanningTreeGenerator(11, 8)
        self.assertEqual((generator.height, generator.width), (5, 3))
        self.assertEqual(generator.node_count, 15)

    def test_edges_cover_each_adjacency_once(self) -> None:
        generator = SpanningTreeGenerator(9, 11)
        edges = generator.create_edges()
        rows, cols = generator.height, generator.width
        self.assertEqual(len(edges), rows * (cols - 1) + cols * (rows - 1))

        pairs = {frozenset(edge) for edge in edges}
        self.assertEqual(len(pairs), len(edges))
        for edge in edges:
            self.assertNotEqual(edge.first_cell, edge.second_cell)
            (r1, c1), (r2, c2) = generator.from_index(edge.first_cell), generator.from_index(edge.second_cell)
            self.assertEqual(abs(r1 - r2) + abs(c1 - c2), 1)

    def test_spanning_tree_keeps_node_count_minus_one_edges(self) -> None:
        for seed in range(5):
            generator = SpanningTreeGenerator(15, 21, rng=random.Random(seed))
            edges = generator.create_edges()
            random.Random(seed).shuffle(edges)
            tree = generator.build_spanning_tree(edges)
            self.assertEqual(len(tree), generator.node_count - 1)

    def test_tree_is_built_for_any_edge_order(self) -> None:
        generator = SpanningTreeGenerator(7, 7)
        edges = generator.create_edges()
        for ordering in (edges, list(reversed(edges))):
            self.assertEqual(len(generator.build_spanning_tree(ordering)), generator.node_count - 1)

    def test_passages_sit_between_half_resolution_cells(self) -> None:
        generator = SpanningTreeGenerator(5, 5)
        passages = generator.create_passages([Edge(1, 0), Edge(2, 0)])
        self.assertEqual([(cell.row, cell.column) for cell in passages], [(1, 2), (2, 1)])
        self.assertTrue(all(cell.type is CellType.PASSAGE for cell in passages))

    def test_generate_returns_wall_positions_only(self) -> None:
        generator = SpanningTreeGenerator(13, 17, rng=random.Random(7))
        passages = generator.generate()
        self.assertEqual(len(passages), generator.node_count - 1)
        for cell in passages:
            # Exactly one coordinate is even: the wall between two odd-odd passages.
            self.assertEqual((cell.row % 2) + (cell.column % 2), 1)
            self.assertTrue(0 < cell.row < 12 and 0 < cell.column < 16)

    def test_single_cell_grid_has_no_edges(self) -> None:
        generator = SpanningTreeGenerator(3, 4)
        self.assertEqual(generator.create_edges(), [])
        self.assertEqual(generator.generate(), [])

    def test_seeded_generation_is_reproducible(self) -> None:
        first = SpanningTreeGenerator(21, 21, rng=random.Random(42)).generate()
        second = SpanningTreeGenerator(21, 21, rng=random.Random(42)).generate()
        self.assertEqual(first, second)


if __name__ == "__main__":
    unittest.main()
