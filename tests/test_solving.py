import unittest

from labyrinth.cell import Cell, CellType
from labyrinth.solving import EscapeSolver, PathNode


def grid_from(rows):
    """Build a cell grid from strings where ``#`` is a wall."""

    return [
        [Cell(r, c, CellType.WALL if ch == "#" else CellType.PASSAGE) for c, ch in enumerate(line)]
        for r, line in enumerate(rows)
    ]


class PathNodeTests(unittest.TestCase):
    def test_equality_ignores_costs(self) -> None:
        a = PathNode(2, 3, False)
        b = PathNode(2, 3, False)
        b.g, b.h, b.f, b.parent = 4, 5, 9, 0
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertNotEqual(a, PathNode(2, 3, True))
        self.assertNotEqual(a, PathNode(3, 2, False))

    def test_new_node_has_no_parent(self) -> None:
        self.assertIsNone(PathNode(0, 0, False).parent)

    def test_manhattan_heuristic(self) -> None:
        node = PathNode(1, 7, False)
        node.calc_heuristic_to(PathNode(4, 2, False))
        self.assertEqual(node.h, 8)

    def test_better_path_requires_strict_improvement(self) -> None:
        current = PathNode(0, 0, False)
        current.g = 3
        neighbor = PathNode(0, 1, False)
        neighbor.g = 4
        self.assertFalse(neighbor.has_better_path(current))
        neighbor.g = 5
        self.assertTrue(neighbor.has_better_path(current))

    def test_update_path_recomputes_costs(self) -> None:
        parent = PathNode(0, 0, False)
        parent.g = 2
        node = PathNode(0, 1, False)
        node.h = 6
        node.update_path(parent, 0)
        self.assertEqual((node.g, node.f, node.parent), (3, 9, 0))


class EscapeSolverTests(unittest.TestCase):
    def test_open_room_path_is_manhattan_length(self) -> None:
        grid = grid_from(["....", "....", "....", "...."])
        path = EscapeSolver(grid, grid[0][0], grid[3][3]).find_escape()
        self.assertEqual(len(path) - 1, 6)
        self.assertEqual(path[0], Cell(0, 0, CellType.ESCAPE))
        self.assertEqual(path[-1], Cell(3, 3, CellType.ESCAPE))

    def test_detour_around_walls(self) -> None:
        grid = grid_from(
            [
                "#.#####",
                "#.....#",
                "#####.#",
                "#.....#",
                "#.#####",
                "#.....#",
                "#####.#",
            ]
        )
        path = EscapeSolver(grid, grid[0][1], grid[6][5]).find_escape()
        positions = [cell.position for cell in path]
        self.assertEqual(positions[0], (0, 1))
        self.assertEqual(positions[-1], (6, 5))
        self.assertEqual(len(path), 19)
        self.assertTrue(all(not grid[r][c].is_wall for r, c in positions))

    def test_shortest_of_two_routes(self) -> None:
        grid = grid_from(
            [
                ".....",
                ".###.",
                ".###.",
                ".....",
                "####.",
            ]
        )
        path = EscapeSolver(grid, grid[0][0], grid[4][4]).find_escape()
        self.assertEqual(len(path) - 1, 8)

    def test_unreachable_end_returns_empty_path(self) -> None:
        grid = grid_from([".#.", ".#.", ".#."])
        self.assertEqual(EscapeSolver(grid, grid[0][0], grid[2][2]).find_escape(), [])

    def test_start_equal_to_end(self) -> None:
        grid = grid_from(["..", ".."])
        self.assertEqual(EscapeSolver(grid, grid[1][1], grid[1][1]).find_escape(), [Cell(1, 1, CellType.ESCAPE)])

    def test_does_not_modify_input_grid(self) -> None:
        grid = grid_from(["...", "...", "..."])
        before = [list(row) for row in grid]
        EscapeSolver(grid, grid[0][0], grid[2][2]).find_escape()
        self.assertEqual(grid, before)


if __name__ == "__main__":
    unittest.main()
