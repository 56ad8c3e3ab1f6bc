import itertools
import random
import unittest

from shipgen.domain.board import create_grid, in_bounds
from shipgen.domain.config import DIRECTIONS, EMPTY, SHIP
from shipgen.generator.shapes import enumerate_shapes


def brute_force_paths(grid, start, size):
    board_size = len(grid)
    paths = set()
    for steps in itertools.product(DIRECTIONS, repeat=size - 1):
        path = [start]
        for dr, dc in steps:
            r, c = path[-1]
            nxt = (r + dr, c + dc)
            if not in_bounds(nxt[0], nxt[1], board_size):
                break
            if grid[nxt[0]][nxt[1]] != EMPTY or nxt in path:
                break
            path.append(nxt)
        else:
            paths.add(tuple(path))
    return paths


class CountingRandom(random.Random):
    def __init__(self, seed=0):
        super().__init__(seed)
        self.calls = 0

    def randrange(self, *args, **kwargs):
        self.calls += 1
        return super().randrange(*args, **kwargs)


class ShapeEnumerationTests(unittest.TestCase):
    def test_single_cell_shape(self):
        grid = create_grid()
        self.assertEqual(enumerate_shapes(grid, (4, 7), 1, random.Random(0)), [((4, 7),)])

    def test_matches_brute_force_on_empty_board(self):
        grid = create_grid()
        rng = random.Random(3)
        starts = [(0, 0), (0, 9), (9, 0), (9, 9), (0, 5), (5, 0), (4, 4), (8, 3)]
        for size in (1, 2, 3):
            for start in starts:
                with self.subTest(size=size, start=start):
                    shapes = enumerate_shapes(grid, start, size, rng)
                    self.assertEqual(len(shapes), len(set(shapes)))
                    self.assertEqual(set(shapes), brute_force_paths(grid, start, size))

    def test_matches_brute_force_around_ships(self):
        grid = create_grid()
        for r, c in [(2, 3), (3, 3), (4, 5), (5, 1), (6, 6), (6, 7)]:
            grid[r][c] = SHIP
        rng = random.Random(11)
        for size in (1, 2, 3, 4):
            for start in [(3, 4), (4, 4), (5, 5), (0, 0), (5, 2)]:
                with self.subTest(size=size, start=start):
                    shapes = enumerate_shapes(grid, start, size, rng)
                    self.assertEqual(len(shapes), len(set(shapes)))
                    self.assertEqual(set(shapes), brute_force_paths(grid, start, size))

    def test_shapes_are_connected_paths_of_requested_size(self):
        grid = create_grid()
        for shape in enumerate_shapes(grid, (5, 5), 4, random.Random(1)):
            self.assertEqual(len(shape), 4)
            self.assertEqual(len(set(shape)), 4)
            for (r1, c1), (r2, c2) in zip(shape, shape[1:]):
                self.assertEqual(abs(r1 - r2) + abs(c1 - c2), 1)

    def test_set_is_independent_of_rng_but_order_is_not(self):
        grid = create_grid()
        first = enumerate_shapes(grid, (5, 5), 3, random.Random(1))
        second = enumerate_shapes(grid, (5, 5), 3, random.Random(2))
        self.assertEqual(set(first), set(second))
        orders = {tuple(enumerate_shapes(grid, (5, 5), 3, random.Random(seed))) for seed in range(10)}
        self.assertGreater(len(orders), 1)

    def test_directions_reshuffled_at_every_extension(self):
        grid = create_grid()
        # One shuffle of 4 directions costs 3 draws. Size 3 from the centre
        # extends once from the root and once from each of its 4 neighbours.
        rng = CountingRandom()
        enumerate_shapes(grid, (5, 5), 3, rng)
        self.assertEqual(rng.calls, 5 * 3)

        rng = CountingRandom()
        enumerate_shapes(grid, (5, 5), 2, rng)
        self.assertEqual(rng.calls, 3)

    def test_blocked_root_returns_nothing(self):
        grid = create_grid()
        grid[0][1] = SHIP
        grid[1][0] = SHIP
        self.assertEqual(enumerate_shapes(grid, (0, 0), 2, random.Random(0)), [])

    def test_grid_is_not_modified(self):
        grid = create_grid()
        grid[3][3] = SHIP
        before = [row[:] for row in grid]
        enumerate_shapes(grid, (4, 4), 4, random.Random(0))
        self.assertEqual(grid, before)

    def test_contract_violations_raise(self):
        grid = create_grid()
        with self.assertRaises(ValueError):
            enumerate_shapes(grid, (10, 0), 2, random.Random(0))
        with self.assertRaises(ValueError):
            enumerate_shapes(grid, (-1, 3), 1, random.Random(0))
        with self.assertRaises(ValueError):
            enumerate_shapes(grid, (0, 0), 0, random.Random(0))


if __name__ == "__main__":
    unittest.main()
