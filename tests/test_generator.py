import random
import unittest

from gridmaze import InvalidDimensionError, Maze, MazeGenerator, WallSet, generate_maze


def _is_spanning_tree(maze: Maze) -> bool:
    edges = maze.open_edges()
    if len(edges) != maze.size - 1:
        return False
    adjacency = {cell: [] for cell in maze.cells()}
    for a, b in edges:
        adjacency[a].append(b)
        adjacency[b].append(a)
    seen = {(0, 0)}
    stack = [(0, 0)]
    while stack:
        cell = stack.pop()
        for neighbor in adjacency[cell]:
            if neighbor not in seen:
                seen.add(neighbor)
                stack.append(neighbor)
    return len(seen) == maze.size


class MazeGeneratorTests(unittest.TestCase):
    def test_generated_mazes_are_spanning_trees(self) -> None:
        for width, height in ((1, 1), (1, 7), (7, 1), (2, 2), (5, 8), (20, 13)):
            for seed in range(5):
                with self.subTest(width=width, height=height, seed=seed):
                    maze = generate_maze(width, height, seed=seed)
                    self.assertEqual((maze.width, maze.height), (width, height))
                    self.assertEqual(len(maze.open_edges()), width * height - 1)
                    self.assertTrue(_is_spanning_tree(maze))

    def test_shared_walls_agree_on_both_sides(self) -> None:
        maze = generate_maze(12, 9, seed=3)
        for cell in maze.cells():
            for neighbor in maze.neighbors(cell):
                self.assertEqual(maze.is_open(cell, neighbor), maze.is_open(neighbor, cell))

    def test_outer_boundary_stays_closed(self) -> None:
        maze = generate_maze(6, 4, seed=11)
        for x in range(maze.width):
            self.assertTrue(maze.walls_at((x, 0)).top)
            self.assertTrue(maze.walls_at((x, maze.height - 1)).bottom)
        for y in range(maze.height):
            self.assertTrue(maze.walls_at((0, y)).left)
            self.assertTrue(maze.walls_at((maze.width - 1, y)).right)

    def test_two_by_one_carves_the_only_edge(self) -> None:
        maze = generate_maze(2, 1, seed=0)
        self.assertEqual(maze.open_edges(), [((0, 0), (1, 0))])
        self.assertFalse(maze.walls_at((0, 0)).right)
        self.assertFalse(maze.walls_at((1, 0)).left)

    def test_single_cell_keeps_all_walls(self) -> None:
        maze = generate_maze(1, 1, seed=0)
        self.assertEqual(maze.open_edges(), [])
        self.assertEqual(maze.walls_at((0, 0)), WallSet())

    def test_same_seed_reproduces_layout(self) -> None:
        first = generate_maze(3, 3, seed=42)
        second = generate_maze(3, 3, seed=42)
        self.assertEqual(first, second)

    def test_injected_rng_is_used(self) -> None:
        from_rng = MazeGenerator(rng=random.Random(5)).generate(8, 8)
        from_seed = MazeGenerator(seed=5).generate(8, 8)
        self.assertEqual(from_rng, from_seed)

    def test_seed_and_rng_are_exclusive(self) -> None:
        with self.assertRaises(ValueError):
            MazeGenerator(seed=1, rng=random.Random(1))

    def test_large_grid_does_not_recurse(self) -> None:
        maze = generate_maze(150, 150, seed=1)
        self.assertEqual(len(maze.open_edges()), 150 * 150 - 1)

    def test_invalid_dimensions_are_rejected(self) -> None:
        for width, height in ((0, 3), (3, 0), (-1, 2), (2.5, 2), ("3", 3), (True, 2), (None, 1)):
            with self.subTest(width=width, height=height):
                with self.assertRaises(InvalidDimensionError):
                    generate_maze(width, height)

    def test_invalid_dimension_is_a_value_error(self) -> None:
        with self.assertRaises(ValueError):
            MazeGenerator().generate(0, 0)

    def test_batch_produces_independent_mazes(self) -> None:
        generator = MazeGenerator(seed=9)
        mazes = generator.generate_batch(4, 5, 5)
        self.assertEqual(len(mazes), 4)
        for maze in mazes:
            self.assertTrue(_is_spanning_tree(maze))
        self.assertEqual(generator.generate_batch(0, 5, 5), [])
        with self.assertRaises(ValueError):
            generator.generate_batch(-1, 5, 5)

    def test_maze_copies_list_walls_into_tuples(self) -> None:
        columns = [[WallSet(right=False)], [WallSet(left=False)]]
        maze = Maze(width=2, height=1, walls=columns)
        columns[0][0] = WallSet()
        self.assertIsInstance(maze.walls, tuple)
        self.assertTrue(all(isinstance(column, tuple) for column in maze.walls))
        self.assertFalse(maze.walls_at((0, 0)).right)
        with self.assertRaises(TypeError):
            maze.walls[0][0] = WallSet()

    def test_maze_rejects_mismatched_wall_grid(self) -> None:
        with self.assertRaises(ValueError):
            Maze(width=2, height=1, walls=((WallSet(),),))


if __name__ == "__main__":
    unittest.main()
