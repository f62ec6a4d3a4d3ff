import unittest

from pathfinder import CellState, Coordinate, Grid, InvalidDimensions


class CoordinateTests(unittest.TestCase):
    def test_value_semantics(self) -> None:
        self.assertEqual(Coordinate(2, 3), Coordinate(2, 3))
        self.assertEqual(len({Coordinate(2, 3), Coordinate(2, 3), Coordinate(3, 2)}), 2)
        self.assertEqual(tuple(Coordinate(4, 1)), (4, 1))

    def test_negative_values_are_rejected(self) -> None:
        with self.assertRaises(ValueError):
            Coordinate(-1, 0)
        with self.assertRaises(ValueError):
            Coordinate(0, 0).offset(0, -1)

    def test_offset_and_serialization(self) -> None:
        moved = Coordinate(1, 1).offset(2, 0)
        self.assertEqual(moved, Coordinate(3, 1))
        self.assertEqual(moved.to_dict(), {"x": 3, "y": 1})
        self.assertEqual(Coordinate.coerce((3, 1)), moved)


class GridTests(unittest.TestCase):
    def test_zero_dimensions_are_rejected(self) -> None:
        for width, height in ((0, 5), (5, 0), (0, 0), (-2, 3)):
            with self.subTest(width=width, height=height):
                with self.assertRaises(InvalidDimensions):
                    Grid(width, height)

    def test_new_grid_is_all_walls(self) -> None:
        grid = Grid(4, 3)
        self.assertEqual(grid.size, 12)
        self.assertTrue(all(grid.get(x, y) is CellState.WALL for x in range(4) for y in range(3)))
        self.assertEqual(grid.open_cells(), [])

    def test_out_of_bounds_queries_return_none(self) -> None:
        for width, height in ((1, 1), (3, 7), (10, 2)):
            grid = Grid(width, height)
            for x, y in ((-1, 0), (0, -1), (width, 0), (0, height), (width + 5, height + 5), (-10, -10)):
                with self.subTest(width=width, height=height, x=x, y=y):
                    self.assertIsNone(grid.get(x, y))

    def test_set_updates_single_cell(self) -> None:
        grid = Grid(3, 3)
        grid.set(2, 1, CellState.OPEN)
        self.assertIs(grid.get(2, 1), CellState.OPEN)
        self.assertIs(grid.get(1, 2), CellState.WALL)
        self.assertEqual(grid.open_cells(), [Coordinate(2, 1)])

    def test_set_outside_grid_raises(self) -> None:
        grid = Grid(3, 3)
        with self.assertRaises(IndexError):
            grid.set(3, 0, CellState.OPEN)

    def test_frozen_grid_rejects_writes(self) -> None:
        grid = Grid(3, 3).freeze()
        self.assertTrue(grid.frozen)
        with self.assertRaises(RuntimeError):
            grid.set(1, 1, CellState.OPEN)
        clone = grid.copy()
        clone.set(1, 1, CellState.OPEN)
        self.assertIs(grid.get(1, 1), CellState.WALL)

    def test_neighbors_2_stay_in_bounds(self) -> None:
        grid = Grid(5, 5)
        self.assertEqual(grid.neighbors_2((0, 0)), {Coordinate(2, 0), Coordinate(0, 2)})
        self.assertEqual(
            grid.neighbors_2(Coordinate(2, 2)),
            {Coordinate(0, 2), Coordinate(4, 2), Coordinate(2, 0), Coordinate(2, 4)},
        )
        self.assertEqual(grid.neighbors_2((4, 4)), {Coordinate(2, 4), Coordinate(4, 2)})

    def test_successors_only_include_open_cells(self) -> None:
        grid = Grid.from_rows(
            [
                [1, 0, 1],
                [0, 0, 1],
                [1, 1, 1],
            ]
        )
        self.assertEqual(grid.successors((1, 1)), [Coordinate(0, 1), Coordinate(1, 0)])
        self.assertEqual(grid.successors((0, 1)), [Coordinate(1, 1)])
        self.assertEqual(grid.successors((2, 2)), [])

    def test_from_rows_requires_rectangular_input(self) -> None:
        with self.assertRaises(ValueError):
            Grid.from_rows([[1, 0], [1]])
        with self.assertRaises(InvalidDimensions):
            Grid.from_rows([])

    def test_text_dump(self) -> None:
        grid = Grid.from_rows([[1, 0, 1], [0, 0, 1]])
        self.assertEqual(grid.render_text(), "#.#\n..#\n")
        self.assertEqual(str(grid), grid.render_text())
        self.assertEqual(grid.render_text({Coordinate(0, 1): "o"}), "#.#\no.#\n")
        self.assertEqual(grid.to_rows(), [[1, 0, 1], [0, 0, 1]])

    def test_equality_compares_cells(self) -> None:
        first = Grid.from_rows([[1, 0], [0, 1]])
        second = Grid.from_rows([[1, 0], [0, 1]])
        self.assertEqual(first, second)
        second.set(0, 0, CellState.OPEN)
        self.assertNotEqual(first, second)
        self.assertNotEqual(Grid(2, 3), Grid(3, 2))


if __name__ == "__main__":
    unittest.main()
