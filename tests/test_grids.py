import copy
import random
from collections import Counter

import pytest

from algosolve.grids import (
    exist,
    minimum_obstacles,
    num_islands,
    shortest_path_binary_matrix,
    sliding_puzzle,
    sort_matrix,
)

BOARD = [["A", "B", "C", "E"], ["S", "F", "C", "S"], ["A", "D", "E", "E"]]
SOLVED = [[1, 2, 3], [4, 5, 0]]


def test_exist_finds_path_words():
    assert exist(BOARD, "ABCCED")
    assert exist(BOARD, "SEE")


def test_exist_rejects_reused_cell():
    assert not exist(BOARD, "ABCB")


def test_exist_every_single_cell():
    for row in BOARD:
        for letter in row:
            assert exist(BOARD, letter)


def test_exist_missing_letter_and_empty_word():
    assert not exist(BOARD, "ABZ")
    assert not exist(BOARD, "")


def test_num_islands_checkerboard_counts_each_one():
    grid = [["1" if (i + j) % 2 == 0 else "0" for j in range(5)] for i in range(4)]
    assert num_islands(grid) == sum(row.count("1") for row in grid)


def test_num_islands_full_grid_is_one_island_like_single_cell():
    assert num_islands([["1"] * 4 for _ in range(3)]) == num_islands([["1"]])


def test_num_islands_water_and_transpose():
    assert not num_islands([["0", "0"], ["0", "0"]])
    grid = ["11000", "11000", "00100", "00011"]
    transposed = ["".join(column) for column in zip(*grid)]
    assert num_islands(grid) == num_islands(transposed)


def test_sliding_puzzle_unsolvable():
    assert sliding_puzzle([[1, 2, 3], [5, 4, 0]]) == -1


def test_sliding_puzzle_solved_and_one_move():
    assert not sliding_puzzle(SOLVED)
    assert sliding_puzzle([[1, 2, 3], [4, 0, 5]]) > sliding_puzzle(SOLVED)


def test_sliding_puzzle_scrambled_within_move_count():
    slides = {0: (1, 3), 1: (0, 2, 4), 2: (1, 5), 3: (0, 4), 4: (1, 3, 5), 5: (2, 4)}
    rng = random.Random(7)
    cells = [1, 2, 3, 4, 5, 0]
    for moves in range(1, 15):
        blank = cells.index(0)
        other = rng.choice(slides[blank])
        cells[blank], cells[other] = cells[other], cells[blank]
        result = sliding_puzzle([cells[:3], cells[3:]])
        assert 0 <= result <= moves
        assert result % 2 == moves % 2


def test_sliding_puzzle_without_blank_and_bad_shape():
    assert sliding_puzzle([[1, 2, 3], [4, 5, 6]]) == sliding_puzzle(
        [[1, 2, 3], [5, 4, 0]]
    )
    with pytest.raises(ValueError):
        sliding_puzzle([[1, 2], [3, 0]])


def test_shortest_path_blocked_start():
    assert shortest_path_binary_matrix([[1, 0], [0, 0]]) == -1


def test_shortest_path_open_square_goes_diagonally():
    for size in range(1, 6):
        grid = [[0] * size for _ in range(size)]
        assert shortest_path_binary_matrix(grid) == size


def test_shortest_path_unreachable_and_unmodified():
    grid = [[0, 1, 0], [1, 1, 0], [0, 0, 0]]
    before = copy.deepcopy(grid)
    assert shortest_path_binary_matrix(grid) == shortest_path_binary_matrix(
        [[1, 0], [0, 0]]
    )
    assert grid == before


def test_shortest_path_empty_grid():
    with pytest.raises(ValueError):
        shortest_path_binary_matrix([])


def test_minimum_obstacles_single_row_and_column():
    row = [0, 1, 1, 0, 1]
    assert minimum_obstacles([row]) == sum(row[1:])
    assert minimum_obstacles([[value] for value in row]) == sum(row[1:])


def test_minimum_obstacles_clear_path():
    assert not minimum_obstacles([[0, 1, 1], [0, 0, 0], [1, 1, 0]])


def test_minimum_obstacles_bounded_by_straight_route():
    grid = [[0, 1, 1, 0], [1, 1, 0, 1], [0, 1, 1, 0]]
    along_edge = sum(grid[0][1:]) + sum(row[-1] for row in grid[1:])
    assert 0 < minimum_obstacles(grid) <= along_edge


def test_sort_matrix_example():
    assert sort_matrix([[1, 7, 3], [9, 8, 2], [4, 5, 6]]) == [
        [8, 2, 3],
        [9, 6, 7],
        [4, 5, 1],
    ]


def test_sort_matrix_invariants():
    rng = random.Random(3)
    grid = [[rng.randint(-9, 9) for _ in range(5)] for _ in range(4)]
    before = copy.deepcopy(grid)
    result = sort_matrix(grid)
    assert grid == before
    assert Counter(v for row in result for v in row) == Counter(
        v for row in grid for v in row
    )
    for key in range(-4, 4):
        diagonal = [result[i][i - key] for i in range(4) if 0 <= i - key < 5]
        original = [grid[i][i - key] for i in range(4) if 0 <= i - key < 5]
        assert diagonal == sorted(original, reverse=key >= 0)