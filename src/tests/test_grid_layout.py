import pytest

from display_system import GridLayout
from game_system import Cell, DisplayConfig, GameConfig, GridConfig


@pytest.fixture()
def layout():
    return GridLayout(GameConfig())


def test_window_includes_progress_bar(layout):
    assert layout.window_size == (600, 620)


@pytest.mark.parametrize("x, y, expected", [
    (0, 0, Cell(0, 0)),
    (160, 20, Cell(0, 1)),
    (149.9, 150, Cell(1, 0)),
    (599.5, 599.5, Cell(3, 3)),
    (310, 460, Cell(3, 2)),
])
def test_cell_at(layout, x, y, expected):
    assert layout.cell_at(x, y) == expected


@pytest.mark.parametrize("x, y", [(-1, 10), (10, -1), (600, 10), (10, 600), (300, 610)])
def test_cell_at_outside_the_board(layout, x, y):
    assert layout.cell_at(x, y) is None


def test_tile_rect(layout):
    assert layout.tile_rect(Cell(0, 1)) == (150, 0, 150, 150)
    assert layout.tile_rect(Cell(3, 3)) == (450, 450, 150, 150)


def test_tile_rects_cover_uneven_boards():
    layout = GridLayout(GameConfig(grid=GridConfig(rows=3, cols=7), display=DisplayConfig(width=500, height=400)))

    widths = [layout.tile_rect(Cell(0, col))[2] for col in range(7)]

    assert sum(widths) == 500
    assert layout.cell_at(499, 399) == Cell(2, 6)


def test_progress_rect(layout):
    assert layout.progress_rect(1.0) == (0, 600, 600, 20)
    assert layout.progress_rect(0.5) == (0, 600, 300, 20)
    assert layout.progress_rect(0.0)[2] == 0


def test_button(layout):
    assert layout.button_rect() == (220, 360, 160, 50)
    assert layout.is_on_button(300, 385)
    assert not layout.is_on_button(300, 300)
