import pytest

from blockfall.pieces import PIECES, Piece

SHAPES = (
    (((0, 0, 0, 0), (1, 1, 1, 1), (0, 0, 0, 0), (0, 0, 0, 0)), 1),
    (((1, 0, 0), (1, 1, 1), (0, 0, 0)), 2),
    (((0, 0, 1), (1, 1, 1), (0, 0, 0)), 3),
    (((1, 1), (1, 1)), 4),
    (((0, 1, 1), (1, 1, 0), (0, 0, 0)), 5),
    (((1, 1, 0), (0, 1, 1), (0, 0, 0)), 6),
    (((0, 1, 0), (1, 1, 1), (0, 0, 0)), 7),
)


def _filled(piece):
    return {
        (x, y)
        for y in range(piece.size)
        for x in range(piece.size)
        if piece.at(x, y)
    }


def test_source_shapes_build_the_piece_set():
    built = [Piece(grid, colour=colour) for grid, colour in SHAPES]
    assert built == list(PIECES)
    assert [p.colour for p in built] == [1, 2, 3, 4, 5, 6, 7]


def test_piece_sizes_match_source():
    built = [Piece(grid, colour=colour) for grid, colour in SHAPES]
    assert [p.size for p in built] == [4, 3, 3, 2, 3, 3, 3]


@pytest.mark.parametrize("grid,colour", SHAPES)
def test_every_piece_has_four_cells(grid, colour):
    piece = Piece(grid, colour=colour)
    count = sum(
        1 for y in range(piece.size) for x in range(piece.size) if piece.at(x, y)
    )
    assert count == 4


def test_default_piece_is_empty():
    piece = Piece()
    assert piece.size == 0
    assert piece.colour == 8
    assert (piece.xmin, piece.xmax, piece.ymin, piece.ymax) == (0, 0, 0, 0)
    assert piece.at(0, 0) is False


def test_i_piece_extents():
    grid, colour = SHAPES[0]
    i_piece = Piece(grid, colour=colour)
    assert (i_piece.xmin, i_piece.xmax) == (0, 3)
    assert i_piece.ymin == i_piece.ymax == 1


def test_i_piece_rotates_to_vertical_column():
    grid, colour = SHAPES[0]
    vertical = Piece(grid, colour=colour).rotated()
    column = {x for x, _ in _filled(vertical)}
    assert column == {2}
    assert vertical.ymin == 0
    assert vertical.ymax == vertical.size - 1


@pytest.mark.parametrize("grid,colour", SHAPES)
def test_four_rotations_return_original(grid, colour):
    piece = Piece(grid, colour=colour)
    turned = piece.rotated().rotated().rotated().rotated()
    assert turned == piece


@pytest.mark.parametrize("grid,colour", SHAPES)
def test_rotation_preserves_cell_count_and_colour(grid, colour):
    piece = Piece(grid, colour=colour)
    turned = piece.rotated()
    assert len(_filled(turned)) == len(_filled(piece)) == 4
    assert turned.colour == colour
    assert (turned.x, turned.y) == (piece.x, piece.y)


@pytest.mark.parametrize("grid,colour", SHAPES)
@pytest.mark.parametrize("turns", [0, 1])
def test_extents_are_tight_bounds(grid, colour, turns):
    piece = Piece(grid, colour=colour)
    if turns:
        piece = piece.rotated()
    cells = [
        (x, y)
        for y in range(piece.size)
        for x in range(piece.size)
        if piece.at(x, y)
    ]
    xs = {x for x, _ in cells}
    ys = {y for _, y in cells}
    assert piece.xmin == min(xs)
    assert piece.xmax == max(xs)
    assert piece.ymin == min(ys)
    assert piece.ymax == max(ys)


def test_o_piece_is_rotation_invariant():
    o_piece = Piece(((1, 1), (1, 1)), colour=4)
    assert o_piece.rotated() == o_piece


def test_at_outside_grid_is_false():
    grid, colour = SHAPES[0]
    piece = Piece(grid, colour=colour)
    assert piece.at(0, 1) is True
    assert piece.at(piece.size, 1) is False
    assert piece.at(0, piece.size) is False
    assert piece.at(-1, 1) is False


def test_moved_shifts_position_only():
    piece = PIECES[6].moved(3, -2)
    assert (piece.x, piece.y) == (3, -2)
    assert piece.cells == PIECES[6].cells
    back = piece.moved(-3, 2)
    assert back == PIECES[6]


def test_non_square_grid_rejected():
    with pytest.raises(ValueError):
        Piece(((1, 1, 1), (1, 0, 0)))


def test_cells_normalised_to_booleans():
    piece = Piece(((1, 0), (0, 1)), colour=2)
    assert piece.cells == ((True, False), (False, True))