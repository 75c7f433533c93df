"""
Tests for disc colors, pieces and the empty-cell sentinel.
"""
import pytest

from src.othello.piece import Color, Piece, EMPTY


def test_color_opposite():
    assert Color.BLACK.opposite is Color.WHITE
    assert Color.WHITE.opposite is Color.BLACK


def test_color_coerce_accepts_strings():
    assert Color.coerce("black") is Color.BLACK
    assert Color.coerce("white") is Color.WHITE
    assert Color.coerce(Color.WHITE) is Color.WHITE


@pytest.mark.parametrize("bad", ["red", "Black", "", None, 1])
def test_color_coerce_rejects_other_values(bad):
    with pytest.raises(ValueError):
        Color.coerce(bad)


def test_piece_flip_toggles_color():
    piece = Piece("black")
    piece.flip()
    assert piece.color is Color.WHITE
    piece.flip()
    assert piece.color is Color.BLACK


def test_piece_render():
    assert Piece(Color.BLACK).render() == 'B'
    assert str(Piece(Color.WHITE)) == 'W'
    assert EMPTY.render() == '.'


def test_piece_requires_valid_color():
    with pytest.raises(ValueError):
        Piece("green")


def test_empty_is_falsy_singleton():
    assert not EMPTY
    assert type(EMPTY)() is EMPTY
    assert repr(EMPTY) == "EMPTY"


def test_piece_copy_is_independent():
    piece = Piece(Color.WHITE)
    clone = piece.copy()
    clone.flip()
    assert piece.color is Color.WHITE
    assert clone.color is Color.BLACK
