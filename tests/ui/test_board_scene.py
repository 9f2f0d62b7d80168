"""Tests for BoardScene rendering state and click mapping."""

from __future__ import annotations

from PyQt6.QtCore import QPointF

from pikaqi.core.enums import PieceKind, Side
from pikaqi.core.notation import STARTING_FEN, position_from_fen
from pikaqi.core.types import parse_square
from pikaqi.ui.board.board_scene import BoardScene
from pikaqi.ui.styles.theme import THEMES


def _scene_with_start() -> BoardScene:
    scene = BoardScene()
    scene.set_position(position_from_fen(STARTING_FEN))
    return scene


def test_square_at_respects_orientation() -> None:
    scene = BoardScene()
    top_left = QPointF(BoardScene.PADDING, BoardScene.PADDING)
    assert scene.square_at(top_left) == parse_square("a9")

    scene.set_flipped(True)
    assert scene.is_flipped()
    assert scene.square_at(top_left) == parse_square("i0")


def test_square_at_snaps_to_nearest_intersection() -> None:
    scene = BoardScene()
    center = scene.square_center(parse_square("e0"))
    near = QPointF(center.x() + BoardScene.CELL * 0.3, center.y() - BoardScene.CELL * 0.3)
    assert scene.square_at(near) == parse_square("e0")


def test_square_at_outside_grid_is_none() -> None:
    scene = BoardScene()
    assert scene.square_at(QPointF(-100, -100)) is None
    assert scene.square_at(QPointF(10_000, 10)) is None


def test_square_center_round_trips_through_square_at() -> None:
    scene = BoardScene()
    scene.set_flipped(True)
    for name in ("a0", "e4", "i9", "c7"):
        sq = parse_square(name)
        assert scene.square_at(scene.square_center(sq)) == sq


def test_set_position_creates_one_item_per_piece() -> None:
    scene = _scene_with_start()
    assert len(scene._piece_items) == 32
    item = scene.piece_item_at(parse_square("h2"))
    assert item is not None
    assert item.piece.kind == PieceKind.CANNON
    assert item.piece.side == Side.RED
    assert scene.piece_item_at(parse_square("e4")) is None


def test_selection_marks_piece_and_draws_dots() -> None:
    scene = _scene_with_start()
    targets = [parse_square("e2"), parse_square("h3")]
    scene.set_selection(parse_square("h2"), targets)

    assert scene.piece_item_at(parse_square("h2")).is_selected_piece
    assert scene.legal_dot_count() == 2

    scene.set_selection(None, ())
    assert not scene.piece_item_at(parse_square("h2")).is_selected_piece
    assert scene.legal_dot_count() == 0


def test_set_show_legal_moves_false_clears_existing_dots() -> None:
    scene = _scene_with_start()
    scene.set_selection(parse_square("h2"), [parse_square("e2")])

    scene.set_show_legal_moves(False)

    assert scene._legal_dot_items == []


def test_set_show_coordinates_toggles_all_labels_visibility() -> None:
    scene = BoardScene()
    assert len(scene._coord_items) == 9 + 10

    scene.set_show_coordinates(False)
    assert all(not item.isVisible() for item in scene._coord_items)

    scene.set_show_coordinates(True)
    assert all(item.isVisible() for item in scene._coord_items)


def test_coordinates_hidden_survive_flip() -> None:
    scene = BoardScene()
    scene.set_show_coordinates(False)
    scene.set_flipped(True)
    assert all(not item.isVisible() for item in scene._coord_items)


def test_rank_labels_follow_flip() -> None:
    scene = BoardScene()
    ranks = [item.text() for item in scene._coord_items[9:]]
    assert ranks[0] == "9"

    scene.set_flipped(True)
    ranks = [item.text() for item in scene._coord_items[9:]]
    assert ranks[0] == "0"


def test_pv_arrow_shown_and_cleared() -> None:
    scene = _scene_with_start()
    scene.set_highlighted_move((parse_square("h2"), parse_square("e2")))
    assert scene.has_pv_arrow()

    scene.set_highlighted_move(None)
    assert not scene.has_pv_arrow()


def test_theme_change_keeps_pieces_and_arrow() -> None:
    scene = _scene_with_start()
    scene.set_highlighted_move((parse_square("b0"), parse_square("c2")))
    scene.set_theme(THEMES["Jade"])
    assert len(scene._piece_items) == 32
    assert scene.has_pv_arrow()


def test_square_clicked_emits_for_board_intersection() -> None:
    scene = BoardScene()
    clicked = []
    scene.square_clicked.connect(clicked.append)

    sq = scene.square_at(scene.square_center(parse_square("b0")))
    scene.square_clicked.emit(sq)

    assert clicked == [parse_square("b0")]
