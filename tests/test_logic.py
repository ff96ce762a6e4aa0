import pytest

from babaengine.blocks import MoveDirection
from babaengine.logic import GameLogic


def baba_flag_map():
    return {
        "TEXT_BABA": [(0, 0)],
        "IS": [(1, 0), (1, 1)],
        "YOU": [(2, 0)],
        "TEXT_FLAG": [(0, 1)],
        "WIN": [(2, 1)],
        "BABA": [(0, 3)],
        "FLAG": [(2, 3)],
    }


def test_initial_state_not_completed():
    logic = GameLogic(4, 4, baba_flag_map())
    assert logic.level_completed() is False
    assert logic.level_map()["BABA"] == [(0, 3)]


def test_rules_summary_lists_rules_by_subject():
    logic = GameLogic(4, 4, baba_flag_map())
    assert logic.rules_summary() == {
        "BABA": [{"subject": "BABA", "verb": "IS", "object": "YOU"}],
        "FLAG": [{"subject": "FLAG", "verb": "IS", "object": "WIN"}],
    }


def test_move_shifts_you_block():
    logic = GameLogic(4, 4, baba_flag_map())
    logic.move(MoveDirection.RIGHT)
    assert logic.level_map()["BABA"] == [(1, 3)]
    assert logic.level_completed() is False


def test_reaching_flag_completes_level():
    logic = GameLogic(4, 4, baba_flag_map())
    logic.move(MoveDirection.RIGHT)
    logic.move(MoveDirection.RIGHT)
    assert logic.level_map()["BABA"] == [(2, 3)]
    assert logic.level_completed() is True


def test_no_you_rule_means_nothing_moves():
    block_map = {"BABA": [(1, 1)], "FLAG": [(2, 2)]}
    logic = GameLogic(3, 3, block_map)
    logic.move(MoveDirection.RIGHT)
    assert logic.level_map() == {"BABA": [(1, 1)], "FLAG": [(2, 2)]}
    assert logic.rules_summary() == {}


def test_noun_rule_transforms_blocks():
    block_map = {
        "TEXT_BABA": [(0, 0)],
        "IS": [(1, 0)],
        "TEXT_KEKE": [(2, 0)],
        "BABA": [(0, 3)],
    }
    logic = GameLogic(4, 4, block_map)
    level_map = logic.level_map()
    assert "BABA" not in level_map
    assert level_map["KEKE"] == [(0, 3)]


def test_defeat_destroys_you_block():
    block_map = {
        "TEXT_BABA": [(0, 0)],
        "IS": [(1, 0), (1, 1)],
        "YOU": [(2, 0)],
        "TEXT_SKULL": [(0, 1)],
        "DEFEAT": [(2, 1)],
        "BABA": [(0, 3)],
        "SKULL": [(1, 3)],
    }
    logic = GameLogic(4, 4, block_map)
    logic.move(MoveDirection.RIGHT)
    level_map = logic.level_map()
    assert "BABA" not in level_map
    assert level_map["SKULL"] == [(1, 3)]


def test_load_level_replaces_state():
    logic = GameLogic(4, 4, baba_flag_map())
    logic.move(MoveDirection.RIGHT)
    logic.move(MoveDirection.RIGHT)
    assert logic.level_completed() is True
    logic.load_level(4, 4, baba_flag_map())
    assert logic.level_completed() is False
    assert logic.level_map() == GameLogic(4, 4, baba_flag_map()).level_map()


def test_out_of_bounds_block_rejected():
    with pytest.raises(ValueError):
        GameLogic(2, 2, {"BABA": [(5, 5)]})