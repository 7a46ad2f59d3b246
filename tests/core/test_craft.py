# tests/core/test_craft.py
"""Tests for the craft state machine."""

import pytest

from chandrayaan.core.command import Command
from chandrayaan.core.craft import Craft, InitialState
from chandrayaan.core.facing import Facing
from chandrayaan.core.vector import Coordinate
from chandrayaan.utils.errors import CommandError


def test_default_construction_is_origin_facing_north():
    craft = Craft()
    assert craft.position == Coordinate(0, 0, 0)
    assert craft.facing == Facing.NORTH
    assert craft.last_horizontal_facing == Facing.NORTH
    assert craft.initial == InitialState((0, 0, 0), Facing.NORTH)


def test_construction_with_position_and_facing():
    craft = Craft({"x": 3, "y": 4, "z": 5}, Facing.EAST)
    assert craft.position == Coordinate(3, 4, 5)
    assert craft.facing == Facing.EAST
    assert craft.last_horizontal_facing == Facing.EAST


def test_construction_accepts_facing_name():
    craft = Craft((1, 2, 3), "west")
    assert craft.facing == Facing.WEST


@pytest.mark.parametrize("facing", [Facing.UP, Facing.DOWN])
def test_vertical_start_seeds_last_horizontal_to_north(facing):
    craft = Craft(facing=facing)
    assert craft.facing == facing
    assert craft.last_horizontal_facing == Facing.NORTH


def test_current_state_does_not_alias_initial_snapshot():
    start = {"x": 0, "y": 0, "z": 0}
    craft = Craft(start)
    craft.apply_commands(["f", "f"])
    assert craft.initial.position == Coordinate(0, 0, 0)
    assert craft.position == Coordinate(0, 2, 0)
    assert start == {"x": 0, "y": 0, "z": 0}


def test_caller_coordinate_is_copied():
    start = Coordinate(1, 1, 1)
    craft = Craft(start)
    craft.apply_commands("f")
    assert start == Coordinate(1, 1, 1)


def test_empty_batch_stays_put():
    craft = Craft()
    result = craft.apply_commands([])
    assert craft.initial.position == craft.position
    assert craft.initial.facing == craft.facing
    assert result.applied == 0
    assert result.ignored == []


class TestMoves:
    """Forward/backward along the facing's axis"""

    @pytest.mark.parametrize("commands, expected", [
        (["f"], (0, 1, 0)),
        (["f", "f"], (0, 2, 0)),
        (["b"], (0, -1, 0)),
        (["b", "b"], (0, -2, 0)),
        (["f", "f", "b"], (0, 1, 0)),
    ])
    def test_moves_from_origin_facing_north(self, commands, expected):
        craft = Craft()
        craft.apply_commands(commands)
        assert craft.position.as_tuple() == expected
        assert craft.facing == craft.initial.facing

    @pytest.mark.parametrize("facing, expected", [
        (Facing.NORTH, (0, 1, 0)),
        (Facing.SOUTH, (0, -1, 0)),
        (Facing.EAST, (1, 0, 0)),
        (Facing.WEST, (-1, 0, 0)),
        (Facing.UP, (0, 0, 1)),
        (Facing.DOWN, (0, 0, -1)),
    ])
    def test_forward_axis_for_every_facing(self, facing, expected):
        craft = Craft((0, 0, 0), facing)
        craft.apply_commands([Command.FORWARD])
        assert craft.position.as_tuple() == expected
        assert craft.facing == facing

    @pytest.mark.parametrize("facing", list(Facing))
    def test_backward_is_inverse_of_forward(self, facing):
        forward = Craft((0, 0, 0), facing)
        backward = Craft((0, 0, 0), facing)
        forward.apply_commands("f")
        backward.apply_commands("b")
        assert backward.position.as_tuple() == tuple(-v for v in forward.position.as_tuple())

    def test_start_east_at_offset(self):
        craft = Craft({"x": 3, "y": 4, "z": 5}, Facing.EAST)
        craft.apply_commands(["f", "f", "f", "f", "f", "b"])
        assert craft.position == Coordinate(7, 4, 5)
        assert craft.facing == Facing.EAST


class TestTurns:
    """Left/right turns resolve against the last horizontal facing"""

    @pytest.mark.parametrize("start, left, right", [
        (Facing.NORTH, Facing.WEST, Facing.EAST),
        (Facing.EAST, Facing.NORTH, Facing.SOUTH),
        (Facing.SOUTH, Facing.EAST, Facing.WEST),
        (Facing.WEST, Facing.SOUTH, Facing.NORTH),
    ])
    def test_single_turns(self, start, left, right):
        craft = Craft(facing=start)
        craft.apply_commands("l")
        assert craft.facing == left
        assert craft.last_horizontal_facing == left

        craft = Craft(facing=start)
        craft.apply_commands("r")
        assert craft.facing == right
        assert craft.last_horizontal_facing == right

    def test_turns_never_move_the_craft(self):
        craft = Craft((2, 2, 2), Facing.SOUTH)
        craft.apply_commands("lrrlrl")
        assert craft.position == Coordinate(2, 2, 2)

    def test_turn_while_pitched_up_returns_to_horizontal(self):
        craft = Craft(facing=Facing.EAST)
        craft.apply_commands("u")
        assert craft.facing == Facing.UP
        craft.apply_commands("r")
        assert craft.facing == Facing.SOUTH

    def test_vertical_start_turns_from_north(self):
        craft = Craft(facing=Facing.DOWN)
        craft.apply_commands("l")
        assert craft.facing == Facing.WEST


class TestPitch:
    def test_pitch_up_and_down_overwrite_facing(self):
        craft = Craft((1, 1, 1), Facing.WEST)
        craft.apply_commands("u")
        assert craft.facing == Facing.UP
        craft.apply_commands("d")
        assert craft.facing == Facing.DOWN
        assert craft.position == Coordinate(1, 1, 1)

    def test_pitch_does_not_touch_last_horizontal_facing(self):
        craft = Craft(facing=Facing.SOUTH)
        craft.apply_commands("udu")
        assert craft.last_horizontal_facing == Facing.SOUTH

    def test_pitching_back_down_does_not_restore_horizontal_facing(self):
        # A pitch never returns to the last horizontal facing; only turns do
        craft = Craft(facing=Facing.EAST)
        craft.apply_commands("ud")
        assert craft.facing == Facing.DOWN
        assert craft.last_horizontal_facing == Facing.EAST


class TestLiteralScenarios:
    @pytest.mark.parametrize("position, facing, commands, expected_position, expected_facing", [
        ((0, 0, 0), Facing.NORTH, ["f"], (0, 1, 0), Facing.NORTH),
        ((0, 0, 0), Facing.EAST, ["f"], (1, 0, 0), Facing.EAST),
        ((0, 0, 0), Facing.UP, ["f"], (0, 0, 1), Facing.UP),
        ((0, 0, 0), Facing.NORTH, ["f", "r", "u", "b", "l"], (0, 1, -1), Facing.NORTH),
        ((0, 0, 0), Facing.NORTH, ["l", "l", "l", "l"], (0, 0, 0), Facing.NORTH),
        ((3, 4, 5), Facing.DOWN, ["b", "u"], (3, 4, 6), Facing.UP),
    ])
    def test_scenario(self, position, facing, commands, expected_position, expected_facing):
        craft = Craft(position, facing)
        craft.apply_commands(commands)
        assert craft.position.as_tuple() == expected_position
        assert craft.facing == expected_facing


class TestUnknownSymbols:
    def test_unknown_symbols_are_skipped(self):
        craft = Craft()
        result = craft.apply_commands(["f", "x", "f", "?"])
        assert craft.position == Coordinate(0, 2, 0)
        assert result.applied == 2
        assert result.ignored == ["x", "?"]

    def test_symbols_are_case_sensitive(self):
        craft = Craft()
        result = craft.apply_commands(["F"])
        assert craft.position == Coordinate(0, 0, 0)
        assert result.ignored == ["F"]

    def test_strict_batch_rejected_before_any_command_runs(self):
        craft = Craft()
        with pytest.raises(CommandError):
            craft.apply_commands(["f", "f", "z"], strict=True)
        assert craft.position == Coordinate(0, 0, 0)


class TestLifecycle:
    def test_move_alias(self):
        craft = Craft()
        craft.move([Command.FORWARD])
        assert craft.position == Coordinate(0, 1, 0)

    def test_reset_restores_initial_state(self):
        craft = Craft((1, 2, 3), Facing.UP)
        craft.apply_commands("frff")
        assert not craft.is_at_initial()
        craft.reset()
        assert craft.is_at_initial()
        assert craft.position == Coordinate(1, 2, 3)
        assert craft.facing == Facing.UP
        assert craft.last_horizontal_facing == Facing.NORTH

    def test_initial_snapshot_cannot_be_mutated_through_position(self):
        craft = Craft((1, 2, 3), Facing.EAST)
        craft.initial.position.shift("x", 5)
        assert craft.initial.position.as_tuple() == (1, 2, 3)
        assert craft.is_at_initial()

        craft.apply_commands("f")
        craft.reset()
        assert craft.position == Coordinate(1, 2, 3)

    def test_initial_snapshot_is_frozen(self):
        craft = Craft()
        with pytest.raises(AttributeError):
            craft.initial.coordinates = (9, 9, 9)

    def test_reset_state_is_independent_of_initial(self):
        craft = Craft()
        craft.reset()
        craft.apply_commands("f")
        assert craft.initial.position == Coordinate(0, 0, 0)

    def test_displacement(self):
        craft = Craft((3, 4, 5), Facing.WEST)
        craft.apply_commands("ffud")
        assert craft.displacement() == Coordinate(-2, 0, 0)

    def test_get_state(self):
        craft = Craft((0, 0, 0), Facing.EAST)
        craft.apply_commands("u")
        assert craft.get_state() == {
            "position": {"x": 0, "y": 0, "z": 0},
            "facing": "Up",
            "last_horizontal_facing": "East",
            "initial": {"position": {"x": 0, "y": 0, "z": 0}, "facing": "East"},
        }
