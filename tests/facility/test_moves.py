import random

import pytest

from rtg_elevator.facility.moves import (ElevatorDirection, Facility, Move,
                                         apply_move, candidate_moves,
                                         facilities_on_floor, legal_moves,
                                         successors)
from rtg_elevator.facility.state import (NUM_FLOORS, Configuration,
                                         FacilityKind, Item, is_valid,
                                         normalize)

GEN = FacilityKind.GENERATOR
CHIP = FacilityKind.MICROCHIP

# hydrogen: generator on floor 1, chip on floor 0
# lithium: generator on floor 2, chip on floor 0
EXAMPLE = Configuration((Item(1, 0), Item(2, 0)), elevator=0)


class TestFacilitiesOnFloor:
    def test_lists_generators_and_chips(self):
        config = Configuration((Item(1, 1), Item(1, 0), Item(2, 1)))
        assert facilities_on_floor(config, 1) == [
            Facility(0, GEN),
            Facility(0, CHIP),
            Facility(1, GEN),
            Facility(2, CHIP),
        ]

    def test_empty_floor(self):
        assert facilities_on_floor(EXAMPLE, 3) == []


class TestCandidateMoves:
    def test_ground_floor_only_moves_up(self):
        moves = list(candidate_moves(EXAMPLE))
        assert all(move.direction == ElevatorDirection.UP for move in moves)
        # Two chips: each alone and both together
        assert len(moves) == 3

    def test_top_floor_only_moves_down(self):
        config = Configuration((Item(3, 3),), elevator=3)
        moves = list(candidate_moves(config))
        assert [move.direction for move in moves] == [ElevatorDirection.DOWN] * 3

    def test_middle_floor_moves_both_ways(self):
        config = Configuration((Item(1, 1), Item(1, 2)), elevator=1)
        moves = list(candidate_moves(config))

        # Three facilities give 3 singles and 3 pairs per direction
        assert len(moves) == 12
        assert {move.direction for move in moves} == set(ElevatorDirection)

    def test_cargo_is_one_or_two_facilities_from_elevator_floor(self):
        rng = random.Random(3)
        for _ in range(30):
            items = tuple(
                Item(rng.randrange(NUM_FLOORS), rng.randrange(NUM_FLOORS))
                for _ in range(4)
            )
            config = Configuration(items, rng.randrange(NUM_FLOORS))
            for move in candidate_moves(config):
                assert 1 <= len(move.cargo) <= 2
                assert len(set(move.cargo)) == len(move.cargo)
                for facility in move.cargo:
                    item = config.items[facility.item]
                    assert item.floor_of(facility.kind) == config.elevator

    def test_no_moves_without_facilities_on_elevator_floor(self):
        config = Configuration((Item(2, 2),), elevator=0)
        assert list(candidate_moves(config)) == []

    def test_generator_and_chip_of_different_items(self):
        config = Configuration((Item(1, 2), Item(0, 1)), elevator=1)
        cargo = (Facility(0, GEN), Facility(1, CHIP))

        moves = list(candidate_moves(config))
        assert Move(ElevatorDirection.UP, cargo) in moves
        assert Move(ElevatorDirection.DOWN, cargo) in moves


class TestApplyMove:
    def test_moves_cargo_and_elevator(self):
        move = Move(ElevatorDirection.UP, (Facility(0, CHIP),))
        result = apply_move(EXAMPLE, move)

        assert result == Configuration((Item(1, 1), Item(2, 0)), elevator=1)
        assert EXAMPLE == Configuration((Item(1, 0), Item(2, 0)), elevator=0)

    def test_pair_of_same_item(self):
        config = Configuration((Item(2, 2),), elevator=2)
        move = Move(ElevatorDirection.DOWN, (Facility(0, GEN), Facility(0, CHIP)))
        assert apply_move(config, move) == Configuration((Item(1, 1),), elevator=1)

    def test_target_floor(self):
        move = Move(ElevatorDirection.DOWN, (Facility(0, GEN),))
        assert move.target_floor(Configuration((Item(2, 2),), elevator=2)) == 1


class TestLegalMoves:
    def test_example_first_move(self):
        # Only the hydrogen chip may join its generator on floor 1
        moves = legal_moves(EXAMPLE)
        assert len(moves) == 1

        move, result = moves[0]
        assert move == Move(ElevatorDirection.UP, (Facility(0, CHIP),))
        assert result == Configuration((Item(1, 1), Item(2, 0)), elevator=1)

    def test_cross_item_cargo_can_be_legal(self):
        config = Configuration((Item(1, 2), Item(0, 1)), elevator=1)
        cargo = (Facility(0, GEN), Facility(1, CHIP))
        results = {move: result for move, result in legal_moves(config)}

        # Up fries chip 1 next to generator 0, down lands it beside its own generator
        assert Move(ElevatorDirection.UP, cargo) not in results
        assert results[Move(ElevatorDirection.DOWN, cargo)] == Configuration(
            (Item(0, 2), Item(0, 0)), elevator=0
        )

    @pytest.mark.parametrize("seed", range(10))
    def test_results_are_valid(self, seed):
        rng = random.Random(seed)
        items = tuple(
            Item(rng.randrange(NUM_FLOORS), rng.randrange(NUM_FLOORS))
            for _ in range(5)
        )
        config = Configuration(items, rng.randrange(NUM_FLOORS))
        for _, result in legal_moves(config):
            assert is_valid(result)


class TestSuccessors:
    def test_successors_are_canonical(self):
        config = Configuration((Item(1, 1), Item(1, 1), Item(2, 2)), elevator=1)
        for successor in successors(config):
            assert normalize(successor) == successor
            assert is_valid(successor)

    def test_successors_of_example(self):
        assert successors(EXAMPLE) == [
            Configuration((Item(1, 1), Item(2, 0)), elevator=1)
        ]
