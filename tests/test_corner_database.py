import pytest

from cubesolve.corner_database import CornerPatternDatabase


class CornerState:
    def __init__(self, perm=None, orientations=None):
        self.perm = list(perm) if perm is not None else list(range(8))
        self.orientations = (
            list(orientations) if orientations is not None else [0] * 8
        )

    def corner_index(self, i):
        return self.perm[i]

    def corner_orientation(self, i):
        return self.orientations[i]


@pytest.fixture(scope="module")
def shared_db():
    return CornerPatternDatabase()


def test_size_is_fixed(shared_db):
    assert shared_db.size == 100179840


def test_solved_corners_index_zero(shared_db):
    assert shared_db.database_index(CornerState()) == 0


def test_first_orientation_weight(shared_db):
    state = CornerState(orientations=[1, 0, 0, 0, 0, 0, 0, 0])
    assert shared_db.database_index(state) == 729


def test_last_corner_orientation_ignored(shared_db):
    base = CornerState(orientations=[2, 1, 0, 2, 1, 0, 2, 0])
    other = CornerState(orientations=[2, 1, 0, 2, 1, 0, 2, 2])
    assert shared_db.database_index(base) == shared_db.database_index(other)


def test_permutation_step_is_orientation_block(shared_db):
    swapped = CornerState(perm=[0, 1, 2, 3, 4, 5, 7, 6])
    assert shared_db.database_index(swapped) == 2187


def test_extreme_state_within_bounds(shared_db):
    state = CornerState(perm=reversed(range(8)), orientations=[2] * 8)
    assert shared_db.database_index(state) == shared_db.size - 1 - (
        shared_db.size - 40320 * 2187
    )


def test_distinct_states_distinct_indices(shared_db):
    states = [
        CornerState(),
        CornerState(perm=[1, 0, 2, 3, 4, 5, 6, 7]),
        CornerState(orientations=[0, 0, 0, 0, 0, 0, 1, 2]),
        CornerState(perm=[7, 6, 5, 4, 3, 2, 1, 0], orientations=[1] * 8),
    ]
    indices = {shared_db.database_index(s) for s in states}
    assert len(indices) == len(states)
    assert all(0 <= i < shared_db.size for i in indices)


def test_set_and_get_by_cube():
    db = CornerPatternDatabase()
    state = CornerState(perm=[3, 1, 2, 0, 4, 5, 6, 7], orientations=[1, 2] * 4)
    assert db.get_num_moves(state) == 0xF
    assert db.set_num_moves(state, 5) is True
    assert db.get_num_moves(state) == 5
    assert db.get_num_moves(CornerState()) == 0xF
    assert db.num_items == 1


def test_init_value_applied():
    db = CornerPatternDatabase(0x00)
    assert db.get_num_moves(CornerState()) == 0
    assert db.set_num_moves(CornerState(), 3) is False


def test_invalid_corner_permutation_rejected(shared_db):
    with pytest.raises(ValueError):
        shared_db.database_index(CornerState(perm=[0, 0, 2, 3, 4, 5, 6, 7]))