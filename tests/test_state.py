import pytest

from zombiegrid.state import Status, ZombieState, delta_to_direction, state_from_values

CENTER = (5, 5)
OFFSETS = [(0, -1), (1, -1), (1, 0), (1, 1), (0, 1), (-1, 1), (-1, 0), (-1, -1)]


def ring(overrides=None, **common):
    """Eight neighbours around CENTER; overrides maps an offset to field values."""
    overrides = overrides or {}
    cells = []
    for dx, dy in OFFSETS:
        fields = dict(common)
        fields.update(overrides.get((dx, dy), {}))
        fields.setdefault("direction", 8)
        cells.append(ZombieState(xy=(CENTER[0] + dx, CENTER[1] + dy), **fields))
    return cells


@pytest.mark.parametrize(
    "delta, expected",
    [
        ((0, -1), 0),
        ((1, -1), 1),
        ((1, 0), 2),
        ((1, 1), 3),
        ((0, 1), 4),
        ((-1, 1), 5),
        ((-1, 0), 6),
        ((-1, -1), 7),
        ((0, 0), 8),
    ],
)
def test_delta_to_direction(delta, expected):
    assert delta_to_direction(*delta) == expected


@pytest.mark.parametrize("delta", [(2, 0), (0, -2), (3, 3), (-1, 2)])
def test_delta_to_direction_not_adjacent(delta):
    assert delta_to_direction(*delta) is None


def test_empty_cell_stays_empty():
    cell = ZombieState(xy=CENTER, direction=8)
    new = cell.next_state(ring())
    assert new.status is Status.EMPTY
    assert new.population == 0
    assert new.direction == 8


def test_incoming_zombies_take_empty_cell():
    west = (-1, 0)
    cell = ZombieState(xy=CENTER, direction=8)
    neighbors = ring(
        {
            west: {"status": Status.ZOMBIE, "population": 7, "direction": 2},
            (0, 1): {"smell_human": 50},
        }
    )
    new = cell.next_state(neighbors)
    assert new.status is Status.ZOMBIE
    assert new.population == 7
    assert new.direction == delta_to_direction(0, 1)


def test_neighbor_pointing_elsewhere_is_ignored():
    cell = ZombieState(xy=CENTER, direction=8)
    neighbors = ring({(-1, 0): {"status": Status.ZOMBIE, "population": 7, "direction": 6}})
    new = cell.next_state(neighbors)
    assert new.status is Status.EMPTY
    assert new.population == 0


def test_equal_forces_leave_empty_cell():
    cell = ZombieState(xy=CENTER, direction=8)
    neighbors = ring(
        {
            (-1, 0): {"status": Status.ZOMBIE, "population": 12, "direction": 2},
            (1, 0): {"status": Status.HUMAN, "population": 12, "direction": 6},
        }
    )
    new = cell.next_state(neighbors)
    assert new.status is Status.EMPTY
    assert new.population == 0


def test_moved_population_does_not_defend():
    cell = ZombieState(xy=CENTER, status=Status.ZOMBIE, population=5, direction=2)
    new = cell.next_state(ring())
    assert new.status is Status.EMPTY
    assert new.population == 0


def test_humans_hold_cell_against_smaller_horde():
    cell = ZombieState(xy=CENTER, status=Status.HUMAN, population=30, direction=8)
    neighbors = ring({(0, -1): {"status": Status.ZOMBIE, "population": 30, "direction": 4}})
    new = cell.next_state(neighbors)
    assert new.status is Status.HUMAN
    assert 0 < new.population < 30


def test_humans_overrun():
    cell = ZombieState(xy=CENTER, status=Status.HUMAN, population=3, direction=8)
    neighbors = ring({(0, -1): {"status": Status.ZOMBIE, "population": 30, "direction": 4}})
    new = cell.next_state(neighbors)
    assert new.status is Status.ZOMBIE
    assert new.population > 0


def test_holders_advantage_tie_empties_cell():
    cell = ZombieState(xy=CENTER, status=Status.HUMAN, population=10, direction=8)
    neighbors = ring({(0, -1): {"status": Status.ZOMBIE, "population": 30, "direction": 4}})
    new = cell.next_state(neighbors)
    assert new.status is Status.EMPTY
    assert new.population == 0


def test_human_population_grows():
    cell = ZombieState(xy=CENTER, status=Status.HUMAN, population=100, direction=8)
    new = cell.next_state(ring())
    assert new.population == 101


def test_smell_is_neighbor_average_plus_own_population():
    cell = ZombieState(xy=CENTER, status=Status.ZOMBIE, population=4, direction=8)
    new = cell.next_state(ring(smell_zombie=16))
    assert new.smell_zombie == 20
    assert new.smell_human == 0


def test_humans_move_to_less_smelly_cell():
    target = (1, 1)
    cell = ZombieState(xy=CENTER, status=Status.HUMAN, population=2, direction=8)
    neighbors = ring({target: {"smell_zombie": 0}}, smell_zombie=8)
    new = cell.next_state(neighbors)
    assert new.status is Status.HUMAN
    assert new.direction == delta_to_direction(*target)


def test_humans_stay_when_zombies_outnumber():
    cell = ZombieState(xy=CENTER, status=Status.HUMAN, population=30, direction=8)
    neighbors = ring(status=Status.ZOMBIE, population=50)
    new = cell.next_state(neighbors)
    assert new.status is Status.HUMAN
    assert new.direction == 8


def test_zombies_prefer_cold_on_equal_smell():
    cold = (-1, -1)
    cell = ZombieState(xy=CENTER, status=Status.ZOMBIE, population=5, direction=8)
    neighbors = ring({cold: {"temperature": -5}}, temperature=3)
    new = cell.next_state(neighbors)
    assert new.direction == delta_to_direction(*cold)


def test_zombies_prefer_low_on_equal_smell_and_temperature():
    low = (0, 1)
    cell = ZombieState(xy=CENTER, status=Status.ZOMBIE, population=5, direction=8)
    neighbors = ring({low: {"altitude": -10}})
    new = cell.next_state(neighbors)
    assert new.direction == delta_to_direction(*low)


def test_next_state_does_not_change_terrain_fields():
    cell = ZombieState(xy=CENTER, altitude=7, temperature=-3, status=Status.HUMAN,
                       population=60, direction=8)
    new = cell.next_state(ring())
    assert (new.xy, new.altitude, new.temperature) == (CENTER, 7, -3)


def test_non_adjacent_neighbor_raises():
    cell = ZombieState(xy=CENTER, direction=8)
    with pytest.raises(ValueError):
        cell.next_state([ZombieState(xy=(9, 9))])


def test_no_neighbors_raises():
    with pytest.raises(ValueError):
        ZombieState(xy=CENTER).next_state([])


def test_state_from_values():
    state = state_from_values([3, 4, 10, -2, 2, 120, 8, 5, 6])
    assert state == ZombieState(
        xy=(3, 4),
        altitude=10,
        temperature=-2,
        status=Status.HUMAN,
        population=120,
        direction=8,
        smell_human=5,
        smell_zombie=6,
    )


@pytest.mark.parametrize("code, status", [(0, Status.EMPTY), (1, Status.ZOMBIE),
                                          (2, Status.HUMAN), (3, Status.EMPTY)])
def test_state_from_values_status_codes(code, status):
    assert state_from_values([0, 0, 0, 0, code, 0, 0, 0, 0]).status is status


def test_state_from_values_too_short():
    with pytest.raises(ValueError):
        state_from_values([1, 2, 3])