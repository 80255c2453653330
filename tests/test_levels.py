from snake_game.levels import hud_values, level_up_if_needed
from snake_game.obstacles import build_obstacles


def test_level_one_has_no_obstacles(make_state):
    assert build_obstacles(make_state(), 1) == []


def test_obstacles_disjoint_from_snake_food_and_each_other(make_state):
    state = make_state()
    for level in range(2, 16):
        obs = build_obstacles(state, level)
        assert len(obs) == min(level - 1, 12)
        assert len(set(obs)) == len(obs)
        assert not set(obs) & set(state.snake)
        assert state.food not in obs


def test_score_thirty_reaches_level_two(make_state):
    state = make_state(score=30)
    assert level_up_if_needed(state) is True
    assert state.level == 2
    assert len(state.obstacles) == 1
    assert state.obstacles[0] not in state.snake
    assert state.obstacles[0] != state.food


def test_no_rebuild_without_level_change(make_state):
    state = make_state(score=20, obstacles=[])
    assert level_up_if_needed(state) is False
    assert state.level == 1
    assert state.obstacles == []


def test_level_change_rebuilds_whole_set(make_state):
    state = make_state(score=60, level=2, obstacles=[(0, 0)])
    level_up_if_needed(state)
    assert state.level == 3
    assert len(state.obstacles) == 2


def test_hud_values(make_state):
    state = make_state(score=40, level=2, food_timer=4.2)
    hud = hud_values(state)
    assert hud.score == 40
    assert hud.level == 2
    assert hud.speed == 8
    assert hud.food_seconds == 5


def test_crowded_board_skips_obstacles(make_state, caplog):
    from snake_game.config import GRID
    snake = [(x, y) for y in range(GRID) for x in range(GRID)][:GRID * GRID - 2]
    state = make_state(snake=snake, food=None)
    with caplog.at_level("WARNING", logger="snake_game.obstacles"):
        obs = build_obstacles(state, 6)
    assert len(obs) == 2
    assert "placed 2 of 5" in caplog.text
