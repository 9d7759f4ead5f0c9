import pytest

from dstructs.maze import (
    LARGE_MAZE,
    SMALL_MAZE,
    SUCCESS_MESSAGE,
    Position,
    explore_with_queue,
    explore_with_stack,
    find_start,
    is_valid_location,
    main,
    parse_maze,
    render,
)


def test_parse_maze_round_trips_rows():
    grid = parse_maze(SMALL_MAZE)
    assert ["".join(row) for row in grid] == list(SMALL_MAZE)


def test_parse_maze_rejects_empty():
    with pytest.raises(ValueError):
        parse_maze([])


def test_position_str():
    assert str(Position(3, 7)) == "(3, 7)"


def test_find_start_small():
    assert find_start(parse_maze(SMALL_MAZE)) == Position(0, 1)


def test_find_start_large():
    assert find_start(parse_maze(LARGE_MAZE)) == Position(0, 7)


def test_find_start_defaults_to_origin():
    assert find_start(parse_maze(["000", "00g"])) == Position(0, 0)


@pytest.mark.parametrize(
    "y, x, expected",
    [
        (1, 1, True),   # open path
        (4, 5, True),   # goal
        (0, 0, False),  # wall
        (1, 0, False),  # start is not enterable
        (-1, 0, False),
        (0, -1, False),
        (6, 0, False),
        (0, 6, False),
    ],
)
def test_is_valid_location(y, x, expected):
    assert is_valid_location(parse_maze(SMALL_MAZE), y, x) is expected


@pytest.mark.parametrize("explore", [explore_with_stack, explore_with_queue])
def test_small_maze_reaches_goal(explore):
    grid = parse_maze(SMALL_MAZE)
    steps = list(explore(grid))
    assert steps[0] == Position(0, 1)
    assert steps[-1] == Position(5, 4)
    assert grid[4][5] == "g"
    for step in steps[:-1]:
        assert grid[step.y][step.x] == "."


@pytest.mark.parametrize("explore", [explore_with_stack, explore_with_queue])
def test_steps_stay_on_open_cells(explore):
    original = parse_maze(SMALL_MAZE)
    grid = parse_maze(SMALL_MAZE)
    for step in explore(grid):
        assert original[step.y][step.x] in ("s", "0", "g")


def test_stack_explores_depth_first_order():
    grid = parse_maze(SMALL_MAZE)
    steps = list(explore_with_stack(grid))
    # From (1, 1) the only way on is down; the stack follows one branch.
    assert steps[:3] == [Position(0, 1), Position(1, 1), Position(1, 2)]


def test_large_maze_stack_reaches_goal():
    grid = parse_maze(LARGE_MAZE)
    steps = list(explore_with_stack(grid))
    assert steps[-1] == Position(16, 15)


@pytest.mark.parametrize("explore", [explore_with_stack, explore_with_queue])
def test_maze_without_goal_marks_every_reachable_cell(explore):
    grid = parse_maze(["1111", "s001", "1101", "1111"])
    steps = list(explore(grid))
    assert grid[1][1] == grid[1][2] == grid[2][2] == "."
    assert grid[2][1] == "1"
    assert {Position(0, 1), Position(1, 1), Position(2, 1), Position(2, 2)} == set(steps)


def test_render_without_player():
    grid = parse_maze(SMALL_MAZE)
    assert render(grid).split("\n") == [
        " ".join(row) + " " for row in SMALL_MAZE
    ]


def test_render_with_player():
    grid = parse_maze(SMALL_MAZE)
    lines = render(grid, Position(0, 1)).split("\n")
    assert lines[1].startswith("p ")
    assert lines[0] == " ".join(SMALL_MAZE[0]) + " "
    assert render(grid, Position(0, 1)).count("p") == 1


def test_main_trace_small(capsys):
    assert main(["--maze", "small", "--trace"]) == 0
    out = capsys.readouterr().out
    assert "(0, 1)" in out
    assert "(5, 4)" in out
    assert out.rstrip().endswith(SUCCESS_MESSAGE)


def test_main_draws_large_with_stack(capsys):
    assert main(["--maze", "large", "--delay", "0"]) == 0
    out = capsys.readouterr().out
    assert "p " in out
    assert out.rstrip().endswith(SUCCESS_MESSAGE)


def test_main_queue_small(capsys):
    assert main(["--maze", "small", "--strategy", "queue", "--trace"]) == 0
    out = capsys.readouterr().out
    assert SUCCESS_MESSAGE in out