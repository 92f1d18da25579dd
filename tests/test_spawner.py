import random

from ninja_attack.spawner import MonsterSpawner


def test_rows_keep_monster_fully_on_screen():
    spawner = MonsterSpawner(random.Random(1))
    for _ in range(500):
        y = spawner.random_y(600, 80)
        assert 40 <= y <= 560


def test_durations_within_range():
    spawner = MonsterSpawner(random.Random(2))
    for _ in range(500):
        assert 2.0 <= spawner.random_duration() <= 4.0


def test_plan_crosses_from_right_to_left_on_one_row():
    spawner = MonsterSpawner(random.Random(3))
    plan = spawner.plan((400, 600), (54, 80))
    assert plan.start.x == 400 + 27
    assert plan.end.x == -27
    assert plan.start.y == plan.end.y
    assert 2.0 <= plan.duration <= 4.0


def test_seeded_spawners_agree():
    a = MonsterSpawner(random.Random(42)).plan((400, 600), (54, 80))
    b = MonsterSpawner(random.Random(42)).plan((400, 600), (54, 80))
    assert a == b
