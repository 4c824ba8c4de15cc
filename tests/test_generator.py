"""
Tests for level configuration and deterministic level generation.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from watersort.solver import (
    Difficulty,
    Layout,
    LevelConfig,
    SeededRandom,
    basic_solved_layout,
    generate_layout,
    has_legal_move,
    is_acceptable,
    is_won,
)


def test_level_config_presets():
    normal = LevelConfig.for_difficulty(Difficulty.NORMAL, seed=1)
    hard = LevelConfig.for_difficulty("hard", seed=1)
    expert = LevelConfig.for_difficulty(Difficulty.EXPERT, seed=1)

    assert (normal.colors, normal.capacity, normal.extra_empty) == (5, 4, 2)
    assert (hard.colors, hard.capacity, hard.extra_empty) == (6, 5, 1)
    assert (expert.colors, expert.capacity, expert.extra_empty) == (7, 5, 1)
    assert hard.difficulty is Difficulty.HARD
    assert normal.tube_count == 7


def test_level_config_validation():
    with pytest.raises(ValueError):
        LevelConfig(seed=1, colors=0)
    with pytest.raises(ValueError):
        LevelConfig(seed=1, colors=3, capacity=0)
    with pytest.raises(ValueError):
        LevelConfig(seed=1, colors=3, extra_empty=-1)
    with pytest.raises(ValueError):
        LevelConfig(seed=1, colors=3, difficulty="impossible")


def test_level_config_next_level_and_dict():
    config = LevelConfig(seed=41, colors=6, capacity=5, extra_empty=1, difficulty="hard")

    assert config.next_level().seed == 42
    assert config.next_level().colors == 6
    assert LevelConfig.from_dict(config.to_dict()) == config


def test_seeded_random_is_deterministic():
    a = SeededRandom(123)
    b = SeededRandom(123)
    assert [a.next() for _ in range(5)] == [b.next() for _ in range(5)]
    assert SeededRandom(124).next() != SeededRandom(123).next()


def test_seeded_random_bounds_and_shuffle():
    rng = SeededRandom(9)
    assert all(0 <= rng.next_below(7) < 7 for _ in range(200))

    items = list(range(20))
    rng.shuffle(items)
    assert sorted(items) == list(range(20))

    with pytest.raises(ValueError):
        rng.next_below(0)


def test_generation_is_deterministic():
    config = LevelConfig(seed=2024, colors=5, capacity=4, extra_empty=2)
    assert generate_layout(config) == generate_layout(config)


def test_different_seeds_give_different_layouts():
    a = generate_layout(LevelConfig(seed=1, colors=5, capacity=4, extra_empty=2))
    b = generate_layout(LevelConfig(seed=2, colors=5, capacity=4, extra_empty=2))
    assert a != b


def test_layout_shape():
    config = LevelConfig(seed=5, colors=6, capacity=5, extra_empty=1)
    layout = generate_layout(config)

    assert layout.tube_count == config.tube_count
    assert all(len(tube) == config.capacity for tube in layout.tubes[:config.colors])
    assert all(len(tube) == 0 for tube in layout.tubes[config.colors:])


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_generated_layouts_pass_acceptance(difficulty):
    for seed in range(25):
        config = LevelConfig.for_difficulty(difficulty, seed)
        layout = generate_layout(config)

        counts = layout.color_counts()
        assert counts == {color: config.capacity for color in range(config.colors)}
        assert not is_won(layout, config.capacity)
        assert has_legal_move(layout, config.capacity)


def test_fallback_to_solved_layout():
    """A single color can only ever be dealt solved, so every attempt is rejected."""
    config = LevelConfig(seed=3, colors=1, capacity=4, extra_empty=1)
    layout = generate_layout(config)

    assert layout == basic_solved_layout(config)
    assert layout.to_list() == [[0, 0, 0, 0], []]
    assert is_won(layout, config.capacity)


def test_is_acceptable_rejections():
    config = LevelConfig(seed=1, colors=2, capacity=2, extra_empty=0)

    # already won
    assert not is_acceptable(Layout.from_lists([[0, 0], [1, 1]]), config)
    # no legal pour
    assert not is_acceptable(Layout.from_lists([[0, 1], [1, 0]]), config)
    # wrong color counts
    assert not is_acceptable(Layout.from_lists([[0, 0], [0, 1]]), config)
    # unknown color id
    assert not is_acceptable(Layout.from_lists([[0, 2], [2, 0]]), config)

    relaxed = LevelConfig(seed=1, colors=2, capacity=2, extra_empty=1)
    assert is_acceptable(Layout.from_lists([[0, 1], [1, 0], []]), relaxed)
