import random

from vocab_practice.domain.common.value_objects import CategoryId, WordId
from vocab_practice.domain.practice import Difficulty, RandomWordPicker, Word


def make_words(count: int) -> list[Word]:
    return [
        Word(
            id=WordId(i),
            polish=f"pl{i}",
            english=f"en{i}",
            category_id=CategoryId(1),
            category_name="A1",
            difficulty=Difficulty.EASY,
        )
        for i in range(1, count + 1)
    ]


def test_pick_from_empty_pool() -> None:
    assert RandomWordPicker().pick([]) is None


def test_pick_returns_pool_member() -> None:
    words = make_words(5)

    assert RandomWordPicker(random.Random(1)).pick(words) in words


def test_sample_is_distinct_and_capped() -> None:
    words = make_words(5)
    picker = RandomWordPicker(random.Random(1))

    sample = picker.sample(words, 3)
    assert len(sample) == 3
    assert len({word.id for word in sample}) == 3

    assert len(picker.sample(words, 50)) == 5
    assert picker.sample(words, 0) == []


def test_seeded_picker_is_deterministic() -> None:
    words = make_words(10)

    first = RandomWordPicker(random.Random(42)).sample(words, 4)
    second = RandomWordPicker(random.Random(42)).sample(words, 4)

    assert [w.id for w in first] == [w.id for w in second]
