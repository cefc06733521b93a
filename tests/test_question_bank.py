import random

import pytest

from interview_core.errors import ValidationError
from interview_core.models import Category
from interview_core.services import question_bank


def test_sample_returns_distinct_questions_from_the_category_pool():
    picked = question_bank.sample(Category.BEHAVIORAL, 5, rng=random.Random(7))

    assert len(picked) == 5
    assert len(set(picked)) == 5
    assert set(picked) <= set(question_bank.pool(Category.BEHAVIORAL))


def test_sample_is_reproducible_with_the_same_seed():
    a = question_bank.sample("technical", 5, rng=random.Random(42))
    b = question_bank.sample("technical", 5, rng=random.Random(42))
    assert a == b


def test_sample_clamps_to_pool_size():
    pool = question_bank.pool(Category.SYSTEM_DESIGN)
    picked = question_bank.sample(Category.SYSTEM_DESIGN, 50, rng=random.Random(1))

    assert len(picked) == len(pool)
    assert sorted(picked) == sorted(pool)


def test_sample_with_non_positive_count_is_empty():
    assert question_bank.sample(Category.TECHNICAL, 0) == []
    assert question_bank.sample(Category.TECHNICAL, -3) == []


def test_sample_does_not_reorder_the_catalog():
    before = question_bank.pool(Category.TECHNICAL)
    question_bank.sample(Category.TECHNICAL, 10, rng=random.Random(3))
    assert question_bank.pool(Category.TECHNICAL) == before


def test_unknown_category_is_a_validation_error():
    with pytest.raises(ValidationError):
        question_bank.sample("cooking", 3)


def test_every_category_has_a_pool():
    assert question_bank.categories() == list(Category)
    for category in Category:
        assert len(question_bank.pool(category)) == 10
