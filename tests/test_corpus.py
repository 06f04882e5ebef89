"""Tests for app.corpus."""

import random

import pytest

from app.corpus import ExerciseCategory, sample, texts_for


class TestTextsFor:
    @pytest.mark.parametrize("category", list(ExerciseCategory))
    def test_every_category_has_at_least_three_texts(self, category):
        texts = texts_for(category)
        assert len(texts) >= 3
        assert all(isinstance(t, str) and t for t in texts)

    def test_accepts_raw_value(self):
        """String values map onto the enum."""
        assert texts_for("code") == texts_for(ExerciseCategory.CODE)

    def test_unknown_category_is_a_programming_error(self):
        with pytest.raises(ValueError):
            texts_for("poetry")


class TestSample:
    @pytest.mark.parametrize("category", list(ExerciseCategory))
    def test_sample_comes_from_category_pool(self, category):
        assert sample(category) in texts_for(category)

    def test_seeded_rng_is_deterministic(self):
        a = sample(ExerciseCategory.QUOTES, random.Random(7))
        b = sample(ExerciseCategory.QUOTES, random.Random(7))
        assert a == b

    def test_all_texts_reachable(self):
        rng = random.Random(0)
        seen = {sample(ExerciseCategory.TECHNICAL, rng) for _ in range(200)}
        assert seen == set(texts_for(ExerciseCategory.TECHNICAL))
