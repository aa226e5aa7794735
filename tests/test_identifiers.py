"""Tests for the two-word identifier generator."""

import itertools
import random

import pytest

from marfa_gallery.identifiers import (
    ADJECTIVES,
    NOUNS,
    ExhaustedCapacityError,
    TwoWordIDGenerator,
    generate_two_word_id,
    generate_unique_ids,
    get_total_combinations,
    is_valid_two_word_id,
)


class ScriptedRandom(random.Random):
    """Random source whose choice() returns scripted words in order."""

    def __init__(self, picks):
        super().__init__(0)
        self._picks = iter(picks)
        self.calls = 0

    def choice(self, seq):
        self.calls += 1
        word = next(self._picks)
        assert word in seq
        return word


@pytest.fixture
def small_generator():
    return TwoWordIDGenerator(
        adjectives=["abstract", "ancient"], nouns=["bones", "sky"], rng=random.Random(42)
    )


def test_shipped_wordlists_are_clean():
    """No separators, no duplicates, nothing empty."""
    for wordlist in (ADJECTIVES, NOUNS):
        assert wordlist
        assert len(set(wordlist)) == len(wordlist)
        assert all(word and "-" not in word for word in wordlist)


def test_capacity_is_product_of_wordlist_lengths():
    generator = TwoWordIDGenerator()
    assert generator.capacity == len(ADJECTIVES) * len(NOUNS)
    assert get_total_combinations() == len(ADJECTIVES) * len(NOUNS)
    assert get_total_combinations() == get_total_combinations()


def test_generated_ids_are_always_valid():
    generator = TwoWordIDGenerator(rng=random.Random(7))
    for _ in range(500):
        assert generator.is_valid(generator.generate())
    assert is_valid_two_word_id(generate_two_word_id())


def test_small_vocabulary_batch_returns_every_combination(small_generator):
    ids = small_generator.generate_unique_batch(4, set())

    assert len(ids) == 4
    assert set(ids) == {"abstract-bones", "abstract-sky", "ancient-bones", "ancient-sky"}


def test_batch_larger_than_capacity_fails(small_generator):
    with pytest.raises(ExhaustedCapacityError) as exc_info:
        small_generator.generate_unique_batch(5, set())

    assert exc_info.value.requested == 5
    assert exc_info.value.capacity == 4


def test_batch_counts_existing_against_capacity(small_generator):
    existing = {"abstract-bones", "ancient-sky"}

    ids = small_generator.generate_unique_batch(2, existing)
    assert set(ids) == {"abstract-sky", "ancient-bones"}

    with pytest.raises(ExhaustedCapacityError):
        small_generator.generate_unique_batch(3, existing)


def test_exhausted_capacity_is_detected_before_drawing():
    rng = ScriptedRandom([])
    generator = TwoWordIDGenerator(adjectives=["abstract"], nouns=["bones"], rng=rng)

    with pytest.raises(ExhaustedCapacityError):
        generator.generate_unique_batch(1, {"abstract-bones"})
    assert rng.calls == 0


def test_batch_is_distinct_and_disjoint_from_existing():
    generator = TwoWordIDGenerator(rng=random.Random(3))
    existing = set(generator.generate_unique_batch(300, set()))

    ids = generator.generate_unique_batch(200, existing)

    assert len(ids) == 200
    assert len(set(ids)) == 200
    assert not existing & set(ids)
    assert all(generator.is_valid(i) for i in ids)


def test_batch_keeps_acceptance_order_and_skips_repeats():
    rng = ScriptedRandom(
        [
            "ancient", "sky",
            "abstract", "bones",  # in existing
            "ancient", "sky",  # already accepted
            "abstract", "sky",
        ]
    )
    generator = TwoWordIDGenerator(
        adjectives=["abstract", "ancient"], nouns=["bones", "sky"], rng=rng
    )

    ids = generator.generate_unique_batch(2, {"abstract-bones"})

    assert ids == ["ancient-sky", "abstract-sky"]


def test_existing_is_not_modified(small_generator):
    existing = {"abstract-bones"}
    small_generator.generate_unique_batch(3, existing)
    assert existing == {"abstract-bones"}


def test_zero_count_returns_empty_list(small_generator):
    assert small_generator.generate_unique_batch(0, set()) == []
    oversized = {f"w{i}-x" for i in range(10)}
    assert small_generator.generate_unique_batch(0, oversized) == []
    assert generate_unique_ids(0) == []


def test_negative_count_is_rejected(small_generator):
    with pytest.raises(ValueError):
        small_generator.generate_unique_batch(-1, set())


@pytest.mark.parametrize(
    "candidate, expected",
    [
        ("abstract-bones", True),
        ("ancient-sky", True),
        ("abstract_bones", False),
        ("abstract-bones-extra", False),
        ("abstractbones", False),
        ("", False),
        ("-bones", False),
        ("abstract-", False),
        ("bones-abstract", False),
        ("abstract-mesa", False),
        ("Abstract-bones", False),
        (None, False),
        (42, False),
    ],
)
def test_is_valid(small_generator, candidate, expected):
    assert small_generator.is_valid(candidate) is expected


def test_default_wordlists_examples():
    assert is_valid_two_word_id("abstract-bones")
    assert is_valid_two_word_id("sunbaked-prairiedog")
    assert not is_valid_two_word_id("sun-baked-bones")
    assert not is_valid_two_word_id("abstract_bones")


def test_convenience_batch_avoids_existing():
    existing = {f"{a}-{n}" for a, n in itertools.islice(itertools.product(ADJECTIVES, NOUNS), 50)}
    ids = generate_unique_ids(10, existing)
    assert len(set(ids)) == 10
    assert not existing & set(ids)


def test_custom_separator():
    generator = TwoWordIDGenerator(adjectives=["abstract"], nouns=["bones"], separator="_")
    assert generator.generate() == "abstract_bones"
    assert generator.is_valid("abstract_bones")
    assert not generator.is_valid("abstract-bones")


def test_duplicate_entries_are_dropped():
    generator = TwoWordIDGenerator(adjectives=["cosmic", "cosmic", "bold"], nouns=["sky"])
    assert generator.adjectives == ("cosmic", "bold")
    assert generator.capacity == 2


@pytest.mark.parametrize(
    "adjectives, nouns",
    [
        ([], ["sky"]),
        (["bold"], []),
        (["sun-baked"], ["sky"]),
        (["bold"], ["prairie-dog"]),
        ([""], ["sky"]),
    ],
)
def test_invalid_wordlists_are_rejected(adjectives, nouns):
    with pytest.raises(ValueError):
        TwoWordIDGenerator(adjectives=adjectives, nouns=nouns)
