import random
import string

import pytest

from drillbook.weasel import distance, evolve, main


def test_distance_identical_is_zero():
    assert distance("weasel", "weasel") == 0


def test_distance_counts_mismatches():
    assert distance("abc", "abd") == 1
    assert distance("abc", "xyz") == 3


def test_distance_length_mismatch_raises():
    with pytest.raises(ValueError):
        distance("abc", "ab")


def test_evolve_ends_with_target():
    generations = list(evolve("weasel", rng=random.Random(7)))
    assert generations[-1] == "weasel"


def test_evolve_generations_are_valid_strings():
    for current in evolve("weasel", rng=random.Random(3)):
        assert len(current) == len("weasel")
        assert set(current) <= set(string.ascii_lowercase)


def test_evolve_is_deterministic_for_seed():
    first = list(evolve("weasel", rng=random.Random(11)))
    second = list(evolve("weasel", rng=random.Random(11)))
    assert first == second


def test_evolve_only_final_matches_target():
    generations = list(evolve("weasel", rng=random.Random(5)))
    assert all(distance(g, "weasel") > 0 for g in generations[:-1])


def test_evolve_rejects_bad_target():
    with pytest.raises(ValueError):
        next(evolve("Weasel"))


def test_evolve_rejects_no_copies():
    with pytest.raises(ValueError):
        next(evolve("weasel", copies=0))


def test_evolve_rejects_bad_mutation():
    with pytest.raises(ValueError):
        next(evolve("weasel", mutation=1.5))


def test_main_prints_target_last(capsys):
    assert main(["ab"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("iteration 0 : ")
    assert lines[-1].endswith(" : ab")


def test_main_rejects_bad_target(capsys):
    assert main(["AB"]) == 1