import dataclasses

import pytest

from consistency_linter.whitelists import (
    ACCEPTED_ABBREVIATION,
    COMMON_WORD,
    DEFAULT_ACCEPTED_ABBREVIATIONS,
    DEFAULT_COMMON_WORDS,
    DEFAULT_WHITELISTS,
)


def test_default_sets_are_disjoint():
    assert DEFAULT_COMMON_WORDS.isdisjoint(DEFAULT_ACCEPTED_ABBREVIATIONS)


def test_classify_checks_common_words_first():
    assert DEFAULT_WHITELISTS.classify("get") == COMMON_WORD
    assert DEFAULT_WHITELISTS.classify("URL") == ACCEPTED_ABBREVIATION
    assert DEFAULT_WHITELISTS.classify("usr") is None
    assert not DEFAULT_WHITELISTS.suppresses("usr")


def test_extend_returns_new_instance():
    extended = DEFAULT_WHITELISTS.extend(abbreviations=["usr", " Cfg "])

    assert extended.suppresses("usr")
    assert extended.classify("cfg") == ACCEPTED_ABBREVIATION
    assert not DEFAULT_WHITELISTS.suppresses("usr")


def test_extend_keeps_sets_disjoint():
    extended = DEFAULT_WHITELISTS.extend(common_words=["api"], abbreviations=["api"])

    assert extended.classify("api") == COMMON_WORD
    assert "api" not in extended.accepted_abbreviations
    assert extended.common_words.isdisjoint(extended.accepted_abbreviations)


def test_whitelists_are_read_only():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_WHITELISTS.common_words = frozenset()
