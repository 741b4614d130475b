"""Tests for the local moderation stages."""

from campus.moderation.config import ModerationConfig
from campus.moderation.filters import (
    HarmfulPatternFilter,
    KeywordFilter,
    NegativeWordScorer,
    build_pattern_check,
    build_toxicity_scorer,
    no_patterns,
    zero_toxicity,
)


# --- Keyword filter ---


def test_keyword_filter_matches_standalone_word():
    kf = KeywordFilter(("ass",))
    assert kf("What an ass.")
    assert kf.first_match("What an ASS!") == "ass"


def test_keyword_filter_ignores_substrings():
    kf = KeywordFilter(("ass", "kill"))
    assert not kf("This class is great")
    assert not kf("Assessment deadlines are on Friday")
    assert not kf("A useful skill for any engineer")


def test_keyword_filter_phrases():
    kf = KeywordFilter(("beat up", "copy-paste"))
    assert kf("they will beat up the mascot")
    assert kf("just copy-paste the essay")
    assert not kf("beat the odds and stay up")


def test_keyword_filter_ascii_word_boundaries():
    kf = KeywordFilter(("kill", "fuck"))
    assert kf.first_match("killé") == "kill"
    assert kf.first_match("àfucké") == "fuck"
    assert not kf("skillful")


def test_keyword_filter_treats_keywords_literally():
    kf = KeywordFilter(("c++",))
    assert not kf("ccc")


def test_default_keywords_do_not_flag_benign_text():
    kf = KeywordFilter(ModerationConfig().blocked_keywords)
    assert kf.first_match("This course builds a useful skill in class.") is None
    assert kf.first_match("I'm going to kill you and your family tonight.") == "kill"


# --- Pattern filter ---


def test_harmful_patterns():
    pf = HarmfulPatternFilter(ModerationConfig().harmful_patterns)
    assert pf("You're such a loser")
    assert pf("CLICK HERE for free money")
    assert not pf("The seminar starts at noon in room 4.")


# --- Toxicity scorer ---


def test_scorer_counts_negative_words():
    scorer = NegativeWordScorer(("hope you", "wish you"), no_patterns)
    assert scorer("I hope you enjoy it, I wish you well") == 2
    assert scorer("Good luck on the exam") == 0


def test_scorer_punctuation_and_caps_bonuses():
    scorer = NegativeWordScorer((), no_patterns)
    assert scorer("Really?!?!?!") == 1
    assert scorer("WHY WOULD ANYONE DO THIS") == 2
    assert scorer("OK") == 0  # too short for the caps bonus
    assert scorer("WHY WOULD ANYONE DO THIS".lower()) == 0


def test_scorer_pattern_bonus():
    scorer = NegativeWordScorer((), lambda text: True)
    assert scorer("anything") == 3


# --- Disabled stages ---


def test_stages_disabled_by_default():
    config = ModerationConfig()
    assert build_pattern_check(config) is no_patterns
    assert build_toxicity_scorer(config) is zero_toxicity
    assert zero_toxicity("YOU ARE A STUPID IDIOT!!!") == 0


def test_stages_enabled_by_config():
    config = ModerationConfig(pattern_filter_enabled=True, sentiment_scoring_enabled=True)
    assert build_pattern_check(config)("click here now")
    assert build_toxicity_scorer(config)("you are a star") >= 1
