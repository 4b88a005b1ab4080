import pytest

from core.gate import (
    DIRECT_ADDRESS,
    PERSONAL_QUESTION,
    PRIVATE,
    TOO_SHORT,
    evaluate,
    should_skip,
)

PARTICIPANTS = ["Alice", "Bob"]


# --- trivial length ---


@pytest.mark.parametrize("content", ["ok", "thanks", "lol", "  sure!   ", "Hey Alice", ""])
def test_short_messages_are_skipped(content):
    assert should_skip(content, PARTICIPANTS, "Bob") is True


def test_short_check_wins_over_everything():
    verdict = evaluate("secret", PARTICIPANTS, "Bob")
    assert verdict.skip is True
    assert verdict.reason == TOO_SHORT


def test_none_content_is_skipped():
    assert should_skip(None, None, None) is True


def test_length_uses_trimmed_text():
    assert should_skip("   123456789   ", [], "Bob") is True
    assert should_skip("1234567890", [], "Bob") is False


# --- direct address ---


def test_hey_other_participant():
    verdict = evaluate("Hey Alice, are you free?", PARTICIPANTS, "Bob")
    assert verdict.skip is True
    assert verdict.reason == DIRECT_ADDRESS


def test_self_address_does_not_skip():
    assert should_skip("Hey Bob, are you free?", PARTICIPANTS, "Bob") is False


def test_at_mention_other_participant():
    assert should_skip("@alice did you see the game", PARTICIPANTS, "Bob") is True


@pytest.mark.parametrize("prefix", ["Alice,", "Alice:", "hi alice", "hello ALICE", "dear Alice"])
def test_address_prefixes(prefix):
    assert should_skip(f"{prefix} look at this tomorrow", PARTICIPANTS, "Bob") is True


def test_address_to_unknown_name_responds():
    assert should_skip("Hey Charlie, what is the capital of Peru", PARTICIPANTS, "Bob") is False


def test_sender_name_compared_case_insensitively():
    assert should_skip("hey alice, are you free?", PARTICIPANTS, "ALICE") is False


def test_greeting_without_known_name_responds():
    assert should_skip("Hello everyone, what time is it in Tokyo", PARTICIPANTS, "Bob") is False


# --- privacy indicators ---


def test_privacy_rule():
    verdict = evaluate("This is between us, don't tell anyone", [], "Bob")
    assert verdict.skip is True
    assert verdict.reason == PRIVATE


@pytest.mark.parametrize(
    "content",
    [
        "this is private stuff ok",
        "just between the two of them",
        "please keep this quiet",
        "the report is confidential",
        "can you keep a secret",
    ],
)
def test_privacy_indicators(content):
    assert should_skip(content, PARTICIPANTS, "Bob") is True


# --- personal questions ---


def test_personal_question_naming_other_participant():
    verdict = evaluate("What do you think, Alice?", PARTICIPANTS, "Bob")
    assert verdict.skip is True
    assert verdict.reason == PERSONAL_QUESTION


def test_personal_question_without_other_name_responds():
    assert should_skip("What do you think, Alice?", ["Bob"], "Bob") is False
    assert should_skip("What do you think about Rust?", PARTICIPANTS, "Bob") is False


def test_personal_question_naming_only_sender_responds():
    assert should_skip("can you help me, bob is stuck", PARTICIPANTS, "Bob") is False


def test_name_substring_inside_word_counts():
    # "al" is found inside "really"
    assert should_skip("do you have a really good recipe", ["Al", "Bob"], "Bob") is True


def test_name_without_personal_question_responds():
    assert should_skip("I told alice about the python release", PARTICIPANTS, "Bob") is False


# --- general ---


def test_group_question_responds():
    verdict = evaluate("What is the best way to learn Python?", PARTICIPANTS, "Bob")
    assert verdict.skip is False
    assert verdict.reason is None
    assert not verdict


def test_deterministic():
    args = ("Hey Alice, are you free?", PARTICIPANTS, "Bob")
    assert evaluate(*args) == evaluate(*args)


def test_custom_min_length():
    assert should_skip("short msg", [], "Bob", min_length=5) is False
