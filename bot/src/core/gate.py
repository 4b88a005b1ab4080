"""Decide whether the assistant should answer a group chat message.

The rules are deliberately conservative: when a message looks like it is
meant for another participant, or is not worth an answer, the assistant
stays quiet. Matching runs on the lowercased text and names are matched as
plain substrings, so a name hidden inside a longer word still counts.
"""
import re
from collections.abc import Iterable
from dataclasses import dataclass

MIN_MESSAGE_LENGTH = 10

TOO_SHORT = "too_short"
DIRECT_ADDRESS = "direct_address"
PRIVATE = "private"
PERSONAL_QUESTION = "personal_question"

# Each pattern captures the addressed token in group 1
DIRECT_ADDRESS_PATTERNS = [
    re.compile(r"^@(\w+)"),
    re.compile(r"^hey\s+(\w+)"),
    re.compile(r"^hi\s+(\w+)"),
    re.compile(r"^hello\s+(\w+)"),
    re.compile(r"^(\w+)[,:]"),
    re.compile(r"^dear\s+(\w+)"),
]

PRIVATE_INDICATORS = [
    re.compile(r"private"),
    re.compile(r"between us"),
    re.compile(r"just between"),
    re.compile(r"don't tell"),
    re.compile(r"keep this"),
    re.compile(r"confidential"),
    re.compile(r"secret"),
]

PERSONAL_QUESTION_PATTERNS = [
    re.compile(r"how are you\?"),
    re.compile(r"how's your"),
    re.compile(r"how was your"),
    re.compile(r"did you have"),
    re.compile(r"are you going"),
    re.compile(r"will you be"),
    re.compile(r"can you help me"),
    re.compile(r"do you have"),
    re.compile(r"what do you think"),
]


@dataclass(frozen=True)
class GateVerdict:
    skip: bool
    reason: str | None = None

    def __bool__(self) -> bool:
        return self.skip


RESPOND = GateVerdict(skip=False)


def _other_names(participant_names: Iterable[str] | None, sender_name: str) -> list[str]:
    sender = sender_name.lower()
    return [n.lower() for n in participant_names or () if n and n.lower() != sender]


def evaluate(
    content: str | None,
    participant_names: Iterable[str] | None,
    sender_name: str | None,
    *,
    min_length: int = MIN_MESSAGE_LENGTH,
) -> GateVerdict:
    """Run the suppression rules in order and report the first one that matches."""
    message = (content or "").strip().lower()
    if len(message) < min_length:
        return GateVerdict(skip=True, reason=TOO_SHORT)

    others = _other_names(participant_names, sender_name or "")

    for pattern in DIRECT_ADDRESS_PATTERNS:
        match = pattern.match(message)
        if not match:
            continue
        addressed = re.sub(r"[@,:]", "", match.group(1)).strip()
        if addressed in others:
            return GateVerdict(skip=True, reason=DIRECT_ADDRESS)

    if any(indicator.search(message) for indicator in PRIVATE_INDICATORS):
        return GateVerdict(skip=True, reason=PRIVATE)

    if any(p.search(message) for p in PERSONAL_QUESTION_PATTERNS):
        if any(name in message for name in others):
            return GateVerdict(skip=True, reason=PERSONAL_QUESTION)

    return RESPOND


def should_skip(
    content: str | None,
    participant_names: Iterable[str] | None,
    sender_name: str | None,
    *,
    min_length: int = MIN_MESSAGE_LENGTH,
) -> bool:
    return evaluate(content, participant_names, sender_name, min_length=min_length).skip
