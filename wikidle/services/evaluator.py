"""
Guess Evaluator

Implements the Wordle letter evaluation algorithm. Everything here is a
pure function and safe to call from any thread.
"""

from collections import Counter
from typing import Dict, Iterable, List, Optional

from ..models.round import Guess, LetterResult, LetterStatus

_STATUS_PRIORITY = {
    LetterStatus.ABSENT: 0,
    LetterStatus.PRESENT: 1,
    LetterStatus.CORRECT: 2,
}


def evaluate(guess: str, target: str) -> List[LetterResult]:
    """
    Scores a guess against the target word position by position.

    Exact matches are resolved first and consume their letter, so a
    misplaced copy of the same letter can never claim it. Remaining
    positions then take letters from what is left of the target, left to
    right.

    Args:
        guess: Normalized guess
        target: Target lemma of the same length

    Returns:
        One LetterResult per position

    Raises:
        ValueError: If guess and target differ in length
    """
    if len(guess) != len(target):
        raise ValueError(f"Guess length {len(guess)} does not match target length {len(target)}")

    statuses: List[Optional[LetterStatus]] = [None] * len(target)
    remaining = Counter()

    # First pass: exact position matches
    for i, (guessed, expected) in enumerate(zip(guess, target)):
        if guessed == expected:
            statuses[i] = LetterStatus.CORRECT
        else:
            remaining[expected] += 1

    # Second pass: misplaced letters, consuming the remaining multiset
    for i, guessed in enumerate(guess):
        if statuses[i] is not None:
            continue
        if remaining[guessed] > 0:
            statuses[i] = LetterStatus.PRESENT
            remaining[guessed] -= 1
        else:
            statuses[i] = LetterStatus.ABSENT

    return [LetterResult(letter, status) for letter, status in zip(guess, statuses)]


def summarize_letters(guesses: Iterable[Guess]) -> Dict[str, str]:
    """
    Best status seen for every guessed letter, for keyboard display.

    Status can only progress in priority order: absent < present < correct.
    """
    letter_status: Dict[str, LetterStatus] = {}
    for guess in guesses:
        for result in guess.evaluation:
            current = letter_status.get(result.letter)
            if current is None or _STATUS_PRIORITY[result.status] > _STATUS_PRIORITY[current]:
                letter_status[result.letter] = result.status
    return {letter: status.value for letter, status in letter_status.items()}
