"""
Translation checking domain service.

Pure domain logic - no infrastructure dependencies.
"""

import re
from dataclasses import dataclass

_WHITESPACE = re.compile(r"\s+")
_PARENTHETICAL = re.compile(r"\s*\([^)]*\)\s*")
_PARENTHESES = re.compile(r"[()]")


@dataclass(frozen=True)
class TranslationCheck:
    """Outcome of comparing a learner's answer with the expected one."""

    is_correct: bool
    correct_translation: str
    user_translation: str
    similarity: float


class TranslationChecker:
    """
    Decides whether a learner's answer matches the expected translation.

    Expected answers use two conventions:
    - "/" separates alternatives: "dom / mieszkanie"
    - "(...)" marks an optional part: "(to) run"

    Comparison is case-insensitive and whitespace-normalized.
    """

    def check(self, correct_answer: str, user_answer: str) -> TranslationCheck:
        normalized_user = self.normalize(user_answer)
        variants = self.valid_variants(correct_answer)

        similarity = max(
            (self._similarity(normalized_user, variant) for variant in variants),
            default=0.0,
        )
        return TranslationCheck(
            is_correct=normalized_user in variants,
            correct_translation=correct_answer,
            user_translation=user_answer,
            similarity=round(similarity, 4),
        )

    def valid_variants(self, answer: str) -> list[str]:
        """
        All accepted spellings of an expected answer.

        Each alternative contributes itself without the parenthesized part and,
        when different, itself with only the parentheses removed.
        """
        variants: list[str] = []
        for option in answer.split("/"):
            base = self.normalize(option)
            without_optional = _collapse(_PARENTHETICAL.sub(" ", base))
            with_optional = _collapse(_PARENTHESES.sub("", base))
            for variant in (without_optional, with_optional):
                if variant not in variants:
                    variants.append(variant)
        return variants

    def normalize(self, answer: str) -> str:
        return _collapse(answer.lower())

    def calculate_similarity(self, first: str, second: str) -> float:
        """Levenshtein ratio in [0, 1] between two normalized answers."""
        return self._similarity(self.normalize(first), self.normalize(second))

    def _similarity(self, first: str, second: str) -> float:
        if first == second:
            return 1.0
        if not first or not second:
            return 0.0
        distance = levenshtein_distance(first, second)
        return 1 - distance / max(len(first), len(second))


def levenshtein_distance(first: str, second: str) -> int:
    """Edit distance using a single rolling row."""
    if len(first) < len(second):
        first, second = second, first

    previous = list(range(len(second) + 1))
    for i, left in enumerate(first, start=1):
        current = [i]
        for j, right in enumerate(second, start=1):
            cost = 0 if left == right else 1
            current.append(min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + cost))
        previous = current
    return previous[-1]


def _collapse(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()
