"""Ordered keyword rules for classifying free text.

Every rule is evaluated and the matches are collected in rule order; the
first matching rule wins. Keywords match as lowercase substrings.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class KeywordRule(Generic[T]):
    keywords: tuple[str, ...]
    result: T

    def matches(self, text_lower: str) -> bool:
        return any(keyword in text_lower for keyword in self.keywords)


def matching_results(text: str, rules: Sequence[KeywordRule[T]]) -> list[T]:
    """Results of every rule that matches *text*, in rule order."""
    text_lower = text.lower()
    return [rule.result for rule in rules if rule.matches(text_lower)]


def resolve(text: str, rules: Sequence[KeywordRule[T]], default: T) -> T:
    matches = matching_results(text, rules)
    return matches[0] if matches else default
