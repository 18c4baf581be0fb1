"""Directory-name classification rules.

A project directory belongs to a model when the model's pattern occurs
anywhere in its name. Rules are an explicit ordered tuple: the first rule
whose pattern is contained in the name decides, later rules are never
consulted. Keeping priority in data (not in branches) lets it be read,
tested, and swapped independently of the scanner.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import StrEnum

from projdash.errors import ConfigurationError


class Category(StrEnum):
    """Known model keys. Declaration order is classification priority."""

    GEMINI_3_PRO = "gemini3pro"
    CLAUDE_45_THINKING = "claude4.5thinking"
    GLM_46 = "glm4.6"
    GPT_OSS_120B = "gptoss120B"
    GPT_51_MEDIUM = "gpt5.1medium"


@dataclass(frozen=True, slots=True)
class Rule:
    """Substring *pattern* that assigns *key* to a directory name."""

    pattern: str
    key: str


DEFAULT_RULES: tuple[Rule, ...] = tuple(Rule(c.value, c) for c in Category)

LABELS: Mapping[str, str] = {
    Category.GEMINI_3_PRO: "Gemini-3-Pro",
    Category.CLAUDE_45_THINKING: "Claude-4.5-Thinking",
    Category.GLM_46: "GLM-4.6",
    Category.GPT_OSS_120B: "GPT-OSS-120B",
    Category.GPT_51_MEDIUM: "GPT-5.1-Medium",
}


def _check_labels(labels: Mapping[str, str]) -> None:
    # label -> key lookups are only unambiguous while labels are unique
    seen: dict[str, str] = {}
    for key, label in labels.items():
        if label in seen:
            msg = f"Category label {label!r} is shared by {seen[label]!r} and {key!r}"
            raise ConfigurationError(msg)
        if not label or "/" in label:
            msg = f"Category label {label!r} for {key!r} is not a single path segment"
            raise ConfigurationError(msg)
        seen[label] = key


_check_labels(LABELS)


def classify(name: str, rules: Iterable[Rule] = DEFAULT_RULES) -> str | None:
    """Return the key of the first rule whose pattern occurs in *name*.

    Matching is plain substring containment, neither anchored nor
    case-folded. Names matching no rule return ``None``; that is an
    ordinary outcome, not an error.
    """
    for rule in rules:
        if rule.pattern in name:
            return rule.key
    return None


def format_category(key: str) -> str:
    """Display label for *key*; unknown keys are returned unchanged."""
    return LABELS.get(key, key)


def parse_label(label: str, keys: Iterable[str]) -> str | None:
    """Inverse of ``format_category`` restricted to *keys*.

    Returns the key in *keys* whose label equals *label*, or ``None``.
    """
    for key in keys:
        if format_category(key) == label:
            return key
    return None
