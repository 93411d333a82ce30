"""Rule-based markdown compression.

Pure algorithmic approach - no ML/LLM required. The same input always yields
the same output and nothing is kept between calls.
"""

import re

from ctxkit.compression.rules import RULE_SET, RuleGroup

_WHITESPACE = re.compile(r"\s+")


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs (newlines, tabs, spaces) to one space and trim."""
    return _WHITESPACE.sub(" ", text).strip()


def apply_rules(text: str, rule_set: tuple[RuleGroup, ...] = RULE_SET) -> str:
    """Run each rule group over the text in order, without the final collapse."""
    for group in rule_set:
        text = group.apply(text)
    return text


def compress(markdown: str) -> str:
    """Compress markdown by removing formatting while preserving information.

    Args:
        markdown: Markdown source (any string).

    Returns:
        Plain text with markdown syntax, filler phrases, redundant wording
        and low-information modifiers removed, whitespace collapsed.
    """
    if not markdown:
        return ""
    return normalize_whitespace(apply_rules(markdown))
