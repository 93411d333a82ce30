"""Markdown-to-plain-text compression pipeline."""

from ctxkit.compression.compress import apply_rules, compress, normalize_whitespace
from ctxkit.compression.rules import (
    FILLER_RULES,
    MODIFIER_RULES,
    REDUNDANT_CATEGORY_RULES,
    REDUNDANT_PAIR_RULES,
    RULE_SET,
    STRUCTURE_RULES,
    Rule,
    RuleGroup,
)

__all__ = [
    "FILLER_RULES",
    "MODIFIER_RULES",
    "REDUNDANT_CATEGORY_RULES",
    "REDUNDANT_PAIR_RULES",
    "RULE_SET",
    "STRUCTURE_RULES",
    "Rule",
    "RuleGroup",
    "apply_rules",
    "compress",
    "normalize_whitespace",
]
