"""Rule tables for the compression pipeline.

Every table is compiled once at import. Group order in ``RULE_SET`` is the
order the pipeline applies them in: markdown structure first, so filler
patterns anchored at line start see plain prose rather than ``## `` or ``- ``
prefixes.
"""

import re
from dataclasses import dataclass

_I = re.IGNORECASE
_IM = re.IGNORECASE | re.MULTILINE


@dataclass(frozen=True)
class Rule:
    """A compiled pattern and the text that replaces each match."""

    pattern: re.Pattern
    replacement: str = ""

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


@dataclass(frozen=True)
class RuleGroup:
    """An ordered group of rules applied one full sweep at a time."""

    name: str
    rules: tuple[Rule, ...]

    def apply(self, text: str) -> str:
        for rule in self.rules:
            text = rule.apply(text)
        return text

    def __len__(self) -> int:
        return len(self.rules)


def _deletions(patterns: list[str], flags: int) -> tuple[Rule, ...]:
    return tuple(Rule(re.compile(p, flags)) for p in patterns)


def _rewrites(pairs: list[tuple[str, str]]) -> tuple[Rule, ...]:
    """Whole-word, case-insensitive phrase -> replacement rules."""
    return tuple(
        Rule(re.compile(rf"\b{re.escape(phrase)}\b", _I), replacement)
        for phrase, replacement in pairs
    )


MODIFIER_WORDS = (
    "very", "really", "just", "simply", "basically", "actually", "literally",
    "obviously", "clearly", "definitely", "certainly", "absolutely", "totally",
    "completely", "entirely", "extremely", "highly",
)

# Comma-set sentence openers that leave the claim intact. Frequency and
# likelihood hedges ("rarely", "unlikely", ...) change the claim and stay.
SENTENCE_ADVERBS = MODIFIER_WORDS + ("evidently", "hopefully", "overall")

STRUCTURE_RULES = RuleGroup("structure", (
    Rule(re.compile(r"<!--[\s\S]*?-->")),
    Rule(re.compile(r"^[-*_]{3,}[ \t]*$", re.M)),
    Rule(re.compile(r"^#{1,6}\s+(.*)$", re.M), r"\1"),
    Rule(re.compile(r"\*{1,3}([^*]+)\*{1,3}"), r"\1"),
    Rule(re.compile(r"_{1,3}([^_]+)_{1,3}"), r"\1"),
    Rule(re.compile(r"```\w*\n?")),
    Rule(re.compile(r"`([^`]+)`"), r"\1"),
    Rule(re.compile(r"^>\s*", re.M)),
    Rule(re.compile(r"^[\t ]*[-*+]\s+", re.M)),
    Rule(re.compile(r"^[\t ]*\d+\.\s+", re.M)),
    # Images before links so "![alt](url)" never degrades to "!alt".
    Rule(re.compile(r"!\[([^\]]*)\]\([^)]+\)"), r"\1"),
    Rule(re.compile(r"\[([^\]]+)\]\([^)]+\)"), r"\1"),
    Rule(re.compile(r"^[ \t]*\[[^\]\n]+\]:.*$", re.M)),
    # Separator rows must go before pipes become spaces.
    Rule(re.compile(r"^\|?[ \t\-:|]+\|[ \t\-:|]*$", re.M)),
    Rule(re.compile(r"\|"), " "),
))

_DOC_NOUNS = r"(?:document|section|guide|page|article|chapter)"
_DOC_VERBS = (
    r"(?:explains|describes|covers|provides|contains|shows|outlines|details"
    r"|discusses|presents|introduces)"
)
_SENTENCE_ADVERBS = "|".join(SENTENCE_ADVERBS)

FILLER_RULES = RuleGroup("filler", _deletions([
    # Document framing, anchored at line start
    rf"^this\s+{_DOC_NOUNS}\s+{_DOC_VERBS}\s+(?:(?:how|what|when|where|why)\s+to|how|what|when|where|why|that)\s+",
    rf"^this\s+{_DOC_NOUNS}\s+{_DOC_VERBS}.*?[.]\s*",
    rf"^in\s+this\s+{_DOC_NOUNS},?\s*",
    r"^the following (?:section|document|guide|list|table|code|example).*?[.:]\s*",
    r"^(?:here|below) (?:is|are) (?:a |an |the )?(?:list|overview|summary|description|example).*?[.:]\s*",
    r"^(?:please )?(?:note|notice|remember) that:?\s*",
    r"^(?:as )?(?:shown|described|explained|mentioned|noted|discussed|seen|stated) (?:above|below|earlier|previously|later),?\s*",
    r"^for more (?:information|details|info),?\s*(?:see|refer to|check|visit|read).*?[.]\s*",
    r"^see (?:the )?(?:following|below|above|also).*?[.]\s*",
    r"^we (?:found|discovered|observed|noticed|determined|concluded) that\s*",
    r"^it (?:is|was|should be|has been) (?:known|noted|observed|understood|recognized|established) that\s*",
], _IM) + (
    # Sentence-opening adverb set off by a comma; any whitespace before it
    # is kept as one space so the previous sentence stays separated.
    Rule(
        re.compile(
            rf"(?:^[ \t]*|(?<=[.!?])\s+)(?:(?:very|really)\s+)?(?:{_SENTENCE_ADVERBS}),\s*",
            _IM,
        ),
        " ",
    ),
) + _deletions([
    # Empty phrases, anywhere
    r"\bfor all intents and purposes\b",
    r"\bat the end of the day\b",
    r"\bas a matter of fact\b",
    r"\bin order to\b",
    r"\bdue to the fact that\b",
    r"\bin the event that\b",
    r"\bat this point in time\b",
    r"\bin the process of\b",
    r"\bfor the purpose of\b",
    r"\bwith regard to\b",
    r"\bwith respect to\b",
    r"\bin terms of\b",
    r"\bon the basis of\b",
    r"\bin light of the fact that\b",
    r"\bit is important to note that\b",
    r"\bit should be noted that\b",
    r"\bit is worth noting that\b",
    r"\bneedless to say\b",
    r"\bin my opinion\b",
    r"\bin my view\b",
    r"\bin my experience\b",
    r"\bas you can see\b",
    r"\bas we can see\b",
    r"\bas mentioned earlier\b",
    r"\bas previously mentioned\b",
    r"\bas noted above\b",
    r"\bas discussed\b",
    r"\bas such\b",
    r"\band so forth\b",
    r"\band so on\b",
    r"\bet cetera\b",
    r"\betc\.\s*",
], _I))

# First word is implied by the second (Purdue OWL)
REDUNDANT_PAIR_RULES = RuleGroup("redundant_pairs", _rewrites([
    ("absolutely essential", "essential"),
    ("absolutely necessary", "necessary"),
    ("actual fact", "fact"),
    ("advance planning", "planning"),
    ("advance warning", "warning"),
    ("all-time record", "record"),
    ("basic fundamentals", "fundamentals"),
    ("basic essentials", "essentials"),
    ("brief summary", "summary"),
    ("closely scrutinize", "scrutinize"),
    ("completely destroyed", "destroyed"),
    ("completely eliminate", "eliminate"),
    ("completely finished", "finished"),
    ("current trend", "trend"),
    ("definite decision", "decision"),
    ("each and every", "each"),
    ("each individual", "each"),
    ("empty space", "space"),
    ("end result", "result"),
    ("exact same", "same"),
    ("final conclusion", "conclusion"),
    ("final outcome", "outcome"),
    ("final result", "result"),
    ("first and foremost", "first"),
    ("foreseeable future", "future"),
    ("former graduate", "graduate"),
    ("free gift", "gift"),
    ("full and complete", "complete"),
    ("future plans", "plans"),
    ("general consensus", "consensus"),
    ("genuinely authentic", "authentic"),
    ("honest truth", "truth"),
    ("important essentials", "essentials"),
    ("initial prototype", "prototype"),
    ("joint collaboration", "collaboration"),
    ("last of all", "last"),
    ("major breakthrough", "breakthrough"),
    ("minor details", "details"),
    ("mutual cooperation", "cooperation"),
    ("new innovation", "innovation"),
    ("new invention", "invention"),
    ("old adage", "adage"),
    ("open trench", "trench"),
    ("original founder", "founder"),
    ("past experience", "experience"),
    ("past history", "history"),
    ("past memories", "memories"),
    ("personal opinion", "opinion"),
    ("planning ahead", "planning"),
    ("positive improvement", "improvement"),
    ("pre-planned", "planned"),
    ("previous experience", "experience"),
    ("primary focus", "focus"),
    ("reason why", "reason"),
    ("refer back", "refer"),
    ("reflect back", "reflect"),
    ("revert back", "revert"),
    ("same exact", "same"),
    ("serious danger", "danger"),
    ("sudden impulse", "impulse"),
    ("sum total", "total"),
    ("terrible tragedy", "tragedy"),
    ("totally destroyed", "destroyed"),
    ("true fact", "fact"),
    ("unexpected surprise", "surprise"),
    ("unique individual", "individual"),
    ("universal panacea", "panacea"),
    ("various different", "different"),
    ("very unique", "unique"),
    ("visual image", "image"),
]))

# Category word restates the adjective (Purdue OWL)
REDUNDANT_CATEGORY_RULES = RuleGroup("redundant_categories", _rewrites([
    ("large in size", "large"),
    ("heavy in weight", "heavy"),
    ("round in shape", "round"),
    ("green in color", "green"),
    ("bright in color", "bright"),
    ("cheap in price", "cheap"),
    ("early in time", "early"),
    ("period of time", "period"),
    ("period in time", "period"),
    ("often times", "often"),
    ("must necessarily", "must"),
]))

# Only when followed by whitespace, so the next word stays intact
MODIFIER_RULES = RuleGroup(
    "modifiers", _deletions([rf"\b{word}\s+" for word in MODIFIER_WORDS], _I)
)

RULE_SET: tuple[RuleGroup, ...] = (
    STRUCTURE_RULES,
    FILLER_RULES,
    REDUNDANT_PAIR_RULES,
    REDUNDANT_CATEGORY_RULES,
    MODIFIER_RULES,
)
