"""Compression statistics: character and token counts before and after."""

from dataclasses import dataclass
from typing import Protocol

import tiktoken
from tabulate import tabulate


class SupportsCount(Protocol):
    def count(self, text: str) -> int: ...


class TokenCounter:
    """Count tokens with a tiktoken encoding (GPT-4 tokenizer by default)."""

    def __init__(self, model: str = "gpt-4"):
        """Initialize token counter.

        Args:
            model: Model name for tiktoken encoding.
        """
        try:
            self._encoding = tiktoken.encoding_for_model(model)
        except KeyError:
            # Fallback to cl100k_base (GPT-4 / GPT-3.5-turbo encoding)
            self._encoding = tiktoken.get_encoding("cl100k_base")
        self.model = model

    def count(self, text: str) -> int:
        """Count tokens in text."""
        return len(self._encoding.encode(text, disallowed_special=()))


@dataclass
class CompressionStats:
    """Before/after sizes for one compressed file."""

    file: str
    original_chars: int
    compressed_chars: int
    original_tokens: int
    compressed_tokens: int
    char_reduction: float  # percent
    token_reduction: float  # percent

    @property
    def tokens_saved(self) -> int:
        return self.original_tokens - self.compressed_tokens


def compute_reduction(original: int, compressed: int) -> float:
    """Percentage reduction from original to compressed (0 for empty input)."""
    if original <= 0:
        return 0.0
    return (original - compressed) / original * 100


def calculate_stats(
    file: str,
    original: str,
    compressed: str,
    counter: SupportsCount,
) -> CompressionStats:
    """Compute statistics for one file.

    Args:
        file: Path or label reported for the file.
        original: Text before compression.
        compressed: Text after compression.
        counter: Token counter.

    Returns:
        CompressionStats for the file.
    """
    original_tokens = counter.count(original)
    compressed_tokens = counter.count(compressed)

    return CompressionStats(
        file=file,
        original_chars=len(original),
        compressed_chars=len(compressed),
        original_tokens=original_tokens,
        compressed_tokens=compressed_tokens,
        char_reduction=compute_reduction(len(original), len(compressed)),
        token_reduction=compute_reduction(original_tokens, compressed_tokens),
    )


def _row(label: str, stat: CompressionStats) -> list[str]:
    return [
        label,
        f"{stat.original_chars:,}",
        f"{stat.compressed_chars:,}",
        f"{stat.original_tokens:,}",
        f"{stat.compressed_tokens:,}",
        f"{stat.char_reduction:.1f}%",
        f"{stat.token_reduction:.1f}%",
    ]


def total_stats(stats: list[CompressionStats]) -> CompressionStats:
    """Sum per-file statistics into one TOTAL entry."""
    original_chars = sum(s.original_chars for s in stats)
    compressed_chars = sum(s.compressed_chars for s in stats)
    original_tokens = sum(s.original_tokens for s in stats)
    compressed_tokens = sum(s.compressed_tokens for s in stats)
    return CompressionStats(
        file="TOTAL",
        original_chars=original_chars,
        compressed_chars=compressed_chars,
        original_tokens=original_tokens,
        compressed_tokens=compressed_tokens,
        char_reduction=compute_reduction(original_chars, compressed_chars),
        token_reduction=compute_reduction(original_tokens, compressed_tokens),
    )


def format_stats(stats: list[CompressionStats], model: str = "gpt-4") -> str:
    """Render statistics as a table, with totals when there is more than one file."""
    headers = [
        "File",
        "Orig chars",
        "Comp chars",
        "Orig tokens",
        "Comp tokens",
        "Char red.",
        "Token red.",
    ]
    rows = [_row(stat.file, stat) for stat in stats]

    total = None
    if len(stats) > 1:
        total = total_stats(stats)
        rows.append(_row(total.file, total))

    lines = [
        "",
        f"Compression Statistics (using {model} tokenizer)",
        tabulate(rows, headers=headers, tablefmt="grid"),
    ]
    if total is not None:
        lines.append(f"Tokens saved: {total.tokens_saved:,}")
    return "\n".join(lines)
