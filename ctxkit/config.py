"""Runtime settings read from the environment (and ``.env`` via python-dotenv)."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_TOKENIZER_MODEL = "gpt-4"
DEFAULT_LOG_LEVEL = "WARNING"


def _int_from_env(name: str) -> int | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")
    # 0 means no limit
    return value if value > 0 else None


@dataclass(frozen=True)
class Settings:
    """ctxkit settings."""

    tokenizer_model: str = DEFAULT_TOKENIZER_MODEL
    max_input_chars: int | None = None  # skip larger files in batch runs
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "Settings":
        """Build settings from CTXKIT_* environment variables.

        Args:
            dotenv: Load a ``.env`` file first (existing variables win).

        Returns:
            Settings instance.
        """
        if dotenv:
            load_dotenv()
        return cls(
            tokenizer_model=os.getenv("CTXKIT_TOKENIZER_MODEL") or DEFAULT_TOKENIZER_MODEL,
            max_input_chars=_int_from_env("CTXKIT_MAX_INPUT_CHARS"),
            log_level=(os.getenv("CTXKIT_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
        )
