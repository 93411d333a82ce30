"""
ctxkit: context kit for LLM documentation

Pre-compress markdown documentation into dense plain text so it costs fewer
tokens in a model's context window.
"""

from ctxkit.compression import compress

__version__ = "0.1.0"

__all__ = ["compress", "__version__"]
