"""Overlay adornments for hueline.

Adornments override the tokenizer's classification at specific offsets
without taking part in incremental re-tokenization.

Key components:
- Adornment: Protocol for overlay classifiers
- AdornmentRegistry: Ordered, immutable lookup (first override wins)
- AdornmentRegistryBuilder: Mutable construction
- RainbowBrackets: Built-in bracket-depth overlay
"""

from hueline.adornments.builtins import UNMATCHED_STYLE, RainbowBrackets, match_brackets
from hueline.adornments.protocol import Adornment
from hueline.adornments.registry import (
    AdornmentRegistry,
    AdornmentRegistryBuilder,
    create_default_registry,
)

__all__ = [
    "UNMATCHED_STYLE",
    "Adornment",
    "AdornmentRegistry",
    "AdornmentRegistryBuilder",
    "RainbowBrackets",
    "create_default_registry",
    "match_brackets",
]
