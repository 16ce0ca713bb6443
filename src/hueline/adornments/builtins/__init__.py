"""Built-in adornments.

- RainbowBrackets: depth-colored bracket pairs, error background for strays
"""

from hueline.adornments.builtins.rainbow import UNMATCHED_STYLE, RainbowBrackets, match_brackets

__all__ = ["UNMATCHED_STYLE", "RainbowBrackets", "match_brackets"]
