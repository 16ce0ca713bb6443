"""Color categories and per-character style records.

A ColorCategory is an abstract role ("keyword", "comment") that an external
theme maps to concrete colors. hueline never resolves categories to pixels.

Thread Safety:
StyleRecord is frozen (immutable) and safe to share across threads.
ColorCategory is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto


class ColorCategory(Enum):
    """Abstract color roles assigned to characters.

    Organized by category:
    - Base roles written by the tokenizer
    - Background roles
    - Unique palette used by adornments (e.g. bracket depth)

    """

    # Base roles
    NORMAL = auto()
    WHITESPACE = auto()
    KEYWORD = auto()
    IDENTIFIER = auto()
    NUMBER = auto()
    STRING = auto()
    COMMENT = auto()
    PARENTHESIS = auto()

    # Backgrounds
    NONE = auto()  # No background override
    ERROR = auto()

    # Unique palette
    UNIQUE_0 = auto()
    UNIQUE_1 = auto()
    UNIQUE_2 = auto()
    UNIQUE_3 = auto()
    UNIQUE_4 = auto()
    UNIQUE_5 = auto()
    UNIQUE_6 = auto()
    UNIQUE_7 = auto()


UNIQUE_COLORS: tuple[ColorCategory, ...] = (
    ColorCategory.UNIQUE_0,
    ColorCategory.UNIQUE_1,
    ColorCategory.UNIQUE_2,
    ColorCategory.UNIQUE_3,
    ColorCategory.UNIQUE_4,
    ColorCategory.UNIQUE_5,
    ColorCategory.UNIQUE_6,
    ColorCategory.UNIQUE_7,
)


def unique_color(index: int) -> ColorCategory:
    """Map an index onto the unique palette, wrapping around.

    Args:
        index: Non-negative palette index (e.g. nesting depth)

    Returns:
        One of the UNIQUE_* categories
    """
    return UNIQUE_COLORS[index % len(UNIQUE_COLORS)]


@dataclass(frozen=True, slots=True)
class StyleRecord:
    """Classification of a single character.

    Attributes:
        foreground: Text color role
        background: Background color role (NONE for no override)

    """

    foreground: ColorCategory = ColorCategory.NORMAL
    background: ColorCategory = ColorCategory.NONE

    def __repr__(self) -> str:
        return f"StyleRecord({self.foreground.name}, {self.background.name})"


# Shared default record (reused, never recreated)
DEFAULT_STYLE: StyleRecord = StyleRecord()

# Records written by the tokenizer, allocated once
WHITESPACE_STYLE = StyleRecord(ColorCategory.WHITESPACE)
KEYWORD_STYLE = StyleRecord(ColorCategory.KEYWORD)
IDENTIFIER_STYLE = StyleRecord(ColorCategory.IDENTIFIER)
NUMBER_STYLE = StyleRecord(ColorCategory.NUMBER)
STRING_STYLE = StyleRecord(ColorCategory.STRING)
COMMENT_STYLE = StyleRecord(ColorCategory.COMMENT)
PARENTHESIS_STYLE = StyleRecord(ColorCategory.PARENTHESIS)
NORMAL_STYLE = DEFAULT_STYLE


__all__ = [
    "COMMENT_STYLE",
    "DEFAULT_STYLE",
    "IDENTIFIER_STYLE",
    "KEYWORD_STYLE",
    "NORMAL_STYLE",
    "NUMBER_STYLE",
    "PARENTHESIS_STYLE",
    "STRING_STYLE",
    "UNIQUE_COLORS",
    "WHITESPACE_STYLE",
    "ColorCategory",
    "StyleRecord",
    "unique_color",
]
