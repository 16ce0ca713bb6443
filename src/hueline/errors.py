"""Exception classes for hueline.

Classification itself never fails: a token that matches nothing is simply
NORMAL. The exceptions here signal structural problems, a caller breaking
the engine's contract or the store drifting out of step with the buffer.
Cancellation of a background scan is not an error and raises nothing.
"""

from __future__ import annotations


class HuelineError(Exception):
    """Base exception for all hueline errors.

    Subclass this for specific error categories.
    """

    pass


class ContractError(HuelineError, ValueError):
    """A caller violated a precondition.

    Raised for negative offsets, reversed ranges, or store edits outside
    the current bounds.
    """

    def __init__(self, message: str, start: int | None = None, end: int | None = None) -> None:
        """Initialize contract error with the offending range.

        Args:
            message: Description of the violated precondition
            start: Start offset of the request (optional)
            end: End offset of the request (optional)
        """
        self.message = message
        self.start = start
        self.end = end

        span = ""
        if start is not None or end is not None:
            span = f" [start={start}, end={end}]"
        super().__init__(f"{message}{span}")


class StoreMismatchError(HuelineError):
    """The classification store no longer matches the buffer length.

    Every later offset would be wrong, so this is never tolerated.
    """

    def __init__(self, store_length: int, buffer_length: int) -> None:
        self.store_length = store_length
        self.buffer_length = buffer_length
        super().__init__(
            f"Classification store has {store_length} entries "
            f"but buffer has {buffer_length} characters"
        )


class AdornmentError(HuelineError):
    """Error in adornment registration.

    Raised when an adornment is missing required attributes or its name
    is already taken.
    """

    def __init__(self, adornment_name: str, message: str) -> None:
        """Initialize adornment error.

        Args:
            adornment_name: Name of the failing adornment
            message: Description of the error
        """
        self.adornment_name = adornment_name
        super().__init__(f"Adornment '{adornment_name}': {message}")
