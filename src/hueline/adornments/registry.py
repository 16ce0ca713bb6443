"""Adornment registry for ordered overlay lookup.

Adornments are consulted in registration order; the first override wins.

Thread Safety:
AdornmentRegistry is immutable after creation. The adornments it holds
carry their own state and are driven from the engine owner's thread.

Example:
    >>> builder = AdornmentRegistryBuilder()
    >>> builder.register(RainbowBrackets(buffer))
    >>> registry = builder.build()
    >>> registry.query(4)
    StyleRecord(UNIQUE_0, NONE)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hueline.errors import AdornmentError

if TYPE_CHECKING:
    from hueline.adornments.protocol import Adornment
    from hueline.buffer import BufferSource
    from hueline.colors import StyleRecord
    from hueline.events import BufferEvent


class AdornmentRegistry:
    """Immutable, ordered collection of adornments.

    Use AdornmentRegistryBuilder to create instances.
    """

    __slots__ = ("_adornments", "_by_name")

    def __init__(self, adornments: tuple[Adornment, ...] = ()) -> None:
        self._adornments = adornments
        self._by_name = {a.name: a for a in adornments}

    def query(self, offset: int) -> StyleRecord | None:
        """First override any adornment reports for offset."""
        for adornment in self._adornments:
            style = adornment.query(offset)
            if style is not None:
                return style
        return None

    def notify(self, event: BufferEvent) -> None:
        """Forward a buffer event to every adornment, in order."""
        for adornment in self._adornments:
            adornment.notify(event)

    def get(self, name: str) -> Adornment | None:
        return self._by_name.get(name)

    @property
    def names(self) -> tuple[str, ...]:
        """Registered names in lookup order."""
        return tuple(a.name for a in self._adornments)

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self._adornments)


class AdornmentRegistryBuilder:
    """Mutable builder for AdornmentRegistry.

    Example:
        >>> registry = AdornmentRegistryBuilder().register(RainbowBrackets(buf)).build()
    """

    __slots__ = ("_adornments", "_names")

    def __init__(self) -> None:
        self._adornments: list[Adornment] = []
        self._names: set[str] = set()

    def register(self, adornment: Adornment) -> AdornmentRegistryBuilder:
        """Register an adornment after the ones already present.

        Args:
            adornment: Object implementing the Adornment protocol

        Returns:
            Self for chaining

        Raises:
            AdornmentError: If the adornment is incomplete or its name is taken
        """
        name = getattr(adornment, "name", None)
        if not isinstance(name, str) or not name:
            raise AdornmentError(type(adornment).__name__, "missing 'name' attribute")

        for method in ("query", "notify"):
            if not callable(getattr(adornment, method, None)):
                raise AdornmentError(name, f"missing '{method}' method")

        if name in self._names:
            raise AdornmentError(name, "already registered")

        self._names.add(name)
        self._adornments.append(adornment)
        return self

    def build(self) -> AdornmentRegistry:
        """Build immutable registry from registered adornments."""
        return AdornmentRegistry(tuple(self._adornments))

    def __len__(self) -> int:
        return len(self._adornments)


def create_default_registry(buffer: BufferSource) -> AdornmentRegistry:
    """Registry with the built-in adornments for buffer.

    Currently: rainbow brackets.
    """
    from hueline.adornments.builtins.rainbow import RainbowBrackets

    return AdornmentRegistryBuilder().register(RainbowBrackets(buffer)).build()


__all__ = ["AdornmentRegistry", "AdornmentRegistryBuilder", "create_default_registry"]
