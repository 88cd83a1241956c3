"""Named-property registry for external observation.

Simulation components expose outputs under slash-separated names such as
``propulsion/engine[0]/power-hp``. The registry stores a getter per name, so
readers always see the current value without the component pushing updates.

Example:
    >>> from motor.properties import PropertyManager
    >>>
    >>> props = PropertyManager()
    >>> props.tie("propulsion/engine[0]/power-hp", lambda: motor.hp)
    >>> props.get_value("propulsion/engine[0]/power-hp")
"""

from collections.abc import Callable
from dataclasses import dataclass, field

from beartype import beartype


@beartype
def indexed_property_name(base: str, index: int) -> str:
    """Build an indexed property name, e.g. ``propulsion/engine[2]``."""
    return f"{base}[{index}]"


@beartype
@dataclass
class PropertyManager:
    """Registry mapping property names to value getters."""

    _getters: dict[str, Callable[[], float]] = field(
        default_factory=dict, init=False, repr=False
    )

    def tie(self, name: str, getter: Callable[[], float]) -> None:
        """Expose a value under ``name``.

        Raises:
            ValueError: If the name is already tied
        """
        if name in self._getters:
            raise ValueError(f"Property '{name}' is already tied")
        self._getters[name] = getter

    def untie(self, name: str) -> None:
        """Remove a tied property. Unknown names are ignored."""
        self._getters.pop(name, None)

    def has(self, name: str) -> bool:
        return name in self._getters

    def get_value(self, name: str) -> float:
        """Read the current value of a property.

        Raises:
            KeyError: If the name is not tied
        """
        if name not in self._getters:
            available = sorted(self._getters)
            raise KeyError(f"Unknown property '{name}'. Available: {available}")
        return self._getters[name]()

    def names(self) -> list[str]:
        return sorted(self._getters)
