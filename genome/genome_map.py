"""Genome map: what the positions of a genome mean.

The breeding code treats genes as opaque symbols. A species' genome map is
where meaning is attached: each named property reads one or more gene
positions and converts the symbols into a value (a size, a colour index,
whatever the consuming code needs).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Sequence, Tuple

from genome.exceptions import GenomeMapError

Converter = Callable[[str], Any]


@dataclass(frozen=True)
class GenomeProperty:
    """A named property read from fixed gene positions."""

    name: str
    positions: Tuple[int, ...]
    converter: Converter

    def read(self, genes: str) -> Any:
        for index in self.positions:
            if index >= len(genes):
                raise GenomeMapError(
                    f"Property '{self.name}' reads position {index} of a genome of length {len(genes)}"
                )
        return self.converter("".join(genes[i] for i in self.positions))


class GenomeMap:
    """Registry of the properties encoded in a species' genome."""

    def __init__(self) -> None:
        self._properties: Dict[str, GenomeProperty] = {}

    def add_property(
        self,
        name: str,
        positions: Sequence[int],
        converter: Converter = str,
    ) -> "GenomeMap":
        """Register a property.

        Args:
            name: Property name, unique within the map
            positions: Gene positions the property reads, in order
            converter: Turns the concatenated symbols into the property value

        Returns:
            This map, so registrations can be chained
        """
        if name in self._properties:
            raise GenomeMapError(f"Property '{name}' already registered")
        if not positions:
            raise GenomeMapError(f"Property '{name}' must read at least one position")
        if any(p < 0 for p in positions):
            raise GenomeMapError(f"Property '{name}' has a negative position")
        self._properties[name] = GenomeProperty(name, tuple(positions), converter)
        return self

    @property
    def property_names(self) -> List[str]:
        return list(self._properties)

    def has_property(self, name: str) -> bool:
        return name in self._properties

    def get_property(self, name: str, genes: str) -> Any:
        try:
            prop = self._properties[name]
        except KeyError:
            raise GenomeMapError(f"Unknown genome property '{name}'") from None
        return prop.read(genes)

    def read_all(self, genes: str) -> Dict[str, Any]:
        """Read every registered property from ``genes``."""
        return {name: prop.read(genes) for name, prop in self._properties.items()}
