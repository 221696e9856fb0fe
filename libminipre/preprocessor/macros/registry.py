from collections.abc import Mapping
from typing import Self


class MacrosRegistry(dict[str, str]):
    """Top-level preprocessor mapping of macro names into their replacement text.

    Last definition of an name wins, there is no un-define.
    Registry is read-only while preprocessing, as run works with snapshot of it.
    """

    def define(self, name: str, value: str) -> Self:
        """Define (or redefine) macro, returns registry itself so calls may be chained."""
        self.__setitem__(name, value)
        return self

    def lookup(self, name: str) -> str | None:
        return self.get(name)

    def copy(self) -> "MacrosRegistry":
        return MacrosRegistry(super().copy())


def registry_from_raw_definitions(definitions: Mapping[str, str]) -> MacrosRegistry:
    """Construct new macros registry from given raw definitions (e.g from CLI)."""
    registry = MacrosRegistry()
    for name, value in definitions.items():
        registry.define(name, value)
    return registry
