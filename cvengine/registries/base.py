from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, Iterable, Iterator, Optional, TypeVar

from cvengine.errors import InvalidParameterError

K = TypeVar("K")
V = TypeVar("V")


@dataclass
class Registry(Generic[K, V]):
    """Small registry mapping config keys (split modes, model families) to factories.

    Typical usage:
        SPLITTERS = Registry[str, SplitterFactory](_name="splitters")

        @SPLITTERS.register("kfold")
        def _kfold(cfg, seed):
            ...

        make = SPLITTERS.require("kfold")

    ``get`` raises ``KeyError`` for programming errors; ``require`` raises
    :class:`InvalidParameterError` for keys that came from user configuration.
    """

    _items: Dict[K, V] = field(default_factory=dict)
    _name: str = "registry"

    def register(self, key: K) -> Callable[[V], V]:
        def deco(value: V) -> V:
            if key in self._items and self._items[key] is not value:
                raise KeyError(f"{self._name}: duplicate registration for {key!r}")
            self._items[key] = value
            return value

        return deco

    def get(self, key: K) -> V:
        if key not in self._items:
            raise KeyError(f"{self._name}: unknown key {key!r}")
        return self._items[key]

    def try_get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        return self._items.get(key, default)

    def require(self, key: K) -> V:
        value = self._items.get(key)
        if value is None:
            raise InvalidParameterError(
                f"Unknown {self._name} key {key!r}. Known: {sorted(map(str, self._items))}"
            )
        return value

    def keys(self) -> Iterable[K]:
        return self._items.keys()

    def __contains__(self, key: K) -> bool:
        return key in self._items

    def __iter__(self) -> Iterator[K]:  # pragma: no cover
        return iter(self._items)
