"""Dictionnaire ordonné indexé par position.

Les sections d'un document et les lignes d'une section doivent garder
leur ordre d'insertion tout en restant accessibles par clé et par
position. IndexedOrderedMap associe une liste de clés, une liste de
valeurs et un index clé -> position, maintenus synchronisés à chaque
insertion et suppression.
"""

from collections.abc import Hashable, Iterator, MutableMapping
from typing import Generic, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class IndexedOrderedMap(MutableMapping[K, V], Generic[K, V]):
    """Mapping ordonné avec accès O(1) par clé et par position.

    La réaffectation d'une clé existante conserve sa position.
    La suppression décale les positions suivantes (O(n)).

    Example:
        >>> entries = IndexedOrderedMap()
        >>> entries["host"] = "localhost"
        >>> entries["port"] = "8080"
        >>> entries.value_at(1)
        '8080'
        >>> entries.position("host")
        0
    """

    def __init__(self) -> None:
        self._keys: list[K] = []
        self._values: list[V] = []
        self._index: dict[K, int] = {}

    def __getitem__(self, key: K) -> V:
        return self._values[self._index[key]]

    def __setitem__(self, key: K, value: V) -> None:
        position = self._index.get(key)
        if position is None:
            self._index[key] = len(self._keys)
            self._keys.append(key)
            self._values.append(value)
        else:
            self._values[position] = value

    def __delitem__(self, key: K) -> None:
        position = self._index.pop(key)
        del self._keys[position]
        del self._values[position]
        for shifted in range(position, len(self._keys)):
            self._index[self._keys[shifted]] = shifted

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __iter__(self) -> Iterator[K]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        pairs = ", ".join(
            f"{key!r}: {value!r}"
            for key, value in zip(self._keys, self._values)
        )
        return f"{type(self).__name__}({{{pairs}}})"

    def clear(self) -> None:
        self._keys.clear()
        self._values.clear()
        self._index.clear()

    def position(self, key: K) -> int:
        """Retourne la position d'une clé.

        Raises:
            KeyError: Si la clé est absente.
        """
        return self._index[key]

    def key_at(self, position: int) -> K:
        """Retourne la clé à la position donnée (index négatifs admis)."""
        return self._keys[position]

    def value_at(self, position: int) -> V:
        """Retourne la valeur à la position donnée (index négatifs admis)."""
        return self._values[position]

    def item_at(self, position: int) -> tuple[K, V]:
        """Retourne le couple (clé, valeur) à la position donnée."""
        return self._keys[position], self._values[position]
