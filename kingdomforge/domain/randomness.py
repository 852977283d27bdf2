"""Random sources used by the setup generator."""

from __future__ import annotations

from abc import ABC, abstractmethod
from random import Random
from typing import MutableSequence, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(ABC):
    """Sampling primitives the generator needs."""

    @abstractmethod
    def randrange(self, stop: int) -> int:
        """Return a uniform integer in ``[0, stop)``."""

    @abstractmethod
    def shuffle(self, items: MutableSequence[T]) -> None:
        """Permute ``items`` in place, uniformly."""

    @abstractmethod
    def sample(self, items: Sequence[T], k: int) -> list[T]:
        """Return ``k`` distinct elements of ``items`` without replacement."""

    def choice(self, items: Sequence[T]) -> T:
        if not items:
            raise IndexError("Cannot choose from an empty sequence")
        return items[self.randrange(len(items))]


class StdlibRandomSource(RandomSource):
    """Default behaviour: delegate to :class:`random.Random`."""

    def __init__(self, seed: int | None = None, *, rng: Random | None = None) -> None:
        self._rng = rng or Random(seed)

    def randrange(self, stop: int) -> int:
        return self._rng.randrange(stop)

    def shuffle(self, items: MutableSequence[T]) -> None:
        self._rng.shuffle(items)

    def sample(self, items: Sequence[T], k: int) -> list[T]:
        return self._rng.sample(list(items), k)

    def choice(self, items: Sequence[T]) -> T:
        return self._rng.choice(items)
