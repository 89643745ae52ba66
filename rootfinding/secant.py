from dataclasses import dataclass
from typing import Callable, Generic

from rootfinding.base import RootFindingAlgorithm
from rootfinding.scalar import T, one


@dataclass(frozen=True)
class SecantMethodState(Generic[T]):
    prev1: T
    prev2: T

    @classmethod
    def from_guess(cls, guess: T) -> 'SecantMethodState[T]':
        """Second point is guess + 1, so the first secant is never flat"""
        return cls(guess, guess + one(guess))


@dataclass(frozen=True)
class SecantMethodSolver(RootFindingAlgorithm[SecantMethodState[T]]):
    """Needs only f, for functions without a usable derivative"""
    func: Callable[[T], T]

    def iterate_once(self, state: SecantMethodState[T]):
        t1, t2 = state.prev1, state.prev2
        f1, f2 = self.func(t1), self.func(t2)

        t = t1 - f1 * (t1 - t2) / (f1 - f2)
        return SecantMethodState(t, t1), abs(self.func(t))
