from dataclasses import dataclass
from typing import Callable, Generic

from rootfinding.base import RootFindingAlgorithm
from rootfinding.scalar import T


@dataclass(frozen=True)
class NewtonRaphsonState(Generic[T]):
    prev_val: T


@dataclass(frozen=True)
class NewtonRaphsonSolver(RootFindingAlgorithm[NewtonRaphsonState[T]]):
    func: Callable[[T], T]
    func_d: Callable[[T], T]

    def iterate_once(self, state: NewtonRaphsonState[T]):
        t = state.prev_val - self.func(state.prev_val) / \
            self.func_d(state.prev_val)
        return NewtonRaphsonState(t), abs(self.func(t))
