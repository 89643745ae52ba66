from dataclasses import dataclass
from typing import Callable, Generic

from rootfinding.base import RootFindingAlgorithm
from rootfinding.scalar import T


@dataclass(frozen=True)
class HalleysMethodState(Generic[T]):
    prev_val: T


@dataclass(frozen=True)
class HalleysMethodSolver(RootFindingAlgorithm[HalleysMethodState[T]]):
    """
        t_new = t - 2 f f' / (2 f'^2 - f f'')   \\
        Doubling is done as x + x, so T needs no integer 2
    """
    func: Callable[[T], T]
    func_d: Callable[[T], T]
    func_d2: Callable[[T], T]

    def iterate_once(self, state: HalleysMethodState[T]):
        t = state.prev_val
        f, f_d, f_d2 = self.func(t), self.func_d(t), self.func_d2(t)

        numerator = f * f_d
        numerator = numerator + numerator

        denominator = f_d * f_d
        denominator = denominator + denominator - f * f_d2

        t = t - numerator / denominator
        return HalleysMethodState(t), abs(self.func(t))
