import logging
from dataclasses import dataclass
from typing import Generic, TypeVar, final

logger = logging.getLogger(__name__)

S = TypeVar('S')


@dataclass(frozen=True)
class Found(Generic[S]):
    state: S


@dataclass(frozen=True)
class MaxIterReached:
    pass


RootFindingResult = Found[S] | MaxIterReached


class RootFindingAlgorithm(Generic[S]):
    """
    Base class for iterative root-finders

    Subclasses choose their own state type S and implement iterate_once;
    the convergence loop in solve is shared by all of them.
    """
    def iterate_once(self, state: S):
        '''Returns new state and error = |f(new iterate)|'''
        raise NotImplementedError()

    @final
    def solve(self, initial_state: S, tolerance,
              max_iter: int) -> RootFindingResult[S]:
        '''
        Step from initial_state until error < tolerance
        or max_iter steps were taken

        Scalars that raise on division by zero (float, Fraction)
        end the run as MaxIterReached, like inf/nan errors do
        '''
        state = initial_state
        remaining = max_iter

        while remaining > 0:
            try:
                state, error = self.iterate_once(state)
            except ZeroDivisionError:
                logger.debug("%s hit a zero denominator after %d steps",
                             type(self).__name__, max_iter - remaining)
                return MaxIterReached()
            if error < tolerance:
                logger.debug("%s converged after %d steps, error=%s",
                             type(self).__name__,
                             max_iter - remaining + 1, error)
                return Found(state)
            remaining -= 1

        logger.debug("%s reached max_iter=%d without converging",
                     type(self).__name__, max_iter)
        return MaxIterReached()
