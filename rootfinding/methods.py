from typing import Callable, Literal

from rootfinding.base import RootFindingResult
from rootfinding.halley import HalleysMethodSolver, HalleysMethodState
from rootfinding.newton import NewtonRaphsonSolver, NewtonRaphsonState
from rootfinding.scalar import default_tolerance
from rootfinding.secant import SecantMethodSolver, SecantMethodState

Method = Literal['Secant', 'Newton', 'Halley']


def make_solver(method: Method,
                func: Callable,
                func_d: Callable | None = None,
                func_d2: Callable | None = None):
    match method.lower(), func_d, func_d2:
        case 'secant', _, _:
            return SecantMethodSolver(func)
        case 'newton', f_d, _ if f_d is not None:
            return NewtonRaphsonSolver(func, f_d)
        case 'halley', f_d, f_d2 if f_d is not None and f_d2 is not None:
            return HalleysMethodSolver(func, f_d, f_d2)
        case ('newton' | 'halley'), _, _:
            raise ValueError(f"{method} method needs derivatives")
        case _:
            raise ValueError(f"Unknown root method {method!r}")


def initial_state(method: Method, guess):
    match method.lower():
        case 'secant':
            return SecantMethodState.from_guess(guess)
        case 'newton':
            return NewtonRaphsonState(guess)
        case 'halley':
            return HalleysMethodState(guess)
        case _:
            raise ValueError(f"Unknown root method {method!r}")


def root_of(state):
    '''Current iterate held by a state of any method'''
    match state:
        case SecantMethodState(prev1=t):
            return t
        case NewtonRaphsonState(prev_val=t) | HalleysMethodState(prev_val=t):
            return t
        case _:
            raise TypeError(f"Not a root-finding state: {state!r}")


def find_root(func: Callable, guess,
              method: Method = 'Secant',
              func_d: Callable | None = None,
              func_d2: Callable | None = None,
              tolerance=None,
              max_iter: int = 100) -> RootFindingResult:
    '''
    Build solver and initial state for method and solve from guess

    tolerance defaults to sqrt of machine epsilon for guess's type
    '''
    solver = make_solver(method, func, func_d, func_d2)
    if tolerance is None:
        tolerance = default_tolerance(guess)
    return solver.solve(initial_state(method, guess), tolerance, max_iter)


__all__ = [
    'Method',
    'find_root',
    'initial_state',
    'make_solver',
    'root_of',
]
