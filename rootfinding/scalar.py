from typing import Protocol, TypeVar

import numpy as np


class Scalar(Protocol):
    """
        What every solver asks of a scalar:                 \\
        + - * /, ``<`` against a tolerance, ``abs()``       \\
        and a type that can build its own 1 from an int
    """
    def __add__(self, other): ...
    def __sub__(self, other): ...
    def __mul__(self, other): ...
    def __truediv__(self, other): ...
    def __lt__(self, other) -> bool: ...
    def __abs__(self): ...


T = TypeVar('T', bound=Scalar)


def one(x: T) -> T:
    return type(x)(1)


def default_tolerance(x) -> float:
    '''sqrt of machine epsilon for the float type of x (float64 otherwise)'''
    dtype = type(x) if isinstance(x, np.floating) else np.float64
    return float(np.sqrt(np.finfo(dtype).eps))
