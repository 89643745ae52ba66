from timeit import timeit

import numpy as np
from scipy.optimize import newton

from rootfinding.base import Found
from rootfinding.methods import find_root, root_of


def f(t: float):
    return t * t - 612.0


def f_d(t: float):
    return 2 * t


def f_d2(t: float):
    return 2.0


def main(loops=10000, guess=1.0):
    tol = np.sqrt(np.finfo(float).eps)

    for method in ('Secant', 'Newton', 'Halley'):
        result = find_root(f, guess, method, f_d, f_d2,
                           tolerance=tol, max_iter=1000)
        print(f"Benchmarking {method}")
        match result:
            case Found(state):
                print(f"\t root {root_of(state)}")
            case _:
                print(f"\t {result}")
        time = timeit(lambda: find_root(f, guess, method, f_d, f_d2,
                                        tolerance=tol, max_iter=1000),
                      number=loops)
        print(f"\t {loops} loops, {time / loops * 1e6} us average")

    print("Benchmarking scipy.optimize.newton")
    print(f"\t root {newton(f, guess, fprime=f_d, tol=tol)}")
    time = timeit(lambda: newton(f, guess, fprime=f_d, tol=tol),
                  number=loops)
    print(f"\t {loops} loops, {time / loops * 1e6} us average")


if __name__ == '__main__':
    main(10000, guess=1.0)
