"""Small number-theory helpers."""

import math


def evenly_divides(n: int) -> int:
    """Count the non-zero digits of ``n`` that divide ``n`` exactly."""
    return sum(1 for digit in map(int, str(abs(n))) if digit and n % digit == 0)


def factorial(n: int) -> int:
    """Return ``n!`` for a non-negative ``n``."""
    if n < 0:
        raise ValueError("factorial() is not defined for negative numbers")
    return math.prod(range(2, n + 1))


def reverse_exponentiation(n: int) -> int:
    """Return ``n`` raised to the power of the number its digits form reversed."""
    if n < 0:
        raise ValueError("reverse_exponentiation() needs a non-negative number")
    return n ** int(str(n)[::-1])


def nth_fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, counting F(0) = 0 and F(1) = 1."""
    if n < 0:
        raise ValueError("nth_fibonacci() needs a non-negative index")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current