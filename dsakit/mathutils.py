"""Number puzzles and small dynamic programmes."""

from __future__ import annotations

import math
from collections.abc import Iterable
from functools import lru_cache

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def is_power_of_two(n: int) -> bool:
    """True when n is a positive power of two."""
    return n != 0 and n & (n - 1) == 0


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of x, keeping its sign.

    Returns 0 when the result does not fit in a signed 32-bit integer.
    """
    sign = -1 if x < 0 else 1
    result = sign * int(str(abs(x))[::-1])
    if not _INT32_MIN <= result <= _INT32_MAX:
        return 0
    return result


def is_armstrong(x: int) -> bool:
    """True when x equals the sum of its digits each raised to the digit count.

    Digits of a negative number carry its sign.
    """
    digits = [int(ch) for ch in str(abs(x))] if x else []
    sign = -1 if x < 0 else 1
    order = len(digits)
    return sum((sign * d) ** order for d in digits) == x


def count_primes(n: int) -> int:
    """Number of primes strictly less than n."""
    if n < 3:
        return 0
    sieve = bytearray([1]) * n
    sieve[0] = sieve[1] = 0
    for i in range(2, math.isqrt(n - 1) + 1):
        if sieve[i]:
            sieve[i * i::i] = bytes(len(range(i * i, n, i)))
    return sum(sieve)


def factorial(n: int) -> int:
    """n! for a non-negative integer n."""
    if n < 0:
        raise ValueError("factorial of a negative number does not exist")
    return math.prod(range(1, n + 1))


def _fib_pair(k: int) -> tuple[int, int]:
    """(F(k), F(k+1)) by fast doubling."""
    if k == 0:
        return 0, 1
    a, b = _fib_pair(k >> 1)
    c = a * (2 * b - a)
    d = a * a + b * b
    return (d, c + d) if k & 1 else (c, d)


def fibonacci_sum(n: int, m: int) -> int:
    """F(n) + F(n+1) + ... + F(m), with F(0) = 0 and F(1) = 1."""
    if n < 0 or m < n:
        raise ValueError("need 0 <= n <= m")
    return _fib_pair(m + 2)[0] - _fib_pair(n + 1)[0]


def octal_to_decimal(n: int) -> int:
    """Value of a number whose decimal digits are read as octal digits."""
    if n < 0:
        raise ValueError("number must not be negative")
    total = 0
    for ch in str(n):
        digit = int(ch)
        if digit > 7:
            raise ValueError(f"{ch!r} is not an octal digit")
        total = total * 8 + digit
    return total


def egg_drop(eggs: int, floors: int) -> int:
    """Fewest drops that always find the threshold floor."""
    if floors < 0:
        raise ValueError("number of floors must not be negative")
    if eggs < 1 and floors > 1:
        raise ValueError("at least one egg is required")

    @lru_cache(maxsize=None)
    def drops(n: int, k: int) -> int:
        if k in (0, 1) or n == 1:
            return k
        return 1 + min(max(drops(n - 1, i - 1), drops(n, k - i)) for i in range(1, k + 1))

    return drops(eggs, floors)


def _check_coins(coins: Iterable[int]) -> list[int]:
    values = list(coins)
    if any(coin <= 0 for coin in values):
        raise ValueError("coin values must be positive")
    return values


def coin_change_ways(coins: Iterable[int], total: int) -> int:
    """Number of unordered ways to make total from unlimited coins."""
    if total < 0:
        raise ValueError("total must not be negative")
    ways = [1] + [0] * total
    for coin in _check_coins(coins):
        for amount in range(coin, total + 1):
            ways[amount] += ways[amount - coin]
    return ways[total]


def coin_change_min(coins: Iterable[int], total: int) -> int | None:
    """Fewest coins that make total, or None when it cannot be made."""
    if total < 0:
        raise ValueError("total must not be negative")
    best: list[float] = [0] + [math.inf] * total
    for coin in _check_coins(coins):
        for amount in range(coin, total + 1):
            best[amount] = min(best[amount], best[amount - coin] + 1)
    return None if best[total] == math.inf else int(best[total])