"""Small number-theory routines: primality, sieves, gcd/lcm, powers and conversions."""

from __future__ import annotations

from math import isqrt, prod
from typing import NamedTuple

PI_APPROX = 3.142


class Temperatures(NamedTuple):
    """A Celsius reading expressed in the other two scales."""

    fahrenheit: float
    kelvin: float


def area_of_circle(radius: float) -> float:
    """Area of a circle, using 3.142 for pi."""
    return radius * radius * PI_APPROX


def is_even(n: int) -> bool:
    """Whether ``n`` is divisible by two."""
    return n % 2 == 0


def is_prime(n: int) -> bool:
    """Whether ``n`` is a prime number; values below two are not."""
    if n <= 1:
        return False
    return all(n % divisor for divisor in range(2, isqrt(n) + 1))


def factorial(n: int) -> int:
    """The product n * (n - 1) * ... * 1; 1 for values below one."""
    return prod(range(1, n + 1))


def set_kth_bit(num: int, k: int) -> int:
    """``num`` with bit ``k`` (counted from zero) switched on."""
    if k < 0:
        raise ValueError(f"bit position must not be negative, got {k}")
    return num | (1 << k)


def celsius_conversions(celsius: float) -> Temperatures:
    """The Fahrenheit and Kelvin values of a Celsius temperature."""
    return Temperatures(fahrenheit=celsius * 1.8 + 32, kelvin=celsius + 273.15)


def reverse_digits(n: int) -> str:
    """The decimal digits of a positive ``n`` from last to first; empty otherwise."""
    digits = []
    while n > 0:
        n, digit = divmod(n, 10)
        digits.append(str(digit))
    return "".join(digits)


def primes_up_to(n: int) -> list[int]:
    """Every prime from 0 to ``n`` inclusive, found by trial division."""
    return [value for value in range(n + 1) if is_prime(value)]


def count_primes(n: int) -> int:
    """How many primes lie below ``n``, found by trial division."""
    return sum(1 for value in range(n) if is_prime(value))


def count_primes_sieve(n: int) -> int:
    """How many primes lie below ``n``, found with the sieve of Eratosthenes."""
    if n <= 1:
        return 0
    return sum(sieve(n - 1))


def sieve(n: int) -> list[bool]:
    """Primality flags for 0..n, crossing out multiples from each prime's square."""
    if n < 0:
        raise ValueError(f"sieve size must not be negative, got {n}")
    flags = [True] * (n + 1)
    for small in (0, 1):
        if small <= n:
            flags[small] = False
    for i in range(2, isqrt(n) + 1):
        if flags[i]:
            flags[i * i :: i] = [False] * len(range(i * i, n + 1, i))
    return flags


def segmented_sieve(low: int, high: int) -> list[bool]:
    """Primality flags for low..high, using the primes up to the square root of ``high``."""
    if low < 0 or high < low:
        raise ValueError(f"need 0 <= low <= high, got {low} and {high}")
    base_primes = [p for p, flag in enumerate(sieve(isqrt(high))) if flag]
    flags = [True] * (high - low + 1)
    for small in (0, 1):
        if low <= small <= high:
            flags[small - low] = False
    for prime in base_primes:
        first_multiple = -(-low // prime) * prime
        for multiple in range(max(first_multiple, prime * prime), high + 1, prime):
            flags[multiple - low] = False
    return flags


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two non-negative integers, by repeated subtraction."""
    if a < 0 or b < 0:
        raise ValueError(f"gcd needs non-negative values, got {a} and {b}")
    if a == 0:
        return b
    if b == 0:
        return a
    while a > 0 and b > 0:
        if a > b:
            a -= b
        else:
            b -= a
    return b if a == 0 else a


def lcm(a: int, b: int) -> int:
    """Least common multiple, as a * b / gcd(a, b); undefined when both are zero."""
    return a * b // gcd(a, b)


def slow_power(base: int, exponent: int) -> int:
    """``base`` multiplied by itself ``exponent`` times; 1 for exponents below one."""
    result = 1
    for _ in range(exponent):
        result *= base
    return result


def fast_power(base: int, exponent: int) -> int:
    """``base`` to the ``exponent`` by repeated squaring; 1 for exponents below one."""
    result = 1
    while exponent > 0:
        if exponent & 1:
            result *= base
        base *= base
        exponent >>= 1
    return result