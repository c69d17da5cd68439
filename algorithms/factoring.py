from math import gcd, isqrt

INPUT_ERROR_MESSAGE = "Please enter an integer greater than 1."

# Order finding below is a classical O(n) loop; keep it to small demos.
DERIVATION_LIMIT = 100_000
# Coprime bases tried before giving up on a walkthrough.
MAX_BASES = 16


class FactoringInputError(ValueError):
    """Raised when the factoring demo receives anything but an integer > 1."""

    def __init__(self, message: str = INPUT_ERROR_MESSAGE):
        super().__init__(message)


def parse_factor_input(value) -> int:
    """
    Validate user input for the factoring demo.

    Accepts an int, an integral float, or a string holding an integer.
    """
    if isinstance(value, bool):
        raise FactoringInputError()
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            raise FactoringInputError() from None
    elif isinstance(value, float):
        if not value.is_integer():
            raise FactoringInputError()
        value = int(value)
    elif not isinstance(value, int):
        raise FactoringInputError()

    if value <= 1:
        raise FactoringInputError()
    return value


def find_factor(n: int) -> int:
    """Smallest prime factor of n by trial division up to √n; n itself if prime."""
    if n % 2 == 0:
        return 2
    for i in range(3, isqrt(n) + 1, 2):
        if n % i == 0:
            return i
    return n


def is_prime_power(n: int) -> bool:
    """True when n = p^k for a prime p and k >= 1."""
    if n < 2:
        return False
    p = find_factor(n)
    while n % p == 0:
        n //= p
    return n == 1


def factorize(value) -> list:
    """
    Split *value* into a factor pair.

    Returns [n] when n is prime, otherwise [f, n // f] with f the smallest
    prime factor.
    """
    n = parse_factor_input(value)
    factor = find_factor(n)
    if factor == n:
        return [n]
    return [factor, n // factor]


# ---------------------------------------------------------------------------
# Shor-style reduction: factoring via the period of aˣ mod N
# ---------------------------------------------------------------------------

def multiplicative_order(a: int, n: int) -> int:
    """Smallest r > 0 with aʳ ≡ 1 (mod n). a must be coprime to n."""
    if gcd(a, n) != 1:
        raise ValueError(f"{a} is not coprime to {n}")
    r, value = 1, a % n
    while value != 1:
        value = (value * a) % n
        r += 1
    return r


def factors_from_period(a: int, period: int, n: int):
    """gcd(a^(r/2) ± 1, N), or None when r is odd or the pair is trivial."""
    if period % 2:
        return None
    x = pow(a, period // 2, n)
    f1, f2 = gcd(x - 1, n), gcd(x + 1, n)
    if f1 in (1, n) or f2 in (1, n):
        return None
    return tuple(sorted((f1, f2)))


def period_finding_derivation(n: int):
    """
    What phase estimation would be used for when factoring *n*.

    Tries bases a = 2, 3, ... coprime to n and returns the first whose
    period yields a non-trivial factor pair, as a dict with keys:
        n, a, period, half_power (a^(r/2) mod n), factors

    Returns None for numbers the reduction does not cover (primes, even
    numbers, prime powers), for n above DERIVATION_LIMIT, and when none of
    the first MAX_BASES coprime bases works.
    """
    if n < 3 or n > DERIVATION_LIMIT or n % 2 == 0 or is_prime_power(n):
        return None
    tried = 0
    for a in range(2, n - 1):
        if gcd(a, n) != 1:
            continue
        if tried == MAX_BASES:
            break
        tried += 1
        period = multiplicative_order(a, n)
        factors = factors_from_period(a, period, n)
        if factors is not None:
            return {
                "n": n,
                "a": a,
                "period": period,
                "half_power": pow(a, period // 2, n),
                "factors": factors,
            }
    return None
