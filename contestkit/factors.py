"""Trial-division factoring."""


def prime_factors(n: int) -> list[int]:
    """Return the prime factors of ``n`` found by trial division.

    Divisors are tried in increasing order while their square does not exceed
    the value still left to factor. A final cofactor larger than that bound is
    not included, so the product of the result always divides ``n``.
    """
    factors: list[int] = []
    divisor = 2
    while divisor * divisor <= n:
        while n % divisor == 0:
            n //= divisor
            factors.append(divisor)
        divisor += 1
    return factors