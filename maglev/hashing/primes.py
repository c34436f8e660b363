"""Primality checks for lookup table sizes."""

# Miller-Rabin witnesses that are exact for every n < 3.3e24
_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)


def is_prime(n: int) -> bool:
    """Return True if n is prime.

    Args:
        n: Candidate table size

    Returns:
        True for primes, False otherwise (including n < 2)
    """
    if n < 2:
        return False

    for p in _WITNESSES:
        if n % p == 0:
            return n == p

    d = n - 1
    r = 0
    while d % 2 == 0:
        d //= 2
        r += 1

    for a in _WITNESSES:
        x = pow(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(r - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False

    return True
