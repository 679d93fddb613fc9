"""Arithmetic helpers for montgomery_reduction."""

import gmpy2


def is_odd(x: int) -> bool:
  return bool(x & 1)


def modinv(x: int, q: int) -> int:
  """Returns the inverse of x mod q.

  Args:
    x: The value to invert.
    q: The modulus. Must be positive.

  Returns:
    The unique y in [0, q) with (x * y) % q == 1 % q.

  Raises:
    ValueError: If q is not positive.
    ZeroDivisionError: If x has no inverse modulo q.
  """
  if q <= 0:
    raise ValueError(f"Modulus {q} must be positive")
  if q == 1:
    return 0
  return int(gmpy2.invert(gmpy2.mpz(x), gmpy2.mpz(q)))
