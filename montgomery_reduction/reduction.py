"""Montgomery reduction with a fixed odd modulus and power-of-two radix.

Montgomery reduction computes t * R^-1 mod n, with R = 2**r_bits, using only
masks, multiplications and a shift. A Reducer is built once per (n, r_bits)
pair and then applied to any number of inputs in [0, n * R).

Usage:
- reducer = reduction.build(17)
- reducer.reduce(100)  # 15
- reducer(100)  # same, the reducer is callable.

Montgomery multiplication of a and b (both in [0, n)) is then
reducer(a_bar * b_bar) with a_bar = (a << r_bits) % n, and
reducer(x_bar) maps a Montgomery-form value back to [0, n).
"""

import dataclasses
import logging

import gmpy2
from montgomery_reduction import types
from montgomery_reduction import util

DEFAULT_R_BITS = 256


class ReductionError(ArithmeticError):
  """Base class for Montgomery reduction failures."""


class InvalidModulus(ReductionError):
  """The modulus is not a positive odd integer."""

  def __init__(self, modulus: int):
    self.modulus = modulus
    super().__init__(
        f"Montgomery reduction modulus {modulus} should be a positive odd"
        " number."
    )


class OutOfRange(ReductionError):
  """The reduction input is outside [0, n * 2**r_bits)."""

  def __init__(self, value: int, modulus: int, r_bits: int):
    self.value = value
    self.modulus = modulus
    self.r_bits = r_bits
    super().__init__(
        f"Montgomery reduction input {value} should be in the range"
        f" [0, {modulus} * 2^{r_bits})."
    )


def _as_int(value, name: str) -> int:
  # bool is an int subclass but never a meaningful operand here.
  if isinstance(value, bool) or not isinstance(value, (int, gmpy2.mpz)):
    raise TypeError(f"Unsupported type {type(value).__name__} for {name}")
  return int(value)


@dataclasses.dataclass(frozen=True)
class Reducer:
  """Montgomery reduction operator for a fixed modulus and radix."""

  # The odd modulus n.
  modulus: types.Modulus

  # R = 2**r_bits is the Montgomery radix.
  r_bits: types.RadixBits

  # (-n^-1) mod R, so that n * n_prime == -1 (mod R).
  n_prime: int

  # R and R - 1, derived from r_bits.
  r: int = dataclasses.field(init=False, repr=False)
  r_mask: int = dataclasses.field(init=False, repr=False)

  # Inputs must be strictly below modulus * R.
  bound: int = dataclasses.field(init=False, repr=False)

  def __post_init__(self) -> None:
    r = 1 << self.r_bits
    object.__setattr__(self, 'r', r)
    object.__setattr__(self, 'r_mask', r - 1)
    object.__setattr__(self, 'bound', self.modulus << self.r_bits)

  def reduce(self, t: int) -> int:
    """Computes t * R^-1 mod n.

    Args:
      t: The value to reduce, in [0, n * R).

    Returns:
      The reduced value, in [0, n).

    Raises:
      OutOfRange: If t is negative or not below n * R.
    """
    t = _as_int(t, 't')
    if t < 0 or t >= self.bound:
      raise OutOfRange(t, self.modulus, self.r_bits)

    m = ((t & self.r_mask) * self.n_prime) & self.r_mask
    # The low r_bits bits of t + m * n are zero by construction of n_prime.
    u = (t + m * self.modulus) >> self.r_bits
    if u >= self.modulus:
      return u - self.modulus
    return u

  def __call__(self, t: int) -> int:
    return self.reduce(t)


def build(
    n: types.Modulus,
    r_bits: types.RadixBits = DEFAULT_R_BITS,
    modinv: types.ModInverse = util.modinv,
) -> Reducer:
  """Builds a Montgomery reducer for the modulus n and radix 2**r_bits.

  Args:
    n: The modulus. Must be odd and positive.
    r_bits: The radix bit-width. Must be non-negative.
    modinv: modinv(a, m) returns the inverse of a modulo m.

  Returns:
    A Reducer computing t * 2**-r_bits mod n.

  Raises:
    InvalidModulus: If n is even or not positive.
    ValueError: If r_bits is negative.
    TypeError: If n or r_bits is not an integer.
  """
  n = _as_int(n, 'n')
  r_bits = _as_int(r_bits, 'r_bits')
  if r_bits < 0:
    raise ValueError(f"r_bits {r_bits} must be non-negative")
  if n <= 0 or not util.is_odd(n):
    raise InvalidModulus(n)

  r = 1 << r_bits
  r_mask = r - 1
  n_prime = -int(modinv(n, r)) & r_mask

  logging.debug(
      'Built Montgomery reducer: n=%s r_bits=%d n_prime=%s',
      hex(n),
      r_bits,
      hex(n_prime),
  )
  return Reducer(modulus=n, r_bits=r_bits, n_prime=n_prime)


of = build
