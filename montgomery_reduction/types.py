"""A module containing basic types for Montgomery reduction."""

from typing import Callable

# An odd, positive modulus n.
Modulus = int

# The radix bit-width; R = 2**RadixBits.
RadixBits = int

# A value in the Montgomery domain, i.e. a * R mod n.
MontgomeryValue = int

# modinv(a, m) returns the inverse of a modulo m.
ModInverse = Callable[[int, int], int]
