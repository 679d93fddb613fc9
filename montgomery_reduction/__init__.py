"""Montgomery reduction for a fixed odd modulus and power-of-two radix."""
