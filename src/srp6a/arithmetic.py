"""Big-integer backends.

The protocol engine spends nearly all of its time in modular
exponentiation. Python's own int is always available; gmpy2 (GMP) is
several times faster for 2048-bit and larger groups. A configuration picks
one of these, and the engine only ever calls:

    arith.powmod(base, exp, modulus) -> int
    arith.mulmod(x, y, modulus) -> int

Both backends accept and return plain ints, so SRPData never holds
backend-specific numbers.
"""

class IntegerArithmetic:
    name = "int"

    @staticmethod
    def powmod(base, exp, modulus):
        return pow(base, exp, modulus)

    @staticmethod
    def mulmod(x, y, modulus):
        return (x * y) % modulus


class GmpyArithmetic:
    name = "gmpy2"

    def __init__(self):
        # imported here so that installs without the 'gmpy' extra can
        # still use IntegerArithmetic
        import gmpy2
        self._gmpy2 = gmpy2

    def powmod(self, base, exp, modulus):
        return int(self._gmpy2.powmod(base, exp, modulus))

    def mulmod(self, x, y, modulus):
        mpz = self._gmpy2.mpz
        return int((mpz(x) * mpz(y)) % modulus)
