# file: src/module3_error_correction/galois.py

"""
Prime field arithmetic for PDF417 error correction.

PDF417 codewords are integers modulo 929, so the Reed-Solomon code works in
GF(929) with primitive element 3. Addition is ordinary modular addition
(not XOR as in GF(2^m)); multiplication goes through log/antilog tables.

Polynomials are plain lists of coefficients. Evaluation functions suffixed
with `_high` take the highest degree coefficient first, the others take
the constant term first.
"""

from typing import List, Sequence

import numpy as np


PRIME = 929
PRIMITIVE_ELEMENT = 3


class GF929:
    """
    Log/antilog tables for GF(929).

    Attributes:
        prime: Field size
        order: Size of the multiplicative group (prime - 1)
        exp: exp[i] = alpha^i, duplicated to 2 * order entries
        log: log[x] = i such that alpha^i = x (log[0] is unused)
    """

    def __init__(self, prime: int = PRIME, generator: int = PRIMITIVE_ELEMENT):
        self.prime = prime
        self.generator = generator
        self.order = prime - 1
        self.exp = np.zeros(2 * self.order, dtype=np.int64)
        self.log = np.zeros(prime, dtype=np.int64)
        self._build_tables()

    def _build_tables(self) -> None:
        x = 1
        for i in range(self.order):
            self.exp[i] = x
            self.log[x] = i
            x = (x * self.generator) % self.prime
        # duplicate to avoid mod in mul
        self.exp[self.order:] = self.exp[:self.order]
        self.exp.setflags(write=False)
        self.log.setflags(write=False)

    def add(self, a: int, b: int) -> int:
        return (a + b) % self.prime

    def sub(self, a: int, b: int) -> int:
        return (a - b) % self.prime

    def neg(self, a: int) -> int:
        return -a % self.prime

    def mul(self, a: int, b: int) -> int:
        if a == 0 or b == 0:
            return 0
        return int(self.exp[self.log[a] + self.log[b]])

    def inv(self, a: int) -> int:
        if a == 0:
            raise ZeroDivisionError("0 has no inverse in GF(929)")
        return int(self.exp[self.order - self.log[a]])

    def div(self, a: int, b: int) -> int:
        return self.mul(a, self.inv(b))

    def power_of_alpha(self, n: int) -> int:
        """alpha^n for any integer n (negative allowed)."""
        return int(self.exp[n % self.order])

    def poly_mul(self, p: Sequence[int], q: Sequence[int]) -> List[int]:
        out = [0] * (len(p) + len(q) - 1)
        for i, a in enumerate(p):
            if a == 0:
                continue
            for j, b in enumerate(q):
                out[i + j] = (out[i + j] + self.mul(a, b)) % self.prime
        return out

    def poly_eval_high(self, poly: Sequence[int], x: int) -> int:
        acc = 0
        for coef in poly:
            acc = (self.mul(acc, x) + coef) % self.prime
        return acc

    def poly_eval(self, poly: Sequence[int], x: int) -> int:
        return self.poly_eval_high(poly[::-1], x)


GF = GF929()
