# file: src/module3_error_correction/rs_codec.py

"""
Reed-Solomon codec over GF(929).

Generator polynomial for k error correction codewords:

    g(x) = (x - 3^1)(x - 3^2)...(x - 3^k),   k = 2^(security_level + 1)

Error correction codewords are the negated remainder of D(x) * x^k mod g(x),
so the full codeword polynomial [data][ec] is a multiple of g(x) and all
k syndromes of an intact symbol are zero.
"""

from functools import lru_cache
from typing import List, Sequence, Tuple

import numpy as np

from .errors import (
    RSConfigurationError,
    RSEncodingError,
    RSDecodingError,
    RSCorrectionError,
)
from .galois import GF


MIN_SECURITY_LEVEL = 0
MAX_SECURITY_LEVEL = 8
MAX_CODEWORD_LENGTH = GF.order


def ec_count_for_level(security_level: int) -> int:
    """Number of error correction codewords for a security level."""
    if (
        not isinstance(security_level, int)
        or isinstance(security_level, bool)
        or not MIN_SECURITY_LEVEL <= security_level <= MAX_SECURITY_LEVEL
    ):
        raise RSConfigurationError(
            f"Security level must be an integer in [{MIN_SECURITY_LEVEL}, "
            f"{MAX_SECURITY_LEVEL}], got {security_level!r}"
        )
    return 2 ** (security_level + 1)


@lru_cache(maxsize=None)
def generator_polynomial(ec_count: int) -> Tuple[int, ...]:
    """
    Build g(x) for `ec_count` correction codewords.

    Returns:
        Coefficients, highest degree first; the leading coefficient is 1
    """
    poly = [1]
    for i in range(1, ec_count + 1):
        root = GF.power_of_alpha(i)
        poly = GF.poly_mul(poly, [1, GF.neg(root)])
    return tuple(poly)


def validate_codewords(code_words: Sequence[int], error_cls=RSEncodingError) -> List[int]:
    words = list(code_words)
    for position, word in enumerate(words):
        if not isinstance(word, (int, np.integer)) or isinstance(word, bool) or not 0 <= word < GF.prime:
            raise error_cls(
                f"Codeword at position {position} must be an integer in [0, {GF.prime - 1}], got {word!r}"
            )
    return [int(word) for word in words]


def compute_syndromes(code_words: Sequence[int], ec_count: int) -> List[int]:
    """
    Evaluate the codeword polynomial at 3^1 .. 3^ec_count.

    Args:
        code_words: Full codeword sequence, data followed by correction words
        ec_count: Number of correction codewords

    Returns:
        List of ec_count syndromes; all zero for an intact sequence
    """
    words = np.asarray(code_words, dtype=np.int64)
    degrees = np.arange(len(words) - 1, -1, -1, dtype=np.int64)

    syndromes = []
    for j in range(1, ec_count + 1):
        powers = GF.exp[(j * degrees) % GF.order]
        syndromes.append(int((words * powers).sum() % GF.prime))
    return syndromes


class ReedSolomonCodec:
    """
    PDF417 Reed-Solomon codec for one security level.

    Parameters:
        security_level (int): 0..8

    Invariants:
        - ec_count = 2^(security_level + 1)
        - Corrects up to ec_count // 2 codeword errors
        - Data plus correction codewords may not exceed 928 codewords
    """

    def __init__(self, security_level: int):
        self.security_level = security_level
        self.ec_count = ec_count_for_level(security_level)
        self.max_correctable_errors = self.ec_count // 2
        self.generator = generator_polynomial(self.ec_count)

    def compute(self, data_words: Sequence[int]) -> List[int]:
        """
        Compute the correction codewords for a data sequence.

        Args:
            data_words: Abstract data codewords (length descriptor,
                        data and padding)

        Returns:
            ec_count correction codewords, highest degree first

        Raises:
            RSEncodingError: If a codeword is outside [0, 928]
        """
        words = validate_codewords(data_words)
        prime = GF.prime
        k = self.ec_count
        g = self.generator

        remainder = [0] * k
        for word in words:
            feedback = (word + remainder[0]) % prime
            remainder = remainder[1:] + [0]
            if feedback:
                for i in range(k):
                    remainder[i] = (remainder[i] - GF.mul(feedback, g[i + 1])) % prime

        return [GF.neg(r) for r in remainder]

    def encode(self, data_words: Sequence[int]) -> List[int]:
        """Return data_words followed by their correction codewords."""
        return validate_codewords(data_words) + self.compute(data_words)

    def decode(self, code_words: Sequence[int]) -> List[int]:
        """
        Correct a codeword sequence and return its data part.

        Args:
            code_words: Data followed by ec_count correction codewords

        Returns:
            Corrected data codewords (correction codewords stripped)

        Raises:
            RSDecodingError: If the sequence is malformed
            RSCorrectionError: If errors exceed correction capability
        """
        received = validate_codewords(code_words, error_cls=RSDecodingError)
        n = len(received)

        if n <= self.ec_count:
            raise RSDecodingError(
                f"Sequence of {n} codewords is too short for {self.ec_count} correction codewords"
            )
        if n > MAX_CODEWORD_LENGTH:
            raise RSDecodingError(
                f"Sequence of {n} codewords exceeds GF(929) limit of {MAX_CODEWORD_LENGTH}"
            )

        syndromes = compute_syndromes(received, self.ec_count)
        if not any(syndromes):
            return received[:n - self.ec_count]

        locator = self._berlekamp_massey(syndromes)
        num_errors = len(locator) - 1

        if num_errors > self.max_correctable_errors or locator[-1] == 0:
            raise RSCorrectionError(
                f"Too many errors: locator degree {num_errors} > {self.max_correctable_errors}",
                num_errors=num_errors,
                max_correctable=self.max_correctable_errors,
            )

        positions = self._chien_search(locator, n)
        if len(positions) != num_errors:
            raise RSCorrectionError(
                f"Error locator has {len(positions)} roots in range, expected {num_errors}",
                num_errors=num_errors,
                max_correctable=self.max_correctable_errors,
            )

        corrected = list(received)
        for degree, magnitude in zip(positions, self._forney(syndromes, locator, positions)):
            index = n - 1 - degree
            corrected[index] = GF.sub(corrected[index], magnitude)

        if any(compute_syndromes(corrected, self.ec_count)):
            raise RSCorrectionError(
                "Correction did not produce a valid codeword",
                num_errors=num_errors,
                max_correctable=self.max_correctable_errors,
            )

        return corrected[:n - self.ec_count]

    def _berlekamp_massey(self, syndromes: List[int]) -> List[int]:
        """Error locator polynomial, constant term first."""
        current = [1]
        previous = [1]
        length = 0
        shift = 1
        last_discrepancy = 1

        for step, syndrome in enumerate(syndromes):
            discrepancy = syndrome
            for i in range(1, length + 1):
                discrepancy = GF.add(discrepancy, GF.mul(current[i], syndromes[step - i]))

            if discrepancy == 0:
                shift += 1
                continue

            scale = GF.div(discrepancy, last_discrepancy)
            updated = current + [0] * max(0, len(previous) + shift - len(current))
            for i, coef in enumerate(previous):
                updated[i + shift] = GF.sub(updated[i + shift], GF.mul(scale, coef))

            if 2 * length <= step:
                previous = current
                length = step + 1 - length
                last_discrepancy = discrepancy
                shift = 1
            else:
                shift += 1
            current = updated

        return current[:length + 1]

    @staticmethod
    def _chien_search(locator: List[int], n: int) -> List[int]:
        """Degrees d in [0, n) for which 3^-d is a root of the locator."""
        return [
            degree for degree in range(n)
            if GF.poly_eval(locator, GF.power_of_alpha(-degree)) == 0
        ]

    def _forney(self, syndromes: List[int], locator: List[int], positions: List[int]) -> List[int]:
        """Error magnitudes for each located degree."""
        evaluator = GF.poly_mul(syndromes, locator)[:self.ec_count]
        derivative = [GF.mul(i % GF.prime, coef) for i, coef in enumerate(locator)][1:]

        magnitudes = []
        for degree in positions:
            x_inv = GF.power_of_alpha(-degree)
            denominator = GF.poly_eval(derivative, x_inv)
            if denominator == 0:
                raise RSCorrectionError(
                    f"Locator derivative vanishes at degree {degree}",
                    max_correctable=self.max_correctable_errors,
                )
            magnitudes.append(GF.neg(GF.div(GF.poly_eval(evaluator, x_inv), denominator)))
        return magnitudes

    def get_redundancy_overhead(self, num_data_words: int) -> float:
        """
        Redundancy overhead as a fraction of the data length.

        Returns:
            Overhead ratio: ec_count / num_data_words
        """
        if num_data_words <= 0:
            raise ValueError(f"num_data_words must be > 0, got {num_data_words}")
        return self.ec_count / num_data_words
