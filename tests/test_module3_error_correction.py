# file: tests/test_module3_error_correction.py

"""
Unit tests for Module 3: Error Correction Coding.

Test coverage:
    - Reference vector from the symbology standard
    - Generator polynomials and correction codeword counts
    - Syndrome checks on intact sequences
    - Error correction capability per security level
    - Failure modes and exceptions
    - GF(929) tables
    - Error injection utilities
"""

import random

import numpy as np
import pytest

from src.module3_error_correction import (
    compute_error_correction,
    verify_codewords,
    correct_errors,
    compute_syndromes,
    ec_count_for_level,
    generator_polynomial,
    ReedSolomonCodec,
    ReedSolomonError,
    RSConfigurationError,
    RSEncodingError,
    RSDecodingError,
    RSCorrectionError,
)
from src.module3_error_correction.galois import GF, PRIME
from src.module3_error_correction.testing_utils import (
    inject_codeword_errors,
    inject_burst_errors,
)


def random_data_words(count, seed=0):
    rng = random.Random(seed)
    return [count] + [rng.randrange(0, 929) for _ in range(count - 1)]


class TestGaloisField:
    """Test GF(929) arithmetic tables."""

    def test_exp_table_is_permutation(self):
        assert sorted(GF.exp[:GF.order].tolist()) == list(range(1, PRIME))

    def test_exp_table_duplicated(self):
        assert np.array_equal(GF.exp[:GF.order], GF.exp[GF.order:])

    def test_primitive_element_order(self):
        assert GF.power_of_alpha(0) == 1
        assert GF.power_of_alpha(1) == 3
        assert GF.power_of_alpha(GF.order) == 1
        assert GF.mul(GF.power_of_alpha(-1), 3) == 1

    def test_inverse(self):
        for a in range(1, PRIME):
            assert GF.mul(a, GF.inv(a)) == 1

    def test_inverse_of_zero(self):
        with pytest.raises(ZeroDivisionError):
            GF.inv(0)

    def test_tables_read_only(self):
        with pytest.raises(ValueError):
            GF.exp[0] = 5

    def test_poly_eval_orders(self):
        # 2 + 3x + x^2 at x = 4
        assert GF.poly_eval([2, 3, 1], 4) == 30
        assert GF.poly_eval_high([1, 3, 2], 4) == 30


class TestGeneratorPolynomial:
    """Test generator polynomial construction."""

    @pytest.mark.parametrize("level,count", [(0, 2), (1, 4), (2, 8), (5, 64), (8, 512)])
    def test_ec_count_for_level(self, level, count):
        assert ec_count_for_level(level) == count

    def test_level_0(self):
        # (x - 3)(x - 9) = x^2 - 12x + 27
        assert generator_polynomial(2) == (1, 917, 27)

    def test_level_1(self):
        assert generator_polynomial(4) == (1, 809, 723, 568, 522)

    @pytest.mark.parametrize("ec_count", [2, 8, 64])
    def test_roots(self, ec_count):
        g = generator_polynomial(ec_count)
        assert len(g) == ec_count + 1
        for i in range(1, ec_count + 1):
            assert GF.poly_eval_high(g, GF.power_of_alpha(i)) == 0

    @pytest.mark.parametrize("level", [-1, 9, True, "2", 2.0, None])
    def test_invalid_level(self, level):
        with pytest.raises(RSConfigurationError):
            ec_count_for_level(level)


class TestComputeErrorCorrection:
    """Test correction codeword generation."""

    def test_reference_vector(self):
        """Example from the symbology standard, security level 1."""
        assert compute_error_correction([5, 453, 178, 121, 239], 1) == [452, 327, 657, 619]

    @pytest.mark.parametrize("level", range(9))
    def test_length_and_range(self, level):
        ec = compute_error_correction(random_data_words(20, seed=level), level)
        assert len(ec) == 2 ** (level + 1)
        assert all(0 <= word <= 928 for word in ec)

    @pytest.mark.parametrize("level", range(9))
    def test_syndromes_zero(self, level):
        data = random_data_words(30, seed=100 + level)
        full = data + compute_error_correction(data, level)

        assert compute_syndromes(full, 2 ** (level + 1)) == [0] * 2 ** (level + 1)
        assert verify_codewords(full, level)

    def test_pure(self):
        data = random_data_words(15)
        snapshot = list(data)

        first = compute_error_correction(data, 3)
        second = compute_error_correction(data, 3)

        assert first == second
        assert data == snapshot

    def test_accepts_numpy_integers(self):
        data = np.array([5, 453, 178, 121, 239], dtype=np.int32)
        assert compute_error_correction(data, 1) == [452, 327, 657, 619]

    @pytest.mark.parametrize("bad", [929, -1, 1.5, "7", None, True])
    def test_invalid_codeword(self, bad):
        with pytest.raises(RSEncodingError, match="position 1"):
            compute_error_correction([3, bad, 4], 0)

    def test_invalid_level(self):
        with pytest.raises(RSConfigurationError):
            compute_error_correction([1, 2], 9)

    def test_single_changed_word_detected(self):
        data = random_data_words(10)
        full = data + compute_error_correction(data, 0)
        full[4] = (full[4] + 1) % 929
        assert not verify_codewords(full, 0)


class TestReedSolomonCodec:
    """Test decoding and error correction."""

    def test_initialization(self):
        codec = ReedSolomonCodec(3)
        assert codec.ec_count == 16
        assert codec.max_correctable_errors == 8
        assert codec.generator == generator_polynomial(16)

    def test_encode_appends_correction(self):
        codec = ReedSolomonCodec(1)
        assert codec.encode([5, 453, 178, 121, 239]) == [5, 453, 178, 121, 239, 452, 327, 657, 619]

    def test_decode_intact(self):
        codec = ReedSolomonCodec(2)
        data = random_data_words(25)
        assert codec.decode(codec.encode(data)) == data

    @pytest.mark.parametrize("level", range(6))
    def test_corrects_maximum_errors(self, level):
        codec = ReedSolomonCodec(level)
        data = random_data_words(40, seed=level)
        encoded = codec.encode(data)

        corrupted = inject_codeword_errors(encoded, codec.max_correctable_errors, seed=level)
        assert corrupted != encoded
        assert codec.decode(corrupted) == data

    def test_corrects_error_in_correction_words(self):
        codec = ReedSolomonCodec(1)
        encoded = codec.encode([5, 453, 178, 121, 239])
        encoded[-1] = 0
        assert codec.decode(encoded) == [5, 453, 178, 121, 239]

    def test_corrects_burst(self):
        codec = ReedSolomonCodec(2)
        data = random_data_words(30)
        corrupted = inject_burst_errors(codec.encode(data), 4, seed=3)
        assert correct_errors(corrupted, 2) == data

    def test_too_many_errors(self):
        codec = ReedSolomonCodec(2)
        encoded = codec.encode(random_data_words(40))
        corrupted = inject_codeword_errors(encoded, 6, seed=11)

        with pytest.raises(RSCorrectionError) as excinfo:
            codec.decode(corrupted)
        assert excinfo.value.max_correctable == 4

    def test_correction_error_is_decoding_error(self):
        assert issubclass(RSCorrectionError, RSDecodingError)
        assert issubclass(RSDecodingError, ReedSolomonError)

    def test_decode_too_short(self):
        with pytest.raises(RSDecodingError, match="too short"):
            ReedSolomonCodec(2).decode([1] * 8)

    def test_decode_too_long(self):
        with pytest.raises(RSDecodingError, match="exceeds"):
            ReedSolomonCodec(0).decode([0] * 929)

    def test_decode_invalid_codeword(self):
        with pytest.raises(RSDecodingError, match="position 0"):
            ReedSolomonCodec(0).decode([929, 1, 2])

    def test_get_redundancy_overhead(self):
        codec = ReedSolomonCodec(2)
        assert codec.get_redundancy_overhead(16) == 0.5

        with pytest.raises(ValueError):
            codec.get_redundancy_overhead(0)


class TestErrorInjection:
    """Test error injection utilities."""

    def test_inject_codeword_errors_count(self):
        original = list(range(50))
        corrupted = inject_codeword_errors(original, 7, seed=1)

        assert sum(a != b for a, b in zip(original, corrupted)) == 7
        assert all(0 <= word <= 928 for word in corrupted)
        assert original == list(range(50))

    def test_inject_codeword_errors_deterministic(self):
        original = list(range(50))
        assert inject_codeword_errors(original, 5, seed=42) == inject_codeword_errors(original, 5, seed=42)

    def test_inject_codeword_errors_invalid(self):
        with pytest.raises(ValueError):
            inject_codeword_errors([1, 2, 3], 4)

    def test_inject_burst_errors_contiguous(self):
        original = [0] * 40
        corrupted = inject_burst_errors(original, 6, seed=9)

        changed = [i for i, (a, b) in enumerate(zip(original, corrupted)) if a != b]
        assert len(changed) == 6
        assert changed == list(range(changed[0], changed[0] + 6))

    def test_inject_burst_errors_invalid(self):
        with pytest.raises(ValueError, match="Burst"):
            inject_burst_errors([1, 2], 3)
