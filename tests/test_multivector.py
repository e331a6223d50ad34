# SGA: Signature-configurable Geometric Algebra
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want 
# the industry to build upon this "unbending" paradigm.

"""Tests for the Multivector value type: construction, access, queries,
equality and display."""

import pytest
import torch

from sga import configure, Multivector
from sga.display import blade_name, blade_names, format_multivector
from sga.errors import DimensionMismatch, IndexOutOfRange


DEVICE = "cpu"


@pytest.fixture(scope="module")
def e3():
    return configure(3, 0, 0, device=DEVICE)


@pytest.fixture(scope="module")
def cl2():
    return configure(0, 2, 0, device=DEVICE)


@pytest.fixture(params=[(3, 0, 0), (1, 3, 0), (2, 1, 1)], ids=str)
def algebra(request):
    return configure(*request.param, device=DEVICE)


# ── Construction ──────────────────────────────────────────────────────

class TestConstruction:

    def test_short_input_is_zero_padded(self, cl2):
        mv = Multivector(cl2, [1.0, 2.0])
        assert mv.tolist() == [1.0, 2.0, 0.0, 0.0]
        assert len(mv) == 4
        assert mv.dimension == 4

    def test_empty_input_is_zero(self, cl2):
        assert Multivector(cl2).is_zero()
        assert cl2.multivector([]).tolist() == [0.0] * 4

    def test_exact_length(self, cl2):
        mv = Multivector.from_coefficients(cl2, [1, 2, 3, 4])
        assert list(mv) == [1.0, 2.0, 3.0, 4.0]

    def test_too_long_raises(self, cl2):
        with pytest.raises(DimensionMismatch):
            Multivector(cl2, [0.0] * 5)
        with pytest.raises(ValueError):
            Multivector(cl2, torch.zeros(8))

    def test_non_flat_tensor_raises(self, cl2):
        with pytest.raises(DimensionMismatch):
            Multivector(cl2, torch.zeros(2, 2))

    def test_input_is_copied(self, cl2):
        source = torch.tensor([1.0, 2.0, 3.0, 4.0], dtype=torch.float64)
        mv = Multivector(cl2, source)
        source[0] = 99.0
        assert mv[0] == 1.0
        mv.tensor[1] = 99.0
        assert mv[1] == 2.0

    def test_coefficients_are_float64(self, cl2):
        mv = Multivector(cl2, torch.tensor([1, 2], dtype=torch.int32))
        assert mv.tensor.dtype == torch.float64
        assert mv.tolist() == [1.0, 2.0, 0.0, 0.0]

    def test_base_blade(self, algebra):
        for blade in range(algebra.dim):
            mv = Multivector.base_blade(algebra, blade)
            expected = [0.0] * algebra.dim
            expected[blade] = 1.0
            assert mv.tolist() == expected
            assert algebra.base_blade(blade) == mv

    def test_base_blade_out_of_range(self, e3):
        with pytest.raises(IndexOutOfRange):
            Multivector.base_blade(e3, 8)
        with pytest.raises(IndexOutOfRange):
            Multivector.base_blade(e3, -1)

    def test_from_vector(self, e3):
        v = Multivector.from_vector(e3, [1.0, 2.0, 3.0])
        assert v.tolist() == [0.0, 1.0, 2.0, 0.0, 3.0, 0.0, 0.0, 0.0]
        assert v.grade_projection(1) == v
        partial = Multivector.from_vector(e3, [5.0])
        assert partial[1] == 5.0

    def test_from_vector_too_many_components(self, e3):
        with pytest.raises(DimensionMismatch):
            Multivector.from_vector(e3, [1.0, 2.0, 3.0, 4.0])


# ── Coefficient access ────────────────────────────────────────────────

class TestIndexing:

    def test_read(self, cl2):
        mv = Multivector(cl2, [2.0, 0.0, 0.0, 3.0])
        assert mv[0] == 2.0
        assert mv[3] == 3.0
        assert mv.scalar == 2.0
        assert isinstance(mv[3], float)

    @pytest.mark.parametrize("blade", [4, 100, -1])
    def test_out_of_range(self, cl2, blade):
        mv = Multivector(cl2, [1.0])
        with pytest.raises(IndexOutOfRange):
            mv[blade]

    def test_out_of_range_is_index_error(self, cl2):
        with pytest.raises(IndexError):
            Multivector(cl2)[4]

    def test_non_integer_index(self, cl2):
        with pytest.raises(TypeError):
            Multivector(cl2)[1.5]


# ── Queries ───────────────────────────────────────────────────────────

class TestQueries:

    def test_grade_projection_keeps_one_grade(self, algebra):
        torch.manual_seed(0)
        mv = Multivector(algebra, torch.randn(algebra.dim, dtype=torch.float64))
        for k in range(algebra.n + 1):
            proj = mv.grade_projection(k)
            for blade in range(algebra.dim):
                if bin(blade).count("1") == k:
                    assert proj[blade] == mv[blade]
                else:
                    assert proj[blade] == 0.0

    def test_grades_sum_to_whole(self, algebra):
        torch.manual_seed(1)
        mv = Multivector(algebra, torch.randn(algebra.dim, dtype=torch.float64))
        total = Multivector(algebra)
        for k in range(algebra.num_grades):
            total = total + mv.grade(k)
        assert total == mv

    @pytest.mark.parametrize("k", [-1, 4, 10])
    def test_grade_outside_range_is_zero(self, e3, k):
        mv = Multivector(e3, [1.0] * 8)
        assert mv.grade_projection(k).is_zero()

    def test_base_blade_round_trip(self, algebra):
        for blade in range(algebra.dim):
            mv = Multivector.base_blade(algebra, blade)
            grade = bin(blade).count("1")
            assert mv.grade_projection(grade) == mv
            for k in range(algebra.n + 2):
                if k != grade:
                    assert mv.grade_projection(k).is_zero()

    def test_is_scalar(self, e3):
        assert Multivector(e3, [3.0]).is_scalar()
        assert Multivector(e3).is_scalar()
        assert not Multivector(e3, [3.0, 0.0, 0.0, 1e-300]).is_scalar()
        assert not Multivector.base_blade(e3, 7).is_scalar()

    def test_is_zero_exact(self, e3):
        assert Multivector(e3).is_zero()
        assert not Multivector(e3, [0.0, 1e-15]).is_zero()

    def test_is_zero_with_tolerance(self, e3):
        mv = Multivector(e3, [1e-12, -1e-12, 0.0, 5e-11])
        assert not mv.is_zero()
        assert mv.is_zero(1e-10)
        assert mv.is_zero(5e-11)
        assert not mv.is_zero(1e-11)

    @pytest.mark.parametrize("k", [1.5, True, "1"])
    def test_grade_must_be_integer(self, e3, k):
        mv = Multivector(e3, [1.0] * 8)
        with pytest.raises(TypeError):
            mv.grade_projection(k)

    def test_grade_accepts_integer_like(self, e3):
        mv = Multivector(e3, [1.0] * 8)
        assert mv.grade_projection(torch.tensor(2)) == mv.grade(2)

    def test_is_zero_negative_tolerance(self, e3):
        with pytest.raises(ValueError):
            Multivector(e3).is_zero(-1.0)

    def test_reverse(self, e3):
        e1 = e3.base_blade(1)
        e12 = e3.base_blade(3)
        e123 = e3.base_blade(7)
        assert ~e1 == e1
        assert ~e12 == -e12
        assert e12.reverse() == -e12
        assert ~e123 == -e123
        # Reversion is an anti-automorphism
        a = Multivector(e3, [1.0, 2.0, -1.0, 0.5, 3.0, 0.0, 1.5, -2.0])
        b = Multivector(e3, [0.5, -1.0, 2.0, 1.0, 0.0, 4.0, -0.5, 1.0])
        assert ~(a * b) == (~b) * (~a)


# ── Equality and hashing ──────────────────────────────────────────────

class TestEquality:

    def test_within_tolerance(self, e3):
        a = Multivector(e3, [1.0, 2.0])
        assert a == Multivector(e3, [1.0 + 5e-11, 2.0 - 5e-11])
        assert a != Multivector(e3, [1.0 + 1e-9, 2.0])

    def test_dimension_mismatch_is_inequality(self, e3, cl2):
        assert Multivector(e3, [1.0]) != Multivector(cl2, [1.0])

    def test_other_types(self, e3):
        assert Multivector(e3, [1.0]) != 1.0
        assert not (Multivector(e3, [1.0]) == "1")

    def test_equal_objects_hash_equal(self, e3):
        a = Multivector(e3, [1.0, 2.0])
        b = Multivector(e3, [1.0 + 1e-12, 2.0])
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_digest_tracks_exact_values(self, e3):
        a = Multivector(e3, [1.0, 2.0])
        assert a.digest() == Multivector(e3, [1.0, 2.0]).digest()
        assert a.digest() != Multivector(e3, [1.0 + 1e-12, 2.0]).digest()


# ── Display ───────────────────────────────────────────────────────────

class TestDisplay:

    def test_blade_names(self):
        assert blade_name(0) == "1"
        assert blade_name(1) == "e1"
        assert blade_name(3) == "e12"
        assert blade_name(5) == "e13"
        assert blade_name(7) == "e123"
        assert blade_names(configure(2, 0, 0)) == ["1", "e1", "e2", "e12"]

    def test_zero(self, e3):
        assert str(Multivector(e3)) == "0"

    def test_terms(self, cl2):
        z = Multivector(cl2, [2.0, 0.0, 0.0, -3.5])
        assert str(z) == "2.0000*1 + -3.5000*e12"
        assert format_multivector(z, precision=1) == "2.0*1 + -3.5*e12"

    def test_repr(self, cl2):
        assert repr(Multivector(cl2, [1.0])) == "Multivector(Cl(0,2,0), [1.0, 0.0, 0.0, 0.0])"
