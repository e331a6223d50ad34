# SGA: Signature-configurable Geometric Algebra
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want 
# the industry to build upon this "unbending" paradigm.

"""Operand validation for the multivector kernels.

Checks raise the library's own errors instead of asserting, so they stay
active under ``python -O``.
"""

import operator

import torch

from sga.errors import AlgebraMismatch, DimensionMismatch, IndexOutOfRange


def check_multivector(x: torch.Tensor, algebra, name: str = "x") -> None:
    """Raise unless *x* looks like a coefficient tensor for *algebra*.

    Checks ``x.ndim >= 1`` and ``x.shape[-1] == algebra.dim``.
    """
    if x.ndim < 1:
        raise DimensionMismatch(
            f"{name}: expected ndim >= 1, got shape {tuple(x.shape)}"
        )
    if x.shape[-1] != algebra.dim:
        raise DimensionMismatch(
            f"{name}: last dim should be {algebra.dim} (algebra dim), "
            f"got {x.shape[-1]} (shape {tuple(x.shape)})"
        )


def check_same_algebra(a, b, op: str = "op") -> None:
    """Raise unless multivectors *a* and *b* were built under one algebra."""
    if a.algebra.dim != b.algebra.dim:
        raise DimensionMismatch(
            f"{op}: operand dims differ ({a.algebra.dim} vs {b.algebra.dim})"
        )
    if a.algebra.signature != b.algebra.signature:
        raise AlgebraMismatch(
            f"{op}: operands come from {a.algebra.signature} "
            f"and {b.algebra.signature}"
        )
    if a.algebra.device != b.algebra.device:
        raise AlgebraMismatch(
            f"{op}: operands live on {a.algebra.device!r} and {b.algebra.device!r}"
        )


def check_blade(blade, dim: int, name: str = "blade") -> int:
    """Return *blade* as an ``int`` after checking it lies in ``[0, dim)``."""
    if isinstance(blade, bool):
        raise TypeError(f"{name}: blade ids are ints, got bool")
    blade = operator.index(blade)
    if not 0 <= blade < dim:
        raise IndexOutOfRange(f"{name}: blade id {blade} outside [0, {dim})")
    return blade
