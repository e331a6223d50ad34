# SGA: Signature-configurable Geometric Algebra
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want 
# the industry to build upon this "unbending" paradigm.

"""Multivector Container Class.

Provides an immutable value type around a dense coefficient tensor, one
float64 coefficient per blade, with operator overloading (``A * B`` for the
geometric product, ``A ^ B`` for the wedge product).
"""

import torch

from sga.algebra import AlgebraContext
from sga.display import format_multivector
from sga.errors import DimensionMismatch
from sga.validation import check_blade, check_same_algebra

# Absolute per-coefficient tolerance used by ``==``
EQUALITY_TOLERANCE = 1e-10


def _coefficient_tensor(algebra: AlgebraContext, coefficients) -> torch.Tensor:
    """Copy *coefficients* into a fresh ``[dim]`` float64 tensor, zero padded."""
    if isinstance(coefficients, torch.Tensor):
        values = coefficients.detach().to(device=algebra.device, dtype=torch.float64)
    else:
        values = torch.tensor(list(coefficients), dtype=torch.float64, device=algebra.device)

    if values.ndim != 1:
        raise DimensionMismatch(
            f"coefficients must be 1-D, got shape {tuple(values.shape)}"
        )
    count = values.shape[0]
    if count > algebra.dim:
        raise DimensionMismatch(
            f"got {count} coefficients, but {algebra.signature} "
            f"has only {algebra.dim} blades"
        )

    out = torch.zeros(algebra.dim, dtype=torch.float64, device=algebra.device)
    out[:count] = values
    return out


class Multivector:
    """Immutable multivector over the blades of one algebra.

    Every operator returns a new instance; operands are never modified.
    Binary operators require both operands to come from the same algebra.

    Attributes:
        algebra (AlgebraContext): The algebra the multivector was built in.
    """

    def __init__(self, algebra: AlgebraContext, coefficients=()):
        """Initializes a Multivector.

        Args:
            algebra (AlgebraContext): The algebra instance.
            coefficients: Sequence or 1-D tensor of at most ``algebra.dim``
                values in blade-id order. Missing trailing values are zero.

        Raises:
            DimensionMismatch: If more than ``algebra.dim`` values are given.
        """
        self.algebra = algebra
        self._coeffs = _coefficient_tensor(algebra, coefficients)

    @classmethod
    def _wrap(cls, algebra: AlgebraContext, tensor: torch.Tensor) -> "Multivector":
        # Kernel outputs are fresh tensors, no copy needed
        mv = cls.__new__(cls)
        mv.algebra = algebra
        mv._coeffs = tensor
        return mv

    @classmethod
    def from_coefficients(cls, algebra: AlgebraContext, coefficients) -> "Multivector":
        return cls(algebra, coefficients)

    @classmethod
    def base_blade(cls, algebra: AlgebraContext, blade: int) -> "Multivector":
        """Coefficient 1.0 at *blade*, zero elsewhere.

        Raises:
            IndexOutOfRange: If *blade* is outside ``[0, dim)``.
        """
        blade = check_blade(blade, algebra.dim)
        tensor = torch.zeros(algebra.dim, dtype=torch.float64, device=algebra.device)
        tensor[blade] = 1.0
        return cls._wrap(algebra, tensor)

    @classmethod
    def from_vector(cls, algebra: AlgebraContext, components) -> "Multivector":
        """Creates a grade-1 multivector; component ``i`` lands on blade ``1 << i``."""
        vectors = torch.as_tensor(components, dtype=torch.float64, device=algebra.device)
        if vectors.ndim != 1:
            raise DimensionMismatch(
                f"from_vector: expected 1-D components, got shape {tuple(vectors.shape)}"
            )
        return cls._wrap(algebra, algebra.embed_vector(vectors))

    # ------------------------------------------------------------------
    # Coefficient access
    # ------------------------------------------------------------------

    @property
    def dimension(self) -> int:
        return self._coeffs.shape[0]

    @property
    def tensor(self) -> torch.Tensor:
        """A copy of the coefficient tensor."""
        return self._coeffs.clone()

    @property
    def scalar(self) -> float:
        return float(self._coeffs[0])

    def tolist(self) -> list:
        return self._coeffs.tolist()

    def __getitem__(self, blade) -> float:
        blade = check_blade(blade, self.dimension)
        return float(self._coeffs[blade])

    def __len__(self):
        return self.dimension

    def __iter__(self):
        return iter(self.tolist())

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def grade_projection(self, k: int) -> "Multivector":
        """Keeps the blades of grade *k*; any other *k* gives zero."""
        return Multivector._wrap(self.algebra, self.algebra.grade_projection(self._coeffs, k))

    grade = grade_projection

    def is_scalar(self) -> bool:
        """True iff every non-scalar coefficient is exactly zero."""
        return not bool(torch.any(self._coeffs[1:] != 0.0))

    def is_zero(self, tolerance: float = 0.0) -> bool:
        """True iff every ``|coefficient| <= tolerance`` (exact zero for 0)."""
        if tolerance < 0:
            raise ValueError(f"tolerance must be non-negative, got {tolerance}")
        if tolerance == 0:
            return bool(torch.all(self._coeffs == 0.0))
        return bool(torch.all(self._coeffs.abs() <= tolerance))

    def reverse(self) -> "Multivector":
        return Multivector._wrap(self.algebra, self.algebra.reverse(self._coeffs))

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __add__(self, other):
        """Element-wise addition."""
        if not isinstance(other, Multivector):
            return NotImplemented
        check_same_algebra(self, other, "+")
        return Multivector._wrap(self.algebra, self._coeffs + other._coeffs)

    def __sub__(self, other):
        """Element-wise subtraction."""
        if not isinstance(other, Multivector):
            return NotImplemented
        check_same_algebra(self, other, "-")
        return Multivector._wrap(self.algebra, self._coeffs - other._coeffs)

    def __neg__(self):
        return Multivector._wrap(self.algebra, -self._coeffs)

    def __mul__(self, other):
        """Geometric Product (A * B) or scalar scaling (A * s)."""
        if isinstance(other, Multivector):
            check_same_algebra(self, other, "*")
            res = self.algebra.geometric_product(self._coeffs, other._coeffs)
            return Multivector._wrap(self.algebra, res)
        elif isinstance(other, (int, float)):
            return Multivector._wrap(self.algebra, self._coeffs * float(other))
        else:
            return NotImplemented

    def __rmul__(self, other):
        """Scalar scaling (s * A)."""
        if isinstance(other, (int, float)):
            return Multivector._wrap(self.algebra, float(other) * self._coeffs)
        return NotImplemented

    def __xor__(self, other):
        """Wedge Product (A ^ B)."""
        if not isinstance(other, Multivector):
            return NotImplemented
        check_same_algebra(self, other, "^")
        return Multivector._wrap(self.algebra, self.algebra.wedge(self._coeffs, other._coeffs))

    def __invert__(self):
        """Reversion (~A)."""
        return self.reverse()

    def __eq__(self, other):
        """Equal iff same algebra and device and every coefficient within 1e-10."""
        if not isinstance(other, Multivector):
            return NotImplemented
        if self.dimension != other.dimension:
            return False
        if self.algebra.signature != other.algebra.signature:
            return False
        if self.algebra.device != other.algebra.device:
            return False
        diff = (self._coeffs - other._coeffs).abs()
        return bool(torch.all(diff <= EQUALITY_TOLERANCE))

    def __hash__(self):
        """Hash of the signature only.

        Equality is tolerance based, so coefficients cannot take part. Every
        multivector of one algebra therefore shares a bucket, and sets or dict
        keys of many multivectors degrade to quadratic time; key on
        :meth:`digest` when exact values are what matters.
        """
        return hash((Multivector, self.algebra.signature))

    def digest(self) -> int:
        """Deterministic hash of the exact coefficients in blade order.

        Two multivectors that compare equal may still differ here when their
        coefficients carry floating-point noise.
        """
        return hash((self.algebra.signature, tuple(self.tolist())))

    def __str__(self):
        return format_multivector(self)

    def __repr__(self):
        return f"Multivector({self.algebra.signature}, {self.tolist()})"
