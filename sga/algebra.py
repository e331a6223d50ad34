# SGA: Signature-configurable Geometric Algebra
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want 
# the industry to build upon this "unbending" paradigm.

"""Structure constants and the algebra context.

A blade id is a bitmask: bit ``i`` set means basis vector ``e_{i+1}`` takes
part in the blade. For every ordered pair of blades ``(a, b)`` the geometric
product is ``sign(a, b) * e_{a XOR b}``, so one ``dim x dim`` table of result
blades and one of signs fully describe the algebra.
"""

import operator
import time

import torch

from sga.device import resolve_device
from sga.errors import DimensionMismatch
from sga.log import get_logger
from sga.signature import Signature
from sga.validation import check_blade, check_multivector

logger = get_logger(__name__)


def _popcount(t: torch.Tensor, n: int) -> torch.Tensor:
    """Count set bits among the low ``n`` bits of an integer tensor."""
    count = torch.zeros_like(t)
    for _ in range(n):
        count += t & 1
        t = t >> 1
    return count


def blade_product(a: int, b: int, signature: Signature):
    """Result blade and sign of ``e_a * e_b`` without a table.

    For every vector ``i`` of ``b`` each vector ``j > i`` of ``a`` is one
    transposition, so it flips the sign. Every vector present in both blades
    then contracts to its metric value, which kills the product when it is
    a null vector.

    Args:
        a (int): Left blade id.
        b (int): Right blade id.
        signature (Signature): Algebra signature.

    Returns:
        tuple[int, int]: ``(a ^ b, sign)`` with ``sign`` in ``{-1, 0, 1}``.
    """
    a = check_blade(a, signature.dim, "a")
    b = check_blade(b, signature.dim, "b")
    n = signature.n

    sign = 1
    for i in range(n):
        if not b & (1 << i):
            continue
        for j in range(i + 1, n):
            if a & (1 << j):
                sign = -sign

    common = a & b
    for i in range(n):
        if common & (1 << i):
            sign *= signature.metric(i)

    return a ^ b, sign


class StructureConstantTable:
    """Dense Cayley table of one signature.

    Built once, never mutated. Besides the raw ``masks`` / ``signs`` pair it
    keeps the tables the product kernels consume directly.

    Attributes:
        signature (Signature): The signature the table was built for.
        masks (torch.Tensor): ``[dim, dim]`` long, ``masks[a, b] = a ^ b``.
        signs (torch.Tensor): ``[dim, dim]`` float64, ``sign(a, b)``.
        gp_signs (torch.Tensor): ``gp_signs[i, k] = signs[i, i ^ k]``.
        outer_signs (torch.Tensor): ``gp_signs`` with every pair sharing a
            basis vector set to ``0.0``.
        grade_masks (list[torch.Tensor]): One bool mask per grade.
        rev_signs (torch.Tensor): Reversion sign per blade.
    """

    def __init__(self, signature: Signature, masks: torch.Tensor, signs: torch.Tensor):
        self.signature = signature
        self.masks = masks
        self.signs = signs

        n = signature.n
        indices = torch.arange(signature.dim, device=masks.device)

        # Gather signs into result-blade order for the product kernels
        self.gp_signs = torch.gather(signs, 1, masks)
        disjoint = (indices.unsqueeze(1) & masks) == 0
        self.outer_signs = torch.where(
            disjoint, self.gp_signs, torch.zeros_like(self.gp_signs)
        )

        grades = _popcount(indices, n)
        self.grade_masks = [grades == k for k in range(n + 1)]

        # Blade of grade k reverses with sign (-1)^(k(k-1)/2)
        self.rev_signs = (1 - 2 * ((grades * (grades - 1) // 2) & 1)).to(torch.float64)

    @classmethod
    def build(cls, signature: Signature, device: str = "cpu") -> "StructureConstantTable":
        """Compute the table for *signature*. Cost ``O(dim^2 * n)``."""
        n, dim = signature.n, signature.dim
        indices = torch.arange(dim, device=device)
        A = indices.unsqueeze(1)  # left blade, rows
        B = indices.unsqueeze(0)  # right blade, cols

        masks = A ^ B

        # 1. Reordering: vector i of B passes every vector j > i of A
        swaps = torch.zeros((dim, dim), dtype=torch.long, device=device)
        for i in range(n):
            b_i = (B >> i) & 1
            a_above = _popcount(A >> (i + 1), n)
            swaps += b_i * a_above
        reorder_sign = 1 - 2 * (swaps & 1)

        # 2. Contraction: negative vectors flip, null vectors kill
        shared = A & B
        metric_sign = 1 - 2 * (_popcount(shared & signature.negative_mask, n) & 1)
        alive = ((shared & signature.null_mask) == 0).to(torch.long)

        signs = (reorder_sign * metric_sign * alive).to(torch.float64)
        return cls(signature, masks, signs)

    @property
    def dim(self) -> int:
        return self.signature.dim

    def mask(self, a: int, b: int) -> int:
        """Result blade of ``e_a * e_b``."""
        a = check_blade(a, self.dim, "a")
        b = check_blade(b, self.dim, "b")
        return int(self.masks[a, b])

    def sign(self, a: int, b: int) -> float:
        """Scalar multiplier of ``e_a * e_b``: -1.0, 0.0 or 1.0."""
        a = check_blade(a, self.dim, "a")
        b = check_blade(b, self.dim, "b")
        return float(self.signs[a, b])


class AlgebraContext:
    """One Clifford algebra ``Cl(p, q, r)`` and its structure constants.

    Contexts are plain values: every multivector keeps a reference to the
    context it was built with, and any number of contexts can coexist.
    Tables are shared between contexts with the same signature and device.

    Attributes:
        signature (Signature): ``(p, q, r)``.
        p (int): Positive signature dimensions.
        q (int): Negative signature dimensions.
        r (int): Degenerate (null) dimensions.
        n (int): Total dimensions (p + q + r).
        dim (int): Total basis elements (2^n).
        device (str): Device holding the tables.
        table (StructureConstantTable): The precomputed table.
    """
    _CACHED_TABLES = {}

    def __init__(self, p: int, q: int = 0, r: int = 0, device: str = "cpu"):
        """Initialize the algebra and fetch or build its table.

        Args:
            p (int): Positive dimensions (+1).
            q (int, optional): Negative dimensions (-1). Defaults to 0.
            r (int, optional): Degenerate dimensions (0). Defaults to 0.
            device (str, optional): Table device, ``'auto'`` allowed.
                Defaults to 'cpu'.

        Raises:
            InvalidSignature: If any component is negative or too large.
        """
        self.signature = Signature(p, q, r)
        self.p, self.q, self.r = p, q, r
        self.n = self.signature.n
        self.dim = self.signature.dim
        self.device = resolve_device(device)

        cache_key = (p, q, r, self.device)
        table = AlgebraContext._CACHED_TABLES.get(cache_key)
        if table is None:
            start = time.perf_counter()
            table = StructureConstantTable.build(self.signature, self.device)
            AlgebraContext._CACHED_TABLES[cache_key] = table
            logger.debug(
                "Built structure constants for %s: dim=%d in %.3fs",
                self.signature, self.dim, time.perf_counter() - start,
            )
        else:
            logger.debug("Reusing cached structure constants for %s", self.signature)
        self.table = table

    def __repr__(self):
        return f"AlgebraContext({self.signature}, device={self.device!r})"

    @property
    def num_grades(self) -> int:
        """Counts the number of grades (n + 1)."""
        return self.n + 1

    def mask(self, a: int, b: int) -> int:
        return self.table.mask(a, b)

    def sign(self, a: int, b: int) -> float:
        return self.table.sign(a, b)

    def multivector(self, coefficients=()):
        """Shorthand for :class:`~sga.multivector.Multivector` in this algebra."""
        from sga.multivector import Multivector
        return Multivector(self, coefficients)

    def base_blade(self, blade: int):
        """Unit multivector at *blade*."""
        from sga.multivector import Multivector
        return Multivector.base_blade(self, blade)

    def embed_vector(self, vectors: torch.Tensor) -> torch.Tensor:
        """Injects vectors into the Grade-1 subspace.

        Args:
            vectors (torch.Tensor): Raw vectors [..., k] with k <= n.

        Returns:
            torch.Tensor: Multivector coefficients [..., dim].
        """
        if vectors.shape[-1] > self.n:
            raise DimensionMismatch(
                f"embed_vector: got {vectors.shape[-1]} components for n={self.n}"
            )
        batch_shape = vectors.shape[:-1]
        mv = torch.zeros(*batch_shape, self.dim, device=vectors.device, dtype=torch.float64)
        for i in range(vectors.shape[-1]):
            mv[..., 1 << i] = vectors[..., i]
        return mv

    def geometric_product(self, A: torch.Tensor, B: torch.Tensor) -> torch.Tensor:
        """Computes the Geometric Product.

        ``result[k] = sum_i A[i] * B[i ^ k] * sign(i, i ^ k)``, the full double
        sum over all blade pairs as one gather, multiply and reduce.

        Args:
            A (torch.Tensor): Left operand [..., dim].
            B (torch.Tensor): Right operand [..., dim].

        Returns:
            torch.Tensor: The product AB [..., dim].
        """
        check_multivector(A, self, "geometric_product(A)")
        check_multivector(B, self, "geometric_product(B)")
        return self._accumulate(A, B, self.table.gp_signs)

    def wedge(self, A: torch.Tensor, B: torch.Tensor) -> torch.Tensor:
        """Computes the wedge (outer) product A ^ B.

        Same sum as the geometric product, but blade pairs sharing any basis
        vector contribute exactly zero whatever their metric.

        Args:
            A (torch.Tensor): Left operand [..., dim].
            B (torch.Tensor): Right operand [..., dim].

        Returns:
            torch.Tensor: Wedge product A ^ B [..., dim].
        """
        check_multivector(A, self, "wedge(A)")
        check_multivector(B, self, "wedge(B)")
        return self._accumulate(A, B, self.table.outer_signs)

    def _accumulate(self, A: torch.Tensor, B: torch.Tensor, signs: torch.Tensor) -> torch.Tensor:
        # B_gathered[..., i, k] = B[..., i ^ k]
        B_gathered = B[..., self.table.masks]
        A_col = A.unsqueeze(-1)
        term = (A_col * signs) * B_gathered
        # Excluded pairs and zero coefficients are dropped, not multiplied by 0
        keep = (signs != 0) & (A_col != 0) & (B_gathered != 0)
        return torch.where(keep, term, torch.zeros((), dtype=term.dtype, device=term.device)).sum(dim=-2)

    def grade_projection(self, mv: torch.Tensor, grade: int) -> torch.Tensor:
        """Isolates a specific grade.

        Args:
            mv (torch.Tensor): Multivector [..., dim].
            grade (int): Target grade. Grades outside ``[0, n]`` give zero.

        Raises:
            TypeError: If *grade* is not an integer.

        Returns:
            torch.Tensor: Projected multivector.
        """
        check_multivector(mv, self, "grade_projection")
        if isinstance(grade, bool):
            raise TypeError("grade_projection: grade must be an int, got bool")
        grade = operator.index(grade)
        if not 0 <= grade <= self.n:
            return torch.zeros_like(mv)
        zero = torch.zeros((), dtype=mv.dtype, device=mv.device)
        return torch.where(self.table.grade_masks[grade], mv, zero)

    def reverse(self, mv: torch.Tensor) -> torch.Tensor:
        """Computes the reversion.

        Args:
            mv (torch.Tensor): Input multivector.

        Returns:
            torch.Tensor: Reversed multivector.
        """
        check_multivector(mv, self, "reverse")
        return mv * self.table.rev_signs


def configure(p: int, q: int = 0, r: int = 0, device: str = "cpu") -> AlgebraContext:
    """Create the algebra ``Cl(p, q, r)``.

    Raises:
        InvalidSignature: If any component is negative or too large.
    """
    algebra = AlgebraContext(p, q, r, device=device)
    logger.debug("Configured %s on %s (dim=%d)", algebra.signature, algebra.device, algebra.dim)
    return algebra
