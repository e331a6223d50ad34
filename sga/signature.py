# SGA: Signature-configurable Geometric Algebra
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want 
# the industry to build upon this "unbending" paradigm.

"""Algebra signature ``Cl(p, q, r)``."""

from dataclasses import dataclass

from sga.errors import InvalidSignature

# Dense tables hold dim^2 entries; 2^12 blades already means 16M per table.
MAX_GENERATORS = 12


@dataclass(frozen=True)
class Signature:
    """Counts of basis vectors squaring to +1, -1 and 0.

    Basis vector ``i`` (0-indexed) squares to ``+1`` if ``i < p``, to ``-1``
    if ``p <= i < p + q`` and to ``0`` otherwise.

    Attributes:
        p (int): Positive dimensions.
        q (int): Negative dimensions.
        r (int): Degenerate (null) dimensions.
    """

    p: int
    q: int = 0
    r: int = 0

    def __post_init__(self):
        for name in ("p", "q", "r"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidSignature(
                    f"{name} must be an integer, got {value!r}"
                )
            if value < 0:
                raise InvalidSignature(f"{name} must be non-negative, got {value}")
        if self.n > MAX_GENERATORS:
            raise InvalidSignature(
                f"p + q + r must be <= {MAX_GENERATORS}, got {self.n}"
            )

    @property
    def n(self) -> int:
        """Number of basis vectors."""
        return self.p + self.q + self.r

    @property
    def dim(self) -> int:
        """Number of blades (2^n)."""
        return 1 << self.n

    @property
    def negative_mask(self) -> int:
        return ((1 << self.q) - 1) << self.p

    @property
    def null_mask(self) -> int:
        return ((1 << self.r) - 1) << (self.p + self.q)

    def metric(self, i: int) -> int:
        """Square of basis vector ``i``: +1, -1 or 0."""
        if not 0 <= i < self.n:
            raise IndexError(f"basis vector {i} outside [0, {self.n})")
        if i < self.p:
            return 1
        if i < self.p + self.q:
            return -1
        return 0

    def __str__(self):
        return f"Cl({self.p},{self.q},{self.r})"
