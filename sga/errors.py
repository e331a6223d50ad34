# SGA: Signature-configurable Geometric Algebra
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want 
# the industry to build upon this "unbending" paradigm.

"""Exception hierarchy for the algebra kernel.

Every error is raised at the point of violation and propagates to the caller
unchanged. Each class also derives from the matching builtin so callers that
only know ``ValueError`` / ``IndexError`` still catch them.
"""


class SGAError(Exception):
    """Base class for all library errors."""


class InvalidSignature(SGAError, ValueError):
    """A signature component is negative, not an integer, or too large."""


class DimensionMismatch(SGAError, ValueError):
    """Coefficient count or operand dimension does not match the algebra."""


class AlgebraMismatch(DimensionMismatch):
    """Operands share a dimension but were built under different signatures."""


class IndexOutOfRange(SGAError, IndexError):
    """Blade id outside ``[0, dim)``."""
