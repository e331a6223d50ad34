# SGA: Signature-configurable Geometric Algebra
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want 
# the industry to build upon this "unbending" paradigm.

"""Dense geometric (Clifford) algebra of configurable signature.

Provides the signature, structure-constant table, algebra context,
multivector value type and its textual rendering.
"""

__version__ = "0.1.0"

from .errors import (
    SGAError,
    InvalidSignature,
    DimensionMismatch,
    AlgebraMismatch,
    IndexOutOfRange,
)
from .signature import Signature, MAX_GENERATORS
from .algebra import AlgebraContext, StructureConstantTable, blade_product, configure
from .multivector import Multivector, EQUALITY_TOLERANCE
from .display import blade_name, blade_names, format_multivector

__all__ = [
    "__version__",
    # errors
    "SGAError",
    "InvalidSignature",
    "DimensionMismatch",
    "AlgebraMismatch",
    "IndexOutOfRange",
    # algebra
    "Signature",
    "MAX_GENERATORS",
    "AlgebraContext",
    "StructureConstantTable",
    "blade_product",
    "configure",
    # multivector
    "Multivector",
    "EQUALITY_TOLERANCE",
    # display
    "blade_name",
    "blade_names",
    "format_multivector",
]
