# SGA: Signature-configurable Geometric Algebra
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want 
# the industry to build upon this "unbending" paradigm.

"""Blade names and textual rendering of multivectors."""


def blade_name(blade: int) -> str:
    """Return a human-readable blade name from a basis-blade index.

    Examples:
        blade=0  -> '1'      (scalar)
        blade=1  -> 'e1'     (grade-1)
        blade=3  -> 'e12'    (grade-2, binary 0011 -> bits 0 and 1)
        blade=7  -> 'e123'   (pseudoscalar of a 3D algebra)
    """
    if blade == 0:
        return "1"
    bits = [i + 1 for i in range(blade.bit_length()) if blade & (1 << i)]
    return "e" + "".join(str(b) for b in bits)


def blade_names(algebra) -> list:
    """Return a list of blade names for every basis element of *algebra*."""
    return [blade_name(i) for i in range(algebra.dim)]


def format_multivector(mv, precision: int = 4) -> str:
    """Render nonzero terms as ``'<coef>*<blade>'`` joined by ``' + '``.

    A unit e12 renders as ``'1.0000*e12'``, the zero multivector as ``'0'``.
    """
    parts = [
        f"{coef:.{precision}f}*{blade_name(blade)}"
        for blade, coef in enumerate(mv.tolist())
        if coef != 0.0
    ]
    if not parts:
        return "0"
    return " + ".join(parts)
