# SGA: Signature-configurable Geometric Algebra
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want 
# the industry to build upon this "unbending" paradigm.

"""OmegaConf configuration for algebra contexts.

The ``algebra`` block mirrors the constructor of
:class:`~sga.algebra.AlgebraContext`::

    algebra:
      p: 1
      q: 3
      r: 0
      device: cpu
"""

from omegaconf import DictConfig, OmegaConf

from sga.algebra import AlgebraContext, configure

DEFAULTS = OmegaConf.create({
    "algebra": {"p": 0, "q": 0, "r": 0, "device": "cpu"},
})


def load_config(path=None, overrides=None) -> DictConfig:
    """Merge defaults, an optional YAML file and dotlist overrides.

    Args:
        path: Optional YAML file.
        overrides: Optional dotlist, e.g. ``["algebra.p=3"]``.

    Returns:
        DictConfig: The merged configuration.
    """
    layers = [DEFAULTS]
    if path is not None:
        layers.append(OmegaConf.load(path))
    if overrides:
        layers.append(OmegaConf.from_dotlist(list(overrides)))
    return OmegaConf.merge(*layers)


def algebra_from_config(cfg: DictConfig) -> AlgebraContext:
    """Builds the algebra described by ``cfg.algebra``."""
    return configure(
        cfg.algebra.p,
        cfg.algebra.get('q', 0),
        cfg.algebra.get('r', 0),
        device=cfg.algebra.get('device', 'cpu'),
    )
