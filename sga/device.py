# SGA: Signature-configurable Geometric Algebra
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want 
# the industry to build upon this "unbending" paradigm.

"""Device resolution for table and coefficient tensors."""

import torch




def resolve_device(device: str = "auto") -> str:
    """Resolve ``'auto'`` to the best available device.

    Priority: cuda > cpu. MPS is skipped because it has no float64 support.
    """
    if device != "auto":
        return str(device)
    if torch.cuda.is_available():
        return "cuda"
    return "cpu"
