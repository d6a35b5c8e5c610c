from __future__ import annotations
from flextime.core.registry import KernelRegistry
from flextime.engines.kernels import ALL_KERNELS

def build_registry() -> KernelRegistry:
    return KernelRegistry(dict(ALL_KERNELS))
