from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List

from .types import ParserKernel

@dataclass
class KernelRegistry:
    _kernels: Dict[str, ParserKernel]

    def get(self, name: str) -> ParserKernel:
        if name not in self._kernels:
            raise KeyError(f"Unknown kernel '{name}'. Available: {sorted(self._kernels)}")
        return self._kernels[name]

    def list(self) -> List[str]:
        return sorted(self._kernels.keys())

    def register(self, kernel: ParserKernel, *, overwrite: bool = False) -> None:
        if (not overwrite) and (kernel.name in self._kernels):
            raise KeyError(f"Kernel '{kernel.name}' already exists. Use overwrite=True to replace.")
        self._kernels[kernel.name] = kernel
