# src/bert_qa/engine/platform.py

from typing import Protocol

import torch


class Platform(Protocol):
    """Capability queries for the hardware the engine would run on."""

    def is_gpu_supported(self) -> bool: ...

    def is_nnapi_supported(self) -> bool: ...


class TorchPlatform:
    """Answers capability queries from the installed torch build."""

    def is_gpu_supported(self) -> bool:
        return torch.cuda.is_available()

    def is_nnapi_supported(self) -> bool:
        # The platform's native neural-network accelerator (Metal on Apple silicon)
        return torch.backends.mps.is_available()
