"""Runtime configuration shared by the training and inference scripts."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import torch

DEFAULT_MODEL_PATH = "model.bin"
DEFAULT_DEVICE = "cpu"


@dataclass(slots=True)
class RuntimeConfig:
    """Where the model lives and where it runs.

    Parameters
    ----------
    device:
        Device used for model construction and every tensor created from the
        dataset or inference inputs. Passed explicitly; nothing relies on a
        process-wide default device.
    model_path:
        Location of the serialized parameters written after training and read
        before inference.
    seed:
        Optional seed for ``torch.manual_seed``. Parameter initialisation is
        the only stochastic step, so fixing it makes a training run
        reproducible.
    """

    device: str = DEFAULT_DEVICE
    model_path: str = DEFAULT_MODEL_PATH
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if not self.device:
            raise ValueError("device must be a non-empty string")
        if not self.model_path:
            raise ValueError("model_path must be a non-empty string")
        if self.seed is not None and self.seed < 0:
            raise ValueError("seed must be non-negative")

    def torch_device(self) -> torch.device:
        return torch.device(self.device)

    def apply_seed(self) -> None:
        if self.seed is not None:
            torch.manual_seed(self.seed)


__all__ = ["DEFAULT_DEVICE", "DEFAULT_MODEL_PATH", "RuntimeConfig"]
