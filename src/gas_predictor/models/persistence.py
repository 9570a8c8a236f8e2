"""Save and restore :class:`GasPriceModel` parameters."""
from __future__ import annotations

from pathlib import Path

import torch

from ..config import DEFAULT_MODEL_PATH
from .network import GasPriceModel


def save_model(model: GasPriceModel, path: str | Path = DEFAULT_MODEL_PATH) -> Path:
    """Write the model's parameter tensors to ``path``."""

    model_path = Path(path)
    torch.save(model.state_dict(), model_path)
    return model_path


def load_model(
    path: str | Path = DEFAULT_MODEL_PATH,
    *,
    device: torch.device | str = "cpu",
) -> GasPriceModel:
    """Rebuild the fixed topology and load parameters saved by :func:`save_model`.

    A missing file raises ``FileNotFoundError``. Malformed files and tensors
    that do not match the topology raise whatever ``torch.load`` or the strict
    ``load_state_dict`` raise.
    """

    model_path = Path(path)
    if not model_path.exists():
        raise FileNotFoundError(f"Model file not found: {model_path}")
    state = torch.load(model_path, map_location=device, weights_only=True)
    model = GasPriceModel(device=device)
    model.load_state_dict(state)
    model.eval()
    return model


__all__ = ["load_model", "save_model"]
