"""Fixed-topology feed-forward regressor for gas prices."""

from __future__ import annotations

from typing import Sequence

import torch
from torch import Tensor, nn
from torch.nn import functional as F

INPUT_DIM = 3
HIDDEN_DIMS = (16, 8)
OUTPUT_DIM = 1


class GasPriceModel(nn.Module):
    """Three linear layers ``3 -> 16 -> 8 -> 1`` with ReLU between them.

    The output layer is linear so the prediction is unconstrained in sign.
    """

    def __init__(self, *, device: torch.device | str = "cpu") -> None:
        super().__init__()
        device = torch.device(device)
        self.fc1 = nn.Linear(INPUT_DIM, HIDDEN_DIMS[0], device=device)
        self.fc2 = nn.Linear(HIDDEN_DIMS[0], HIDDEN_DIMS[1], device=device)
        self.fc3 = nn.Linear(HIDDEN_DIMS[1], OUTPUT_DIM, device=device)

    @property
    def device(self) -> torch.device:
        """Device holding the parameters; follows ``.to(...)`` moves."""

        return self.fc1.weight.device

    def forward(self, x: Tensor) -> Tensor:
        """Return predictions of shape ``(batch, 1)``."""

        if x.ndim == 1:
            x = x.unsqueeze(0)
        if x.ndim != 2 or x.size(-1) != INPUT_DIM:
            raise ValueError(f"inputs must have shape (batch, {INPUT_DIM})")
        x = F.relu(self.fc1(x))
        x = F.relu(self.fc2(x))
        return self.fc3(x)

    @torch.no_grad()
    def predict(self, features: Sequence[float]) -> float:
        """Predict the price for a single ``(prev_avg, hour, high_bids)`` triple."""

        if len(features) != INPUT_DIM:
            raise ValueError(f"expected {INPUT_DIM} features, got {len(features)}")
        inputs = torch.tensor([list(features)], dtype=torch.float32, device=self.device)
        return float(self.forward(inputs).item())


__all__ = ["GasPriceModel", "HIDDEN_DIMS", "INPUT_DIM", "OUTPUT_DIM"]
