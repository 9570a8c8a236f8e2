"""Full-batch training loop for :class:`GasPriceModel`."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import torch
from torch import Tensor
from torch.nn import functional as F
from tqdm.auto import tqdm

from ..models.network import GasPriceModel

EPOCHS = 500
LEARNING_RATE = 0.01
ADAM_EPS = 1e-5
LOG_INTERVAL = 100


@dataclass
class TrainingHistory:
    """Loss recorded before each optimisation step of :meth:`GasModelTrainer.fit`."""

    losses: list[float] = field(default_factory=list)

    @property
    def final_loss(self) -> float:
        if not self.losses:
            raise ValueError("no training steps recorded")
        return self.losses[-1]


class GasModelTrainer:
    """Adam/MSE optimisation over the whole dataset at every step.

    There is no validation split, early stopping or NaN detection; training
    always runs for the requested number of steps.
    """

    def __init__(
        self,
        model: GasPriceModel,
        *,
        optimizer: Optional[torch.optim.Optimizer] = None,
        log_interval: int = LOG_INTERVAL,
        progress: bool = False,
    ) -> None:
        if log_interval <= 0:
            raise ValueError("log_interval must be positive")
        self.model = model
        self.optimizer = optimizer or torch.optim.Adam(model.parameters(), lr=LEARNING_RATE, eps=ADAM_EPS)
        self.log_interval = log_interval
        self.progress = progress
        self.step = 0

    @property
    def device(self) -> torch.device:
        return self.model.device

    def train_step(self, features: Tensor, targets: Tensor) -> float:
        """Run one optimisation step and return the loss before the update."""

        self.model.train()
        features, targets = self._move_batch(features, targets)
        predictions = self.model(features)
        loss = F.mse_loss(predictions, targets, reduction="mean")
        self.optimizer.zero_grad()
        loss.backward()
        self.optimizer.step()
        self.step += 1
        return float(loss.detach())

    @torch.no_grad()
    def evaluate(self, features: Tensor, targets: Tensor) -> float:
        """Mean squared error of the current parameters."""

        self.model.eval()
        features, targets = self._move_batch(features, targets)
        return float(F.mse_loss(self.model(features), targets, reduction="mean"))

    def fit(self, features: Tensor, targets: Tensor, *, epochs: int = EPOCHS) -> TrainingHistory:
        """Train for ``epochs`` full-batch steps, printing the loss periodically."""

        history = TrainingHistory()
        for epoch in tqdm(range(epochs), desc="Training", disable=not self.progress):
            loss = self.train_step(features, targets)
            history.losses.append(loss)
            if epoch % self.log_interval == 0:
                tqdm.write(f"Epoch {epoch}: Loss = {loss:.4f}")
        return history

    def _move_batch(self, features: Tensor, targets: Tensor) -> tuple[Tensor, Tensor]:
        return features.to(self.device), targets.to(self.device)


__all__ = ["ADAM_EPS", "EPOCHS", "LEARNING_RATE", "LOG_INTERVAL", "GasModelTrainer", "TrainingHistory"]
