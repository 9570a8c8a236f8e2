"""Closed-form synthetic dataset of hourly gas price samples."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np
import torch
from torch import Tensor

NUM_SAMPLES = 96
VARIANTS_PER_HOUR = 4

_PI = np.float32(np.pi)


@dataclass(frozen=True, slots=True)
class Sample:
    """One labelled observation: three input features and the target price."""

    prev_avg: float
    hour: float
    high_bids: float
    price: float

    @property
    def features(self) -> Tuple[float, float, float]:
        return (self.prev_avg, self.hour, self.high_bids)


def _feature_columns() -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    # Single precision throughout, evaluated left to right, so the values are
    # identical on every run. cos/sin go through float64 and are rounded once:
    # numpy's float32 trig kernels are not correctly rounded.
    index = np.arange(NUM_SAMPLES)
    hour = (index // VARIANTS_PER_HOUR).astype(np.float32)
    variant = (index % VARIANTS_PER_HOUR).astype(np.float32)

    prev_avg = np.float32(40.0) + hour * np.float32(1.5) + variant * np.float32(3.0)
    angle = hour * _PI / np.float32(12.0)
    cos_angle = np.cos(angle.astype(np.float64)).astype(np.float32)
    sin_angle = np.sin(angle.astype(np.float64)).astype(np.float32)
    high_bids = np.clip(
        np.float32(0.5) + np.float32(0.3) * cos_angle,
        np.float32(0.0),
        np.float32(1.0),
    )

    hour_effect = np.float32(50.0) + np.float32(20.0) * sin_angle
    prev_effect = prev_avg * np.float32(0.8)
    bid_effect = high_bids * high_bids * np.float32(40.0)
    price = hour_effect + prev_effect + bid_effect
    return prev_avg, hour, high_bids, price.astype(np.float32)


def generate_samples() -> List[Sample]:
    """Return the 96 training samples in index order.

    Sample ``i`` belongs to ``hour = i // 4`` and ``variant = i % 4``. The
    features follow ``prev_avg = 40 + 1.5 * hour + 3 * variant`` and
    ``high_bids = clamp(0.5 + 0.3 * cos(hour * pi / 12), 0, 1)``; the target is
    ``50 + 20 * sin(hour * pi / 12) + 0.8 * prev_avg + 40 * high_bids ** 2``.
    """

    prev_avg, hour, high_bids, price = _feature_columns()
    return [
        Sample(
            prev_avg=float(prev_avg[i]),
            hour=float(hour[i]),
            high_bids=float(high_bids[i]),
            price=float(price[i]),
        )
        for i in range(NUM_SAMPLES)
    ]


def samples_to_tensors(
    samples: Sequence[Sample],
    *,
    device: torch.device | str = "cpu",
) -> Tuple[Tensor, Tensor]:
    """Stack samples into ``(N, 3)`` features and ``(N, 1)`` targets."""

    if not samples:
        raise ValueError("samples must not be empty")
    features = torch.tensor([list(s.features) for s in samples], dtype=torch.float32, device=device)
    targets = torch.tensor([[s.price] for s in samples], dtype=torch.float32, device=device)
    return features, targets


def generate_dataset(*, device: torch.device | str = "cpu") -> Tuple[Tensor, Tensor]:
    """Return the full training set as ``(features[96, 3], targets[96, 1])``."""

    return samples_to_tensors(generate_samples(), device=device)


__all__ = ["NUM_SAMPLES", "Sample", "generate_dataset", "generate_samples", "samples_to_tensors"]
