"""Single-point inference helpers."""
from __future__ import annotations

from typing import Sequence

from .models.network import GasPriceModel

# (prev_avg, hour, high_bids)
DEFAULT_FEATURES = (55.0, 14.0, 0.7)


def predict_price(model: GasPriceModel, features: Sequence[float] = DEFAULT_FEATURES) -> float:
    model.eval()
    return model.predict(features)


def format_prediction(value: float) -> str:
    return f"Predicted gas price: {value:.2f}"


__all__ = ["DEFAULT_FEATURES", "format_prediction", "predict_price"]
