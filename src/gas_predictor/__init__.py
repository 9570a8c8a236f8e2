"""Toy gas price regression model.

The package bundles:
- a closed-form synthetic dataset of hourly gas price samples,
- a fixed 3-16-8-1 feed-forward network,
- a full-batch Adam/MSE training loop, and
- save/load helpers for the trained parameters.
"""

__all__ = [
    "config",
    "data",
    "inference",
    "models",
    "training",
]
