"""Training utilities for the gas price model."""

from .trainer import ADAM_EPS, EPOCHS, LEARNING_RATE, LOG_INTERVAL, GasModelTrainer, TrainingHistory

__all__ = [
    "ADAM_EPS",
    "EPOCHS",
    "LEARNING_RATE",
    "LOG_INTERVAL",
    "GasModelTrainer",
    "TrainingHistory",
]
