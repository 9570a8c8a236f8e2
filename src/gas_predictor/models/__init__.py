"""Model definition and persistence for the gas price regressor."""

from .network import GasPriceModel
from .persistence import load_model, save_model

__all__ = ["GasPriceModel", "load_model", "save_model"]
