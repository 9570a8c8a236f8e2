"""Train the gas price model on the synthetic dataset and save it."""

from __future__ import annotations

import argparse

from gas_predictor.config import DEFAULT_DEVICE, DEFAULT_MODEL_PATH, RuntimeConfig
from gas_predictor.data import generate_dataset
from gas_predictor.models import GasPriceModel, save_model
from gas_predictor.training import GasModelTrainer


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Train the gas price model")
    parser.add_argument("--model-path", type=str, default=DEFAULT_MODEL_PATH, help="Output model file")
    parser.add_argument("--device", type=str, default=DEFAULT_DEVICE)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--progress", action="store_true", help="Show a progress bar")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    config = RuntimeConfig(device=args.device, model_path=args.model_path, seed=args.seed)
    config.apply_seed()
    device = config.torch_device()

    model = GasPriceModel(device=device)
    features, targets = generate_dataset(device=device)
    trainer = GasModelTrainer(model, progress=args.progress)
    history = trainer.fit(features, targets)
    print(f"Final loss = {history.final_loss:.4f}")

    save_model(model, config.model_path)
    print(f"Model saved to {config.model_path}")


if __name__ == "__main__":
    main()
