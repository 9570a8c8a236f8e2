"""Predict a gas price with a model saved by ``train_gas_model.py``."""

from __future__ import annotations

import argparse

from gas_predictor.config import DEFAULT_DEVICE, DEFAULT_MODEL_PATH, RuntimeConfig
from gas_predictor.inference import DEFAULT_FEATURES, format_prediction, predict_price
from gas_predictor.models import load_model


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Predict a gas price")
    parser.add_argument("--model-path", type=str, default=DEFAULT_MODEL_PATH, help="Trained model file")
    parser.add_argument("--device", type=str, default=DEFAULT_DEVICE)
    parser.add_argument(
        "--features",
        type=float,
        nargs=3,
        default=list(DEFAULT_FEATURES),
        metavar=("PREV_AVG", "HOUR", "HIGH_BIDS"),
        help="Input triple for the prediction",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    config = RuntimeConfig(device=args.device, model_path=args.model_path)
    model = load_model(config.model_path, device=config.torch_device())
    prediction = predict_price(model, args.features)
    print(format_prediction(prediction))


if __name__ == "__main__":
    main()
