import math

import pytest

torch = pytest.importorskip("torch")
from torch import nn

from gas_predictor.inference import DEFAULT_FEATURES, format_prediction, predict_price
from gas_predictor.models import GasPriceModel


def _zero_model() -> GasPriceModel:
    model = GasPriceModel(device="cpu")
    for param in model.parameters():
        nn.init.zeros_(param)
    return model


def test_forward_shape_for_batch() -> None:
    model = GasPriceModel()
    outputs = model(torch.randn(7, 3))
    assert outputs.shape == (7, 1)


def test_forward_accepts_single_vector() -> None:
    model = GasPriceModel()
    assert model(torch.randn(3)).shape == (1, 1)


def test_forward_rejects_wrong_feature_count() -> None:
    model = GasPriceModel()
    with pytest.raises(ValueError):
        model(torch.randn(4, 2))
    with pytest.raises(ValueError):
        model(torch.randn(2, 4, 3))


def test_layer_shapes_match_topology() -> None:
    model = GasPriceModel()
    shapes = {name: tuple(p.shape) for name, p in model.named_parameters()}
    assert shapes == {
        "fc1.weight": (16, 3),
        "fc1.bias": (16,),
        "fc2.weight": (8, 16),
        "fc2.bias": (8,),
        "fc3.weight": (1, 8),
        "fc3.bias": (1,),
    }


def test_zero_initialised_model_predicts_zero() -> None:
    model = _zero_model()
    assert predict_price(model, (55.0, 14.0, 0.7)) == 0.0
    assert format_prediction(predict_price(model)) == "Predicted gas price: 0.00"


def test_hidden_layers_apply_relu() -> None:
    model = _zero_model()
    with torch.no_grad():
        model.fc1.bias.fill_(-1.0)
        model.fc3.bias.fill_(2.5)
        model.fc2.weight.fill_(1.0)
        model.fc3.weight.fill_(1.0)
    # negative pre-activations are clipped, leaving only the output bias
    assert model.predict(DEFAULT_FEATURES) == pytest.approx(2.5)


def test_predict_matches_forward() -> None:
    torch.manual_seed(0)
    model = GasPriceModel()
    expected = model(torch.tensor([[55.0, 14.0, 0.7]])).item()
    value = model.predict([55.0, 14.0, 0.7])
    assert math.isfinite(value)
    assert value == pytest.approx(expected)


def test_predict_rejects_wrong_length() -> None:
    with pytest.raises(ValueError):
        GasPriceModel().predict([1.0, 2.0])


def test_format_prediction_uses_two_decimals() -> None:
    assert format_prediction(123.456) == "Predicted gas price: 123.46"
