import os
import subprocess
import sys
from pathlib import Path

import pytest

torch = pytest.importorskip("torch")

REPO_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = REPO_ROOT / "src"


def _env_with_src() -> dict[str, str]:
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_PATH)
    return env


def _run(*args: str, cwd: Path) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, *args],
        cwd=cwd,
        env=_env_with_src(),
        capture_output=True,
        text=True,
    )


def test_train_then_predict_with_defaults(tmp_path) -> None:
    train = _run(str(REPO_ROOT / "scripts" / "train_gas_model.py"), "--seed", "0", cwd=tmp_path)
    assert train.returncode == 0, train.stderr
    assert (tmp_path / "model.bin").exists()
    assert "Epoch 0: Loss = " in train.stdout
    assert "Final loss = " in train.stdout
    assert "Model saved to model.bin" in train.stdout

    predict = _run(str(REPO_ROOT / "scripts" / "predict_gas_price.py"), cwd=tmp_path)
    assert predict.returncode == 0, predict.stderr
    line = predict.stdout.strip()
    assert line.startswith("Predicted gas price: ")
    float(line.rsplit(" ", 1)[1])


def test_predict_with_explicit_path_and_features(tmp_path) -> None:
    model_path = tmp_path / "nested.bin"
    train = _run(
        str(REPO_ROOT / "scripts" / "train_gas_model.py"),
        "--model-path",
        str(model_path),
        "--device",
        "cpu",
        cwd=REPO_ROOT,
    )
    assert train.returncode == 0, train.stderr

    predict = _run(
        str(REPO_ROOT / "scripts" / "predict_gas_price.py"),
        "--model-path",
        str(model_path),
        "--features",
        "40.0",
        "0.0",
        "0.8",
        cwd=REPO_ROOT,
    )
    assert predict.returncode == 0, predict.stderr
    assert predict.stdout.startswith("Predicted gas price: ")


def test_predict_without_model_fails(tmp_path) -> None:
    result = _run(str(REPO_ROOT / "scripts" / "predict_gas_price.py"), cwd=tmp_path)
    assert result.returncode != 0
    assert "FileNotFoundError" in result.stderr
