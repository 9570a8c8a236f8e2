"""Data utilities for the gas price model."""

from .synthetic import NUM_SAMPLES, Sample, generate_dataset, generate_samples, samples_to_tensors

__all__ = ["NUM_SAMPLES", "Sample", "generate_dataset", "generate_samples", "samples_to_tensors"]
