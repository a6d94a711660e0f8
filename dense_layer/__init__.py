from .layers import DenseLayer, DimensionMismatch
from .loss.MeanSquaredError import MeanSquaredError
from .helpers.Backend import backend

__all__ = [
    "DenseLayer",
    "DimensionMismatch",
    "MeanSquaredError",
    "backend",
]
