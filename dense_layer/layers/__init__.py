from .Layer import Layer, DimensionMismatch
from .DenseLayer import DenseLayer

__all__ = [
    "Layer",
    "DimensionMismatch",
    "DenseLayer",
]
