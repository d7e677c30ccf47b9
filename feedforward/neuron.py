import math
from collections.abc import Sequence
from typing import Any, Optional

import numpy as np

from .errors import ArchitectureError, DimensionMismatchError, NonFiniteValueError
from .rng import resolve_rng, standard_normal


# Smallest and largest floats strictly inside (0, 1)
_SIGMOID_MIN = math.nextafter(0.0, 1.0)
_SIGMOID_MAX = math.nextafter(1.0, 0.0)


def sigmoid(x: float) -> float:
    """Logistic activation 1 / (1 + e^-x), kept strictly inside (0, 1).

    Raises:
        NonFiniteValueError: if ``x`` is NaN
    """
    if math.isnan(x):
        raise NonFiniteValueError("Activation input is NaN")
    # math.exp overflows above ~709, so only ever exponentiate a non-positive value
    if x >= 0:
        value = 1.0 / (1.0 + math.exp(-x))
    else:
        z = math.exp(x)
        value = z / (1.0 + z)
    return min(max(value, _SIGMOID_MIN), _SIGMOID_MAX)


def check_count(value: Any, name: str) -> int:
    """Return ``value`` if it is a positive integer, else raise ArchitectureError"""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ArchitectureError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 1:
        raise ArchitectureError(f"{name} must be positive, got {value}")
    return int(value)


class Neuron:
    """A single sigmoid unit with one weight per input connection and a bias.

    Weights and bias are drawn once from N(0, 1) at construction and never
    change afterwards.
    """

    def __init__(self, num_inputs: int, rng: Optional[np.random.Generator] = None):
        num_inputs = check_count(num_inputs, "num_inputs")
        rng = resolve_rng(rng)
        self._weights: tuple[float, ...] = tuple(standard_normal(rng) for _ in range(num_inputs))
        self._bias: float = standard_normal(rng)

    @property
    def weights(self) -> tuple[float, ...]:
        return self._weights

    @property
    def bias(self) -> float:
        return self._bias

    @property
    def num_inputs(self) -> int:
        return len(self._weights)

    def activate(self, inputs: Sequence[float]) -> float:
        """Compute sigmoid(bias + sum(w_i * x_i)) for the given input vector.

        Raises:
            DimensionMismatchError: if ``inputs`` does not have one value per weight
            NonFiniteValueError: if the weighted sum is NaN
        """
        if len(inputs) != len(self._weights):
            raise DimensionMismatchError(len(self._weights), len(inputs), component="neuron")

        total = self._bias
        for weight, value in zip(self._weights, inputs):
            total += weight * value
        return sigmoid(total)

    def to_dict(self) -> dict[str, Any]:
        """Convert the neuron's parameters to a dictionary for serialization"""
        return {"weights": list(self._weights), "bias": self._bias}

    def __repr__(self) -> str:
        return f"Neuron(num_inputs={self.num_inputs}, bias={self._bias:.4f})"
