import logging
from collections.abc import Iterator, Sequence
from typing import Optional

import numpy as np

from .errors import DimensionMismatchError
from .neuron import Neuron, check_count
from .rng import resolve_rng

logger = logging.getLogger("feedforward.layer")


class Layer:
    """An ordered set of neurons that all read the same input vector"""

    def __init__(
        self,
        num_neurons: int,
        num_inputs_per_neuron: int,
        rng: Optional[np.random.Generator] = None,
    ):
        num_neurons = check_count(num_neurons, "num_neurons")
        num_inputs_per_neuron = check_count(num_inputs_per_neuron, "num_inputs_per_neuron")
        rng = resolve_rng(rng)

        self._num_inputs_per_neuron = num_inputs_per_neuron
        self._neurons: tuple[Neuron, ...] = tuple(Neuron(num_inputs_per_neuron, rng=rng) for _ in range(num_neurons))
        logger.debug(f"Built layer with {num_neurons} neurons, {num_inputs_per_neuron} inputs each")

    @property
    def neurons(self) -> tuple[Neuron, ...]:
        return self._neurons

    @property
    def num_neurons(self) -> int:
        return len(self._neurons)

    @property
    def num_inputs_per_neuron(self) -> int:
        return self._num_inputs_per_neuron

    @property
    def parameter_count(self) -> int:
        """Number of weights plus biases held by this layer"""
        return self.num_neurons * (self._num_inputs_per_neuron + 1)

    def activate_layer(self, inputs: Sequence[float]) -> list[float]:
        """Activate every neuron against ``inputs`` and return the outputs in neuron order.

        Raises:
            DimensionMismatchError: if ``inputs`` does not match num_inputs_per_neuron
        """
        if len(inputs) != self._num_inputs_per_neuron:
            raise DimensionMismatchError(self._num_inputs_per_neuron, len(inputs), component="layer")
        return [neuron.activate(inputs) for neuron in self._neurons]

    def __len__(self) -> int:
        return len(self._neurons)

    def __iter__(self) -> Iterator[Neuron]:
        return iter(self._neurons)

    def __repr__(self) -> str:
        return f"Layer(num_neurons={self.num_neurons}, num_inputs_per_neuron={self._num_inputs_per_neuron})"
