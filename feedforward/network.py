"""Feed-forward network built from a fixed stack of fully connected layers."""

import logging
import math
from collections.abc import Iterable, Iterator, Sequence
from typing import Optional

import numpy as np

from .errors import ArchitectureError, DimensionMismatchError, NonFiniteValueError
from .layer import Layer
from .neuron import check_count
from .rng import resolve_rng

logger = logging.getLogger("feedforward.network")

DEFAULT_LAYER_SIZES: tuple[int, ...] = (3, 3, 3)


def validate_layer_sizes(layer_sizes: Iterable[int]) -> tuple[int, ...]:
    """Check an architecture and return it as a tuple of neuron counts.

    Raises:
        ArchitectureError: for an empty architecture or any non-positive or non-integer count
    """
    if isinstance(layer_sizes, (str, bytes)):
        raise ArchitectureError("Layer sizes must be a sequence of integers, not a string")
    try:
        sizes = list(layer_sizes)
    except TypeError as e:
        raise ArchitectureError(f"Layer sizes must be iterable: {e!s}") from e

    if not sizes:
        raise ArchitectureError("Network must have at least one layer")
    return tuple(check_count(size, f"Layer {i} size") for i, size in enumerate(sizes, 1))


class Network:
    """Ordered stack of layers evaluated by forward propagation.

    Layer 0 reads an input vector as long as its own neuron count; every later
    layer reads the previous layer's outputs. Parameters are drawn from ``rng``
    (or a generator seeded with ``seed``) once, at construction.
    """

    def __init__(
        self,
        layer_sizes: Optional[Sequence[int]] = None,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
    ):
        sizes = validate_layer_sizes(DEFAULT_LAYER_SIZES if layer_sizes is None else layer_sizes)
        rng = resolve_rng(rng, seed)

        layers = [Layer(sizes[0], sizes[0], rng=rng)]
        for previous, size in zip(sizes, sizes[1:]):
            layers.append(Layer(size, previous, rng=rng))
        self._layers: tuple[Layer, ...] = tuple(layers)

        logger.debug(f"Built network {list(sizes)} with {self.parameter_count} parameters")

    @property
    def layers(self) -> tuple[Layer, ...]:
        return self._layers

    @property
    def layer_sizes(self) -> tuple[int, ...]:
        return tuple(layer.num_neurons for layer in self._layers)

    @property
    def input_size(self) -> int:
        """Length of the input vector accepted by forward()"""
        return self._layers[0].num_inputs_per_neuron

    @property
    def output_size(self) -> int:
        return self._layers[-1].num_neurons

    @property
    def parameter_count(self) -> int:
        return sum(layer.parameter_count for layer in self._layers)

    def forward(self, inputs: Sequence[float]) -> list[list[float]]:
        """Run forward propagation and return the trace.

        The trace starts with a copy of ``inputs`` followed by one output
        vector per layer, so it always holds ``len(self) + 1`` vectors.

        Raises:
            DimensionMismatchError: if ``inputs`` does not have ``input_size`` values
            NonFiniteValueError: if any input is NaN or infinite
        """
        if len(inputs) != self.input_size:
            raise DimensionMismatchError(self.input_size, len(inputs), component="network input")
        for position, value in enumerate(inputs):
            if not math.isfinite(value):
                raise NonFiniteValueError(f"Network input {position} is not finite: {value!r}")

        trace = [list(inputs)]
        current: list[float] = trace[0]
        for index, layer in enumerate(self._layers, 1):
            current = layer.activate_layer(current)
            trace.append(current)
            logger.debug(f"Layer {index} output: {current}")
        return trace

    def describe(self) -> list[str]:
        """Return one human-readable summary line per layer"""
        lines = []
        for index, layer in enumerate(self._layers, 1):
            lines.append(
                f"Layer {index}: {layer.num_neurons} neurons x {layer.num_inputs_per_neuron} inputs "
                f"({layer.parameter_count} parameters)"
            )
        return lines

    def __len__(self) -> int:
        return len(self._layers)

    def __iter__(self) -> Iterator[Layer]:
        return iter(self._layers)

    def __repr__(self) -> str:
        return f"Network(layer_sizes={list(self.layer_sizes)})"
