import numpy as np
import pytest

from feedforward.errors import ArchitectureError, DimensionMismatchError
from feedforward.layer import Layer


class TestLayer:
    """Tests for a layer of neurons."""

    def test_construction(self, rng):
        layer = Layer(4, 3, rng=rng)
        assert layer.num_neurons == 4
        assert len(layer) == 4
        assert layer.num_inputs_per_neuron == 3
        assert all(neuron.num_inputs == 3 for neuron in layer)

    def test_parameter_count(self, rng):
        assert Layer(4, 3, rng=rng).parameter_count == 4 * (3 + 1)

    def test_output_length_matches_neuron_count(self, rng):
        layer = Layer(5, 2, rng=rng)
        for inputs in ([0.0, 0.0], [1.0, -1.0], [100.0, 3.5]):
            assert len(layer.activate_layer(inputs)) == 5

    def test_outputs_follow_neuron_order(self, rng):
        layer = Layer(3, 2, rng=rng)
        inputs = [0.3, 0.7]
        assert layer.activate_layer(inputs) == [neuron.activate(inputs) for neuron in layer.neurons]

    def test_outputs_in_unit_interval(self, rng):
        outputs = Layer(6, 3, rng=rng).activate_layer([0.2, -0.4, 0.9])
        assert all(0.0 < value < 1.0 for value in outputs)

    def test_rejects_wrong_input_length(self, rng):
        layer = Layer(2, 3, rng=rng)
        with pytest.raises(DimensionMismatchError) as exc_info:
            layer.activate_layer([0.1, 0.2])
        assert exc_info.value.expected == 3
        assert exc_info.value.actual == 2
        assert exc_info.value.component == "layer"

    def test_neurons_are_independent(self, rng):
        layer = Layer(3, 4, rng=rng)
        weights = {neuron.weights for neuron in layer}
        assert len(weights) == 3

    def test_same_seed_same_layer(self):
        first = Layer(3, 2, rng=np.random.default_rng(5))
        second = Layer(3, 2, rng=np.random.default_rng(5))
        assert [n.to_dict() for n in first] == [n.to_dict() for n in second]

    @pytest.mark.parametrize("num_neurons,num_inputs", [(0, 3), (3, 0), (-2, 2)])
    def test_invalid_counts(self, num_neurons, num_inputs):
        with pytest.raises(ArchitectureError):
            Layer(num_neurons, num_inputs)
