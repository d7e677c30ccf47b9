import pytest
from pydantic import ValidationError

from feedforward.models import LayerRecordModel, NeuronModel, TraceRecordModel, create_trace_record
from feedforward.network import Network


@pytest.fixture
def network_and_trace(rng, demo_input):
    network = Network([4, 3, 2], rng=rng)
    return network, network.forward(demo_input)


def test_create_trace_record(network_and_trace, demo_input):
    network, trace = network_and_trace
    record = create_trace_record(network, trace)

    assert record.initial_input == demo_input
    assert record.final_output == trace[-1]
    assert [layer.index for layer in record.layers] == [1, 2, 3]
    assert len(record.layers[1].neurons) == 3
    assert record.layers[2].neurons[0].weights == list(network.layers[2].neurons[0].weights)
    assert record.layers[2].neurons[0].bias == network.layers[2].neurons[0].bias


def test_record_layer_vectors_follow_trace(network_and_trace):
    network, trace = network_and_trace
    record = create_trace_record(network, trace)
    for layer in record.layers:
        assert layer.input == trace[layer.index - 1]
        assert layer.output == trace[layer.index]


def test_to_record_key_order(network_and_trace):
    """Keys are 1-indexed and appear in input, per-layer, final order."""
    network, trace = network_and_trace
    data = create_trace_record(network, trace).to_record()
    assert list(data) == [
        "initial_input",
        "layer_1_input",
        "layer_1_output",
        "layer_1_neurons",
        "layer_2_input",
        "layer_2_output",
        "layer_2_neurons",
        "layer_3_input",
        "layer_3_output",
        "layer_3_neurons",
        "final_output",
    ]


def test_to_record_values(network_and_trace):
    network, trace = network_and_trace
    data = create_trace_record(network, trace).to_record()
    assert data["final_output"] == trace[-1]
    assert data["layer_3_output"] == data["final_output"]
    assert data["layer_2_input"] == data["layer_1_output"]
    assert data["layer_1_neurons"][0] == network.layers[0].neurons[0].to_dict()


def test_trace_length_must_match_network(network_and_trace):
    network, trace = network_and_trace
    with pytest.raises(ValueError, match="Trace has 3 vectors"):
        create_trace_record(network, trace[:-1])


def test_neuron_model_is_frozen():
    neuron = NeuronModel(weights=[0.5, -0.5], bias=0.1)
    with pytest.raises(ValidationError):
        neuron.bias = 1.0


def test_layer_index_is_one_based():
    with pytest.raises(ValidationError):
        LayerRecordModel(index=0, input=[0.1], output=[0.2])


def test_minimal_record():
    record = TraceRecordModel(initial_input=[1.0], final_output=[1.0])
    assert record.to_record() == {"initial_input": [1.0], "final_output": [1.0]}
