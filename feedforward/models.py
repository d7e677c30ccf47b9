"""Pydantic models describing the serialized forward-pass record.

The nested model keeps layers as a list; ``to_record()`` flattens it into the
1-indexed output layout:

    initial_input, layer_1_input, layer_1_output, layer_1_neurons, ...,
    final_output
"""

from typing import Any, TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from .network import Network


class NeuronModel(BaseModel):
    """Model for one neuron's parameters"""

    model_config = ConfigDict(frozen=True)

    weights: list[float] = Field(..., description="One weight per input connection")
    bias: float = Field(..., description="Bias added before activation")


class LayerRecordModel(BaseModel):
    """Model for one layer's part of a forward pass"""

    index: int = Field(..., ge=1, description="1-based layer position")
    input: list[float] = Field(..., description="Vector fed into the layer")
    output: list[float] = Field(..., description="Vector produced by the layer")
    neurons: list[NeuronModel] = Field(default_factory=list, description="Parameters of each neuron")


class TraceRecordModel(BaseModel):
    """Model for a whole forward pass and the parameters that produced it"""

    initial_input: list[float] = Field(..., description="Input vector given to the network")
    layers: list[LayerRecordModel] = Field(default_factory=list, description="Per-layer inputs and outputs")
    final_output: list[float] = Field(..., description="Output of the last layer")

    def to_record(self) -> dict[str, Any]:
        """Flatten into the ordered, 1-indexed mapping that gets written to disk"""
        record: dict[str, Any] = {"initial_input": list(self.initial_input)}
        for layer in self.layers:
            prefix = f"layer_{layer.index}"
            record[f"{prefix}_input"] = list(layer.input)
            record[f"{prefix}_output"] = list(layer.output)
            record[f"{prefix}_neurons"] = [neuron.model_dump() for neuron in layer.neurons]
        record["final_output"] = list(self.final_output)
        return record


def create_trace_record(network: "Network", trace: list[list[float]]) -> TraceRecordModel:
    """Build a TraceRecordModel from a network and the trace its forward() returned."""
    if len(trace) != len(network) + 1:
        raise ValueError(f"Trace has {len(trace)} vectors but a {len(network)}-layer network produces {len(network) + 1}")

    layers = []
    for index, layer in enumerate(network.layers, 1):
        layers.append(
            LayerRecordModel(
                index=index,
                input=trace[index - 1],
                output=trace[index],
                neurons=[NeuronModel(**neuron.to_dict()) for neuron in layer.neurons],
            )
        )

    return TraceRecordModel(initial_input=trace[0], layers=layers, final_output=trace[-1])
