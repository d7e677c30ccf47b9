import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import numpy as np

from .errors import SerializationError
from .models import TraceRecordModel, create_trace_record
from .network import Network
from .serialization import save_trace

logger = logging.getLogger("feedforward.core")


@dataclass
class RunResult:
    """Outcome of one construct-then-evaluate run"""

    network: Network
    trace: list[list[float]]
    record: TraceRecordModel
    output_path: Optional[Path] = None
    saved: bool = False
    error: Optional[SerializationError] = None

    @property
    def final_output(self) -> list[float]:
        return self.trace[-1]

    @property
    def success(self) -> bool:
        """False only when a requested save failed"""
        return self.error is None


def run_forward_pass(
    layer_sizes: Optional[Sequence[int]],
    inputs: Sequence[float],
    *,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
    output: Optional[Union[str, Path]] = None,
    fmt: Optional[str] = None,
) -> RunResult:
    """
    Build a network, run one forward pass and optionally save the record.

    Args:
        layer_sizes: Neuron count per layer, or None for the default architecture
        inputs: Input vector, as long as the first layer
        seed: Seed for parameter initialization
        rng: Generator to draw parameters from (instead of seed)
        output: File to write the record to; nothing is written when None
        fmt: Output format, inferred from the output suffix when None

    Returns:
        RunResult holding the network, trace and record. A failed save is
        reported through ``error`` and ``saved``; the trace stays valid.

    Raises:
        ArchitectureError: for an invalid layer_sizes
        DimensionMismatchError: when inputs does not match the first layer
        NonFiniteValueError: when an input is NaN or infinite
    """
    network = Network(layer_sizes, rng=rng, seed=seed)
    trace = network.forward(inputs)
    record = create_trace_record(network, trace)
    result = RunResult(network=network, trace=trace, record=record)

    if output is not None:
        result.output_path = Path(output)
        try:
            save_trace(result.output_path, record, fmt)
            result.saved = True
        except SerializationError as e:
            logger.error(f"Failed to save trace record: {e!s}")
            result.error = e

    return result


def determine_exit_code(result: Optional[RunResult]) -> int:
    """
    Determine the exit code for a run.

    Exit codes:
    - 0: Forward pass completed and any requested record was written
    - 1: No result (invalid input or architecture)
    - 2: Forward pass completed but the record could not be written
    """
    if result is None:
        return 1
    if result.error is not None:
        return 2
    return 0
