import json

import numpy as np
import pytest

from feedforward.core import RunResult, determine_exit_code, run_forward_pass
from feedforward.errors import ArchitectureError, DimensionMismatchError, NonFiniteValueError, SerializationError


def test_run_without_output(demo_input):
    result = run_forward_pass([4, 3, 2], demo_input, seed=3)

    assert isinstance(result, RunResult)
    assert result.network.layer_sizes == (4, 3, 2)
    assert len(result.trace) == 4
    assert result.final_output == result.trace[-1]
    assert result.record.final_output == result.trace[-1]
    assert result.output_path is None
    assert result.saved is False
    assert result.success is True
    assert determine_exit_code(result) == 0


def test_run_default_architecture():
    result = run_forward_pass(None, [0.1, 0.3, 0.2], rng=np.random.default_rng(0))
    assert result.network.layer_sizes == (3, 3, 3)
    assert len(result.trace) == 4


def test_run_saves_record(tmp_path, demo_input):
    target = tmp_path / "neuralNetwork.json"
    result = run_forward_pass([4, 3, 2], demo_input, seed=3, output=target)

    assert result.saved is True
    assert result.output_path == target
    data = json.loads(target.read_text(encoding="utf-8"))
    assert data["final_output"] == result.final_output


def test_run_is_reproducible_with_seed(demo_input):
    first = run_forward_pass([4, 3, 2], demo_input, seed=8)
    second = run_forward_pass([4, 3, 2], demo_input, seed=8)
    assert first.trace == second.trace


def test_save_failure_keeps_trace(tmp_path, demo_input):
    """A failed save is reported, not raised, and the trace stays usable."""
    result = run_forward_pass([4, 3, 2], demo_input, seed=3, output=tmp_path / "missing" / "out.json")

    assert result.saved is False
    assert isinstance(result.error, SerializationError)
    assert result.success is False
    assert len(result.trace) == 4
    assert all(0.0 < value < 1.0 for value in result.final_output)
    assert determine_exit_code(result) == 2


def test_dimension_mismatch_propagates():
    with pytest.raises(DimensionMismatchError):
        run_forward_pass([4, 3, 2], [0.1, 0.2, 0.3])


def test_architecture_error_propagates(demo_input):
    with pytest.raises(ArchitectureError):
        run_forward_pass([], demo_input)


def test_non_finite_input_propagates(tmp_path):
    target = tmp_path / "trace.json"
    with pytest.raises(NonFiniteValueError):
        run_forward_pass([2, 1], [float("nan"), 0.5], output=target)
    assert not target.exists()


def test_exit_code_without_result():
    assert determine_exit_code(None) == 1
