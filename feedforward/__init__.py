"""Feedforward package initialization.

The version is defined once in pyproject.toml and read at runtime via
importlib.metadata.
"""

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("feedforward")
except PackageNotFoundError:
    # Package is not installed or in development mode
    __version__ = "unknown"


# Public API, lazy-loaded so that importing the package stays cheap.
_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "Neuron": ("feedforward.neuron", "Neuron"),
    "Layer": ("feedforward.layer", "Layer"),
    "Network": ("feedforward.network", "Network"),
    "sigmoid": ("feedforward.neuron", "sigmoid"),
    "run_forward_pass": ("feedforward.core", "run_forward_pass"),
    "create_trace_record": ("feedforward.models", "create_trace_record"),
    "save_trace": ("feedforward.serialization", "save_trace"),
    "ArchitectureError": ("feedforward.errors", "ArchitectureError"),
    "DimensionMismatchError": ("feedforward.errors", "DimensionMismatchError"),
    "NonFiniteValueError": ("feedforward.errors", "NonFiniteValueError"),
    "SerializationError": ("feedforward.errors", "SerializationError"),
}


def __getattr__(name: str) -> object:
    if name in _LAZY_IMPORTS:
        module_path, attr = _LAZY_IMPORTS[name]
        import importlib

        mod = importlib.import_module(module_path)
        val = getattr(mod, attr)
        # Cache on the module so __getattr__ is not called again
        globals()[name] = val
        return val
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "ArchitectureError",
    "DimensionMismatchError",
    "Layer",
    "Network",
    "Neuron",
    "NonFiniteValueError",
    "SerializationError",
    "__version__",
    "create_trace_record",
    "run_forward_pass",
    "save_trace",
    "sigmoid",
]
