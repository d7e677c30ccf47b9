import json
import logging
from pathlib import Path
from typing import Optional, Union

import yaml

from .errors import SerializationError
from .models import TraceRecordModel

logger = logging.getLogger("feedforward.serialization")

SUPPORTED_FORMATS = ("json", "yaml")


def infer_format(path: Union[str, Path]) -> str:
    """Pick an output format from a file suffix, defaulting to json"""
    suffix = Path(path).suffix.lower()
    if suffix in (".yaml", ".yml"):
        return "yaml"
    return "json"


def dump_record(record: TraceRecordModel, fmt: str = "json") -> str:
    """Render a trace record as text.

    Floats keep Python's shortest round-trip representation in both formats,
    so reading the text back yields the same values. JSON output refuses NaN
    and infinities (ValueError) rather than writing non-standard tokens.
    """
    data = record.to_record()
    if fmt == "json":
        return json.dumps(data, indent=2, allow_nan=False)
    if fmt == "yaml":
        return yaml.safe_dump(data, default_flow_style=None, sort_keys=False)
    raise ValueError(f"Unsupported output format: {fmt!r} (expected one of {', '.join(SUPPORTED_FORMATS)})")


def save_trace(path: Union[str, Path], record: TraceRecordModel, fmt: Optional[str] = None) -> Path:
    """Write a trace record to ``path`` and return the path written.

    Raises:
        SerializationError: if the target cannot be opened or written
    """
    path = Path(path)
    fmt = fmt or infer_format(path)
    text = dump_record(record, fmt)

    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
            f.write("\n")
    except OSError as e:
        raise SerializationError(f"Unable to open file for writing: {path}: {e.strerror or e!s}", path=str(path)) from e

    logger.info(f"Trace record written to {path}")
    return path
