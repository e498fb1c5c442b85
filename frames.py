"""Wire frames published on room channels.

A frame is a JSON array of exactly two elements: ``[event_name, event_data]``.
Subscribers on ``prefix:room`` decode this exact shape.
"""
import json
from typing import Any, Tuple, Union


def _reject_constant(name: str):
    raise ValueError(f"Frame contains non-standard JSON constant {name}")


def encode_frame(event: str, data: Any) -> str:
    """Serialize an event and its payload.

    Raises TypeError for data JSON can't encode and ValueError for NaN or infinite floats.
    """
    return json.dumps([event, data], allow_nan=False)


def decode_frame(raw: Union[str, bytes]) -> Tuple[str, Any]:
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8")
    try:
        frame = json.loads(raw, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise ValueError(f"Frame is not valid JSON: {e}") from e

    if not isinstance(frame, list) or len(frame) != 2:
        raise ValueError("Frame must be a two-element array [event, data]")
    event, data = frame
    if not isinstance(event, str):
        raise ValueError(f"Frame event name must be a string, got {type(event).__name__}")
    return event, data
