"""Numeric value handling shared by samples"""
import math
from typing import Union


MetricNumber = Union[int, float]


def validate_value(value) -> MetricNumber:
    """Accept ints and floats only; bool is an int subclass but never a sample value"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"metric value must be int or float, got {type(value).__name__}")
    return value


def validate_timestamp(timestamp) -> int:
    """Timestamps are whole milliseconds since the Unix epoch"""
    if isinstance(timestamp, bool) or not isinstance(timestamp, int):
        raise TypeError(f"timestamp must be int milliseconds, got {type(timestamp).__name__}")
    return timestamp


def format_value(value: MetricNumber) -> str:
    """Format a value the way the exposition format expects it"""
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "+Inf" if value > 0 else "-Inf"
        return repr(value)
    return str(value)


def format_timestamp(timestamp: int) -> str:
    return str(timestamp)


def escape_label_value(text: str) -> str:
    """Escape backslash, double quote and newline in a label value.

    Samples never escape on their own; callers that need strict format
    compliance pass label values through this first.
    """
    return text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
