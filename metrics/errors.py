"""Errors raised while building and rendering metrics"""
from typing import Iterable


class ExpositionError(Exception):
    """Base class for all exposition errors"""


class UnknownMetricType(ExpositionError, ValueError):
    """Raised when text does not name one of the Prometheus metric types"""

    def __init__(self, passed_name: str):
        self.passed_name = passed_name
        super().__init__(f"enum MetricType does not have the {passed_name} variant")


class MissingMandatoryField(ExpositionError):
    """Raised by the builder when one or more mandatory fields were never set"""

    def __init__(self, missing_fields: Iterable[str]):
        self.missing_fields = tuple(missing_fields)
        super().__init__(f"missing mandatory fields: {', '.join(self.missing_fields)}")


class FieldAlreadySet(ExpositionError):
    """Raised when a builder field is assigned twice"""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"field {field} has already been set")


class ValueNotSet(ExpositionError):
    """Raised when a sample is rendered before a value was attached"""

    def __init__(self):
        super().__init__("value not set")


class ClockError(ExpositionError):
    """Raised when the system clock reports a time before the Unix epoch"""

    def __init__(self, reading: int):
        self.reading = reading
        super().__init__(f"system clock is before the Unix epoch ({reading}ns)")
