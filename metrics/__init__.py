"""Prometheus text exposition: metric definitions, samples and rendering"""
from .builder import MetricDefinitionBuilder
from .clock import current_timestamp_millis
from .errors import (
    ClockError,
    ExpositionError,
    FieldAlreadySet,
    MissingMandatoryField,
    UnknownMetricType,
    ValueNotSet,
)
from .models import MetricDefinition, MetricType, PrometheusInstance, RenderToPrometheus, Sample
from .values import escape_label_value, format_value

__all__ = [
    'MetricDefinition',
    'MetricDefinitionBuilder',
    'MetricType',
    'PrometheusInstance',
    'RenderToPrometheus',
    'Sample',
    'current_timestamp_millis',
    'escape_label_value',
    'format_value',
    'ClockError',
    'ExpositionError',
    'FieldAlreadySet',
    'MissingMandatoryField',
    'UnknownMetricType',
    'ValueNotSet',
]
