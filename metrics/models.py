"""Metric data models and Prometheus text rendering"""
import abc
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, List, Optional, Tuple, Union
from .clock import current_timestamp_millis
from .errors import UnknownMetricType, ValueNotSet
from .values import MetricNumber, format_timestamp, format_value, validate_timestamp, validate_value


class MetricType(Enum):
    """Prometheus metric types"""
    COUNTER = "counter"
    GAUGE = "gauge"
    HISTOGRAM = "histogram"
    SUMMARY = "summary"

    @classmethod
    def parse(cls, text: str) -> "MetricType":
        """Exact, case-sensitive lookup by canonical text"""
        for member in cls:
            if member.value == text:
                return member
        raise UnknownMetricType(text)

    def to_text(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class RenderToPrometheus(abc.ABC):
    """Anything able to render itself as a sample line without the metric name"""

    @abc.abstractmethod
    def render(self) -> str:
        """Return the formatted fragment that follows the metric name"""
        pass


class Sample(RenderToPrometheus):
    """One labelled observation of a metric family"""

    def __init__(self):
        self.labels: List[Tuple[str, str]] = []
        self.value: Optional[MetricNumber] = None
        self.timestamp: Optional[int] = None

    def with_label(self, key: str, value: str) -> "Sample":
        self.labels.append((key, value))
        return self

    def with_labels(self, pairs: Iterable[Tuple[str, str]]) -> "Sample":
        for key, value in pairs:
            self.with_label(key, value)
        return self

    def with_value(self, value: MetricNumber) -> "Sample":
        self.value = validate_value(value)
        return self

    def with_timestamp(self, timestamp: int) -> "Sample":
        self.timestamp = validate_timestamp(timestamp)
        return self

    def with_current_timestamp(self, clock: Optional[Callable[[], int]] = None) -> "Sample":
        """Stamp the sample with the current time; raises ClockError before the epoch"""
        self.timestamp = current_timestamp_millis(clock)
        return self

    def render(self) -> str:
        """Render as `{k="v",...} value [timestamp]`.

        Label values are written as given, no escaping is applied.
        """
        if self.value is None:
            raise ValueNotSet()

        parts = []
        if self.labels:
            label_pairs = [f'{k}="{v}"' for k, v in self.labels]
            parts.append("{" + ",".join(label_pairs) + "}")
        parts.append(f" {format_value(self.value)}")

        if self.timestamp is not None:
            parts.append(f" {format_timestamp(self.timestamp)}")

        return "".join(parts)

    def __repr__(self) -> str:
        return f"Sample(labels={self.labels!r}, value={self.value!r}, timestamp={self.timestamp!r})"


PrometheusInstance = Sample


@dataclass(frozen=True)
class MetricDefinition:
    """A named, typed, documented metric family.

    Identity fields are fixed at construction. The definition also
    accumulates already-rendered sample fragments, appended through
    `render_and_append_instance` and assembled by `render`.
    Equality and hashing use name, type and help only, so two
    definitions of the same family compare equal whatever samples they
    have accumulated.
    """
    name: str
    metric_type: Union[MetricType, str]
    help: str
    _rendered_instances: List[str] = field(default_factory=list, init=False, repr=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.metric_type, MetricType):
            object.__setattr__(self, "metric_type", MetricType.parse(self.metric_type))

    @classmethod
    def builder(cls):
        """Start a builder that refuses to build until name, type and help are set"""
        from .builder import MetricDefinitionBuilder
        return MetricDefinitionBuilder()

    @property
    def rendered_instances(self) -> Tuple[str, ...]:
        return tuple(self._rendered_instances)

    def render_header(self) -> str:
        return (
            f"# HELP {self.name} {self.help}\n"
            f"# TYPE {self.name} {self.metric_type.to_text()}\n"
        )

    def render_line(self, renderable: RenderToPrometheus) -> str:
        """Render one sample line without touching accumulated state"""
        return f"{self.name}{renderable.render()}\n"

    def render_with(self, fragments: Iterable[str]) -> str:
        """Assemble the header followed by one line per fragment, in order"""
        lines = [self.render_header()]
        for fragment in fragments:
            lines.append(f"{self.name}{fragment}\n")
        return "".join(lines)

    def render_and_append_instance(self, renderable: RenderToPrometheus) -> "MetricDefinition":
        # Rendered eagerly so later changes to the sample are not picked up
        self._rendered_instances.append(renderable.render())
        return self

    def render(self) -> str:
        return self.render_with(self._rendered_instances)
