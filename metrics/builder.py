"""Builder enforcing that name, type and help are all set before a metric exists"""
from typing import Optional, Union
from .errors import FieldAlreadySet, MissingMandatoryField
from .models import MetricDefinition, MetricType


def _require_text(field: str, value) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{field} must be str, got {type(value).__name__}")


class MetricDefinitionBuilder:
    """Collects the mandatory fields of a MetricDefinition.

    Every field can be assigned exactly once. `build` reports every field
    still missing in a single MissingMandatoryField.
    """

    FIELDS = ("name", "metric_type", "help")

    def __init__(self):
        self._name: Optional[str] = None
        self._metric_type: Optional[MetricType] = None
        self._help: Optional[str] = None

    def _ensure_unset(self, field: str) -> None:
        if getattr(self, f"_{field}") is not None:
            raise FieldAlreadySet(field)

    def _require(self, field: str):
        value = getattr(self, f"_{field}")
        if value is None:
            raise MissingMandatoryField([field])
        return value

    def with_name(self, name: str) -> "MetricDefinitionBuilder":
        self._ensure_unset("name")
        _require_text("name", name)
        self._name = name
        return self

    def with_metric_type(self, metric_type: Union[MetricType, str]) -> "MetricDefinitionBuilder":
        self._ensure_unset("metric_type")
        if not isinstance(metric_type, MetricType):
            metric_type = MetricType.parse(metric_type)
        self._metric_type = metric_type
        return self

    def with_help(self, help: str) -> "MetricDefinitionBuilder":
        self._ensure_unset("help")
        _require_text("help", help)
        self._help = help
        return self

    @property
    def name(self) -> str:
        return self._require("name")

    @property
    def metric_type(self) -> MetricType:
        return self._require("metric_type")

    @property
    def help(self) -> str:
        return self._require("help")

    def missing_fields(self):
        return [field for field in self.FIELDS if getattr(self, f"_{field}") is None]

    def build(self) -> MetricDefinition:
        missing = self.missing_fields()
        if missing:
            raise MissingMandatoryField(missing)
        return MetricDefinition(self._name, self._metric_type, self._help)
