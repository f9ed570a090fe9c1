"""Folder size collector"""
import os
from typing import List
from .base import BaseCollector
from logging_config import get_logger
from metrics.models import MetricDefinition, MetricType, Sample


logger = get_logger(__name__)


def calculate_folder_size(path: str) -> int:
    """Total size in bytes of the regular files directly inside path"""
    total_size = 0
    with os.scandir(path) as entries:
        for entry in entries:
            if entry.is_file():
                total_size += entry.stat().st_size
    return total_size


class FolderSizeCollector(BaseCollector):
    """Report the size of each configured folder"""

    def __init__(self, config=None, paths: List[str] = None):
        super().__init__(config, "folder_size", "Size of the folder")
        if paths is None:
            paths = config.folder_paths if config is not None else []
        self.paths = list(paths)

    def collect(self) -> MetricDefinition:
        """Collect folder sizes; an unreadable folder fails the whole collection"""
        definition = (
            MetricDefinition.builder()
            .with_name(self.name)
            .with_metric_type(MetricType.COUNTER)
            .with_help(self.help_text)
            .build()
        )

        for path in self.paths:
            size = calculate_folder_size(path)
            logger.debug("Measured folder", folder=path, size_bytes=size)
            definition.render_and_append_instance(
                Sample().with_label("folder", path).with_value(size)
            )

        return definition
