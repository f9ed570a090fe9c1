"""Tests for collector modules"""
import pytest
from unittest.mock import patch

from config import Config
from collectors.base import BaseCollector, render_collectors
from collectors.folder_size import FolderSizeCollector, calculate_folder_size
from metrics.models import MetricDefinition, MetricType, Sample


class MockCollector(BaseCollector):
    """Mock collector for testing base functionality"""

    def __init__(self, config=None, value: int = 1):
        super().__init__(config, "mock", "Mock collector for testing")
        self.value = value

    def collect(self):
        definition = MetricDefinition("mock_metric", MetricType.GAUGE, self.help_text)
        return definition.render_and_append_instance(Sample().with_label("test", "value").with_value(self.value))


class TestBaseCollector:
    """Test base collector functionality"""

    def setup_method(self):
        """Setup test fixtures"""
        self.collector = MockCollector()

    def teardown_method(self):
        self.collector.cleanup()

    def test_collector_initialization(self):
        """Test collector initialization"""
        assert self.collector.name == "mock"
        assert self.collector.help_text == "Mock collector for testing"

    def test_default_help_text(self):
        """Test help text falls back to the collector name"""
        class Unnamed(MockCollector):
            def __init__(self):
                BaseCollector.__init__(self, None, "unnamed")

        collector = Unnamed()
        try:
            assert collector.help_text == "unnamed metrics collector"
        finally:
            collector.cleanup()

    @pytest.mark.asyncio
    async def test_render(self):
        """Test a collector renders its family"""
        assert await self.collector.render() == (
            "# HELP mock_metric Mock collector for testing\n"
            "# TYPE mock_metric gauge\n"
            'mock_metric{test="value"} 1\n'
        )

    @pytest.mark.asyncio
    async def test_render_collectors_keeps_order(self):
        """Test families are concatenated in collector order"""
        second = MockCollector(value=2)
        try:
            text = await render_collectors([self.collector, second])
        finally:
            second.cleanup()

        lines = [line for line in text.splitlines() if not line.startswith("#")]
        assert lines == ['mock_metric{test="value"} 1', 'mock_metric{test="value"} 2']


class TestFolderSizeCollector:
    """Test folder size collector"""

    def test_calculate_folder_size(self, tmp_path):
        """Test only regular files directly inside the folder are counted"""
        (tmp_path / "a.log").write_bytes(b"x" * 10)
        (tmp_path / "b.log").write_bytes(b"x" * 5)
        nested = tmp_path / "nested"
        nested.mkdir()
        (nested / "c.log").write_bytes(b"x" * 100)

        assert calculate_folder_size(str(tmp_path)) == 15

    def test_calculate_missing_folder(self, tmp_path):
        """Test a missing folder raises OSError"""
        with pytest.raises(OSError):
            calculate_folder_size(str(tmp_path / "missing"))

    def test_collect(self, tmp_path):
        """Test one labelled sample per folder in configured order"""
        first = tmp_path / "first"
        second = tmp_path / "second"
        first.mkdir()
        second.mkdir()
        (first / "f").write_bytes(b"x" * 7)

        collector = FolderSizeCollector(paths=[str(first), str(second)])
        try:
            text = collector.collect().render()
        finally:
            collector.cleanup()

        assert text == (
            "# HELP folder_size Size of the folder\n"
            "# TYPE folder_size counter\n"
            f'folder_size{{folder="{first}"}} 7\n'
            f'folder_size{{folder="{second}"}} 0\n'
        )

    def test_paths_from_config(self):
        """Test folders default to the configured list"""
        collector = FolderSizeCollector(Config(folder_paths_str="/a,/b"))
        try:
            assert collector.paths == ["/a", "/b"]
        finally:
            collector.cleanup()

    @patch('collectors.folder_size.calculate_folder_size', side_effect=PermissionError("denied"))
    def test_collect_propagates_errors(self, mock_calculate):
        """Test an unreadable folder fails the collection"""
        collector = FolderSizeCollector(paths=["/root"])
        try:
            with pytest.raises(PermissionError):
                collector.collect()
        finally:
            collector.cleanup()
