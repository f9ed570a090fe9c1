"""Base collector class and interfaces"""
import asyncio
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable
from metrics.models import MetricDefinition


class BaseCollector(ABC):
    """Base class for collectors producing one metric family each"""

    def __init__(self, config=None, name: str = "", help_text: str = ""):
        self.config = config
        self._name = name
        self._help_text = help_text
        self._executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix=f"{name}_collector")

    @abstractmethod
    def collect(self) -> MetricDefinition:
        """Build a fresh metric definition with its samples appended"""
        pass

    async def collect_async(self) -> MetricDefinition:
        """Async version of collect method"""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, self.collect)

    @property
    def name(self) -> str:
        """Collector name for identification"""
        return self._name

    @property
    def help_text(self) -> str:
        """Help text describing what this collector does"""
        return self._help_text or f"{self.name} metrics collector"

    async def render(self) -> str:
        definition = await self.collect_async()
        return definition.render()

    def cleanup(self):
        """Cleanup resources"""
        self._executor.shutdown(wait=False)


async def render_collectors(collectors: Iterable[BaseCollector]) -> str:
    """Render every collector in order and concatenate the families"""
    rendered = await asyncio.gather(*(collector.render() for collector in collectors))
    return "".join(rendered)
