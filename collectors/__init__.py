"""Collectors producing rendered metric families"""
from .base import BaseCollector, render_collectors
from .folder_size import FolderSizeCollector, calculate_folder_size

__all__ = [
    'BaseCollector',
    'FolderSizeCollector',
    'calculate_folder_size',
    'render_collectors'
]
