from .data_source import DataSource
from .filter import Filter
from .handler import Handler
from .processor import Processor

__all__ = [
    'DataSource',
    'Filter',
    'Handler',
    'Processor'
]
