from .processor import ImportProcessor, ImportStats, ConsumerGroup, is_remote_source
from .channel import BlockChannel
from .output_manager import OutputManager

__all__ = [
    "ImportProcessor",
    "ImportStats",
    "ConsumerGroup",
    "is_remote_source",
    "BlockChannel",
    "OutputManager"
]
