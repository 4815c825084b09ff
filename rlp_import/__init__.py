"""
rlp-import - decoder for files of concatenated RLP-encoded blocks

Decodes the recursive length-prefix encoding, maps items onto typed block
records and streams them, in file order, to downstream consumers.
"""

__version__ = "1.0.0"
__author__ = "rlp-import Team"

from .ingestion.stream_reader import BlockStreamReader, read_blocks
from .parsing.block_parser import BlockParser
from .core.processor import ImportProcessor
from .export.json_exporter import JSONExporter
from .export.csv_exporter import CSVExporter
from .export.parquet_exporter import ParquetExporter

__all__ = [
    "BlockStreamReader",
    "read_blocks",
    "BlockParser",
    "ImportProcessor",
    "JSONExporter",
    "CSVExporter",
    "ParquetExporter"
]
