import os

from .base import BaseExporter, BlockConsumer, DATA_TYPES
from .json_exporter import JSONExporter
from .csv_exporter import CSVExporter
from .parquet_exporter import ParquetExporter

EXPORTERS = {
    '.json': JSONExporter,
    '.jsonl': JSONExporter,
    '.csv': CSVExporter,
    '.parquet': ParquetExporter,
}

def get_exporter_class(output_file: str) -> type:
    """Exporter class for an output file extension"""
    extension = os.path.splitext(output_file)[1].lower()
    if extension not in EXPORTERS:
        raise ValueError(f"Unsupported output format: {extension or output_file}. Available: {list(EXPORTERS.keys())}")
    return EXPORTERS[extension]

__all__ = [
    "BaseExporter", "BlockConsumer", "DATA_TYPES", "EXPORTERS", "get_exporter_class",
    "JSONExporter", "CSVExporter", "ParquetExporter"
]
