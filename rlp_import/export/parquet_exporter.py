import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq
from typing import List, Dict, Any
from datetime import datetime, timezone

from .base import BaseExporter

class ParquetExporter(BaseExporter):
    """Exporter for Parquet format"""

    def write(self, rows: List[Dict[str, Any]]) -> None:
        if not rows:
            print(f"No {self.data_type} data to export")
            return

        df = pd.DataFrame(rows)
        self._save_parquet_with_metadata(df)

    def _save_parquet_with_metadata(self, df: pd.DataFrame):
        """Save DataFrame to Parquet with metadata"""
        # Convert DataFrame to PyArrow Table
        table = pa.Table.from_pandas(df, preserve_index=False)

        metadata_dict = {
            "source": str(self.source_info.get("source", "")),
            "block_format": str(self.source_info.get("block_format", "")),
            "data_type": self.data_type,
            "export_timestamp": datetime.now(timezone.utc).isoformat(),
            "record_count": str(len(df))
        }

        # Add metadata to table schema
        existing_metadata = table.schema.metadata or {}
        existing_metadata.update({k.encode(): v.encode() for k, v in metadata_dict.items()})
        table = table.replace_schema_metadata(existing_metadata)

        pq.write_table(table, self.output_path)
