"""CSV exporter"""

import pandas as pd
from typing import List, Dict, Any
from datetime import datetime, timezone

from .base import BaseExporter

class CSVExporter(BaseExporter):
    """Exporter for CSV format"""

    def write(self, rows: List[Dict[str, Any]]) -> None:
        """Write flattened rows with metadata comments"""
        if not rows:
            print(f"No {self.data_type} data to export")
            return

        df = pd.DataFrame(rows)

        with open(self.output_path, 'w') as f:
            f.write(f"# Source: {self.source_info.get('source', 'unknown')}\n")
            f.write(f"# Block format: {self.source_info.get('block_format', 'unknown')}\n")
            f.write(f"# Data type: {self.data_type}\n")
            f.write(f"# Export timestamp: {datetime.now(timezone.utc).isoformat()}\n")
            f.write(f"# Total records: {len(rows)}\n")
            df.to_csv(f, index=False)
