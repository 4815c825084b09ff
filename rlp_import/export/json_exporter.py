"""JSON and JSONL exporters"""

import json
from typing import List, Dict, Any

from ..parsing.records import Block
from .base import BaseExporter

class JSONExporter(BaseExporter):
    """Exporter for JSON and JSONL formats; blocks keep their nested structure"""

    def block_row(self, block: Block) -> Dict[str, Any]:
        return self.parser.block_to_dict(block)

    def write(self, rows: List[Dict[str, Any]]) -> None:
        if self.output_file.endswith('.jsonl'):
            self._export_jsonl(rows)
        else:
            self._export_json(rows)

    def _export_json(self, rows: List[Dict[str, Any]]):
        """Export to JSON format"""
        output_data = self.create_metadata(len(rows))
        output_data["data"] = rows

        with open(self.output_path, 'w') as f:
            json.dump(output_data, f, indent=2)

    def _export_jsonl(self, rows: List[Dict[str, Any]]):
        """Export to JSON Lines format"""
        with open(self.output_path, 'w') as f:
            # Write metadata as first line
            metadata = self.create_metadata(len(rows))
            metadata["type"] = "metadata"
            f.write(json.dumps(metadata) + '\n')

            # Write each item as a separate line
            for item in rows:
                f.write(json.dumps(item) + '\n')
