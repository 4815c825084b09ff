"""
Simple data loading utilities
"""
import json
from pathlib import Path
from typing import Dict, Any, List
from tests.data_models import BlockExportFile


def load_json_export(filepath: Path) -> Dict[str, Any]:
    """Load a JSON block export, validating its structure first"""
    with open(filepath, 'r') as f:
        data = json.load(f)

    # Raises pydantic.ValidationError on malformed exports
    BlockExportFile(**data)
    return data


def load_jsonl_export(filepath: Path) -> List[Dict[str, Any]]:
    """Load a JSONL export: metadata line first, then one record per line"""
    with open(filepath, 'r') as f:
        return [json.loads(line) for line in f if line.strip()]
