"""
Tests for JSON, CSV and Parquet exports
"""
import json

import pandas as pd
import pyarrow.parquet as pq
import pytest
from deepdiff import DeepDiff

from rlp_import.core import ImportProcessor
from rlp_import.export import CSVExporter, JSONExporter, ParquetExporter, get_exporter_class
from tests.loaders import load_json_export, load_jsonl_export


def test_json_blocks_match_decoded_records(block_file, sample_stream, config, tmp_path):
    blocks, _, _ = sample_stream
    processor = ImportProcessor(config)
    processor.export(str(block_file), "blocks.json")

    exported = load_json_export(tmp_path / "output" / "blocks.json")
    expected = [processor.parser.block_to_dict(block) for block in blocks]

    assert exported["record_count"] == 3
    assert exported["source"]["block_format"] == "legacy"
    diff = DeepDiff(expected, exported["data"])
    assert not diff, diff.pretty()


def test_jsonl_transactions(block_file, config, tmp_path):
    ImportProcessor(config).export(str(block_file), "txs.jsonl", "transactions")

    lines = load_jsonl_export(tmp_path / "output" / "txs.jsonl")
    metadata, rows = lines[0], lines[1:]

    assert metadata["type"] == "metadata"
    assert metadata["record_count"] == 3
    assert [row["block_number"] for row in rows] == ["1", "2", "2"]
    assert [row["transaction_index"] for row in rows] == [0, 0, 1]
    assert all(row["to"].startswith("0x") for row in rows)
    assert rows[0]["message_sender"] is None


def test_threaded_export_matches(block_file, config, tmp_path):
    processor = ImportProcessor(config)
    processor.export(str(block_file), "plain.json", "uncles")
    processor.export(str(block_file), "threaded.json", "uncles", channel_capacity=2)

    plain = json.loads((tmp_path / "output" / "plain.json").read_text())["data"]
    threaded = json.loads((tmp_path / "output" / "threaded.json").read_text())["data"]
    assert not DeepDiff(plain, threaded)
    assert [row["block_number"] for row in plain] == ["1", "3"]


def test_csv_transactions(block_file, config, tmp_path):
    ImportProcessor(config).export(str(block_file), "txs.csv", "transactions")
    path = tmp_path / "output" / "txs.csv"

    header_lines = [line for line in path.read_text().splitlines() if line.startswith("#")]
    assert "# Data type: transactions" in header_lines
    assert "# Total records: 3" in header_lines

    df = pd.read_csv(path, comment="#")
    assert len(df) == 3
    assert list(df["block_number"]) == [1, 2, 2]
    assert {"hash", "from", "gas_price", "is_contract_creation"} <= set(df.columns)


def test_csv_without_rows(block_file, config, tmp_path, capsys):
    ImportProcessor(config).export(str(block_file), "w.csv", "withdrawals")

    assert "No withdrawals data to export" in capsys.readouterr().out
    assert not (tmp_path / "output" / "w.csv").exists()


def test_parquet_blocks(block_file, config, tmp_path):
    ImportProcessor(config).export(str(block_file), "blocks.parquet")

    table = pq.read_table(tmp_path / "output" / "blocks.parquet")
    assert table.num_rows == 3
    assert table.schema.metadata[b"data_type"] == b"blocks"
    assert table.schema.metadata[b"record_count"] == b"3"

    df = table.to_pandas()
    assert list(df["number"]) == ["1", "2", "3"]
    assert list(df["transaction_count"]) == [1, 2, 0]
    assert list(df["uncle_count"]) == [1, 0, 1]


def test_export_all_parquet(block_file, config, tmp_path):
    ImportProcessor(config).export(str(block_file), "chain.parquet", "all")

    output = tmp_path / "output"
    assert pq.read_table(output / "chain_transactions.parquet").num_rows == 3
    uncles = pq.read_table(output / "chain_uncles.parquet").to_pandas()
    assert list(uncles["uncle_number"]) == ["0", "2"]


@pytest.mark.parametrize("name, exporter_class", [
    ("a.json", JSONExporter),
    ("a.jsonl", JSONExporter),
    ("a.CSV", CSVExporter),
    ("a.parquet", ParquetExporter),
])
def test_exporter_lookup(name, exporter_class):
    assert get_exporter_class(name) is exporter_class


def test_unsupported_output_format():
    with pytest.raises(ValueError):
        get_exporter_class("blocks.xml")
