"""
Tests for decoder configuration
"""
import pytest

from rlp_import.config import (
    DecoderConfig, get_decoder_config, get_format_config, load_env_file
)


def test_format_lookup():
    assert get_format_config("Shanghai")["block_trailing"] == ["withdrawals"]
    assert get_format_config("legacy")["header_trailing"] == []
    with pytest.raises(ValueError):
        get_format_config("cancun")


def test_config_validation():
    assert DecoderConfig(block_format="LONDON").block_format == "london"
    with pytest.raises(ValueError):
        DecoderConfig(trailing_policy="lenient")
    with pytest.raises(ValueError):
        DecoderConfig(chunk_size=0)


def test_config_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("RLP_IMPORT_BLOCK_FORMAT", "shanghai")
    monkeypatch.setenv("RLP_IMPORT_TRAILING_POLICY", "tolerant")
    monkeypatch.setenv("RLP_IMPORT_VALIDATE", "false")
    monkeypatch.setenv("RLP_IMPORT_CHUNK_SIZE", "4096")

    config = get_decoder_config(str(tmp_path / "missing.env"))

    assert config.block_format == "shanghai"
    assert config.trailing_policy == "tolerant"
    assert config.validate_domain is False
    assert config.chunk_size == 4096
    assert config.max_retries == 3


def test_env_file_does_not_override_environment(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("# settings\nRLP_IMPORT_MAX_RETRIES=7\nRLP_IMPORT_OUTPUT_DIR=from_file\n")
    monkeypatch.setenv("RLP_IMPORT_OUTPUT_DIR", "from_env")
    # Registers the variable so monkeypatch removes what the env file sets
    monkeypatch.setenv("RLP_IMPORT_MAX_RETRIES", "0")
    monkeypatch.delenv("RLP_IMPORT_MAX_RETRIES")

    load_env_file(str(env_file))
    config = get_decoder_config(str(env_file))

    assert config.max_retries == 7
    assert config.output_dir == "from_env"
