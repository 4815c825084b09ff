"""
Pytest configuration
"""
import pytest

from rlp_import.config import DecoderConfig
from rlp_import.parsing import BlockParser
from tests.builders import block_stream


def pytest_configure(config):
    """Configure pytest"""
    config.addinivalue_line("markers", "slow: mark test as slow running")


@pytest.fixture
def parser():
    return BlockParser()


@pytest.fixture
def sample_stream():
    """Three blocks, their encodings, and the concatenated buffer"""
    blocks, encoded = block_stream(3)
    return blocks, encoded, b"".join(encoded)


@pytest.fixture
def block_file(tmp_path, sample_stream):
    """Raw block file holding the sample stream"""
    _, _, data = sample_stream
    path = tmp_path / "chain.rlp"
    path.write_bytes(data)
    return path


@pytest.fixture
def config(tmp_path):
    return DecoderConfig(output_dir=str(tmp_path / "output"))
