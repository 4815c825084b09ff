from .formats import (
    BLOCK_FORMATS, TRAILING_POLICIES, MAX_EXTRA_DATA_SIZE, MAX_NONCE_SIZE,
    get_format_config, validate_trailing_policy
)
from .settings import DecoderConfig, get_decoder_config, load_env_file

__all__ = [
    "BLOCK_FORMATS", "TRAILING_POLICIES", "MAX_EXTRA_DATA_SIZE", "MAX_NONCE_SIZE",
    "get_format_config", "validate_trailing_policy",
    "DecoderConfig", "get_decoder_config", "load_env_file"
]
