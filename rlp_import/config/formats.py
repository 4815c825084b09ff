"""Block format revisions and the trailing fields each one appends"""

MAX_EXTRA_DATA_SIZE = 32
MAX_NONCE_SIZE = 8

BLOCK_FORMATS = {
    'legacy': {
        'name': 'Legacy (pre-London)',
        'header_trailing': [],
        'block_trailing': [],
    },
    'london': {
        'name': 'London',
        'header_trailing': ['base_fee_per_gas'],
        'block_trailing': [],
    },
    'shanghai': {
        'name': 'Shanghai',
        'header_trailing': ['base_fee_per_gas', 'withdrawals_root'],
        'block_trailing': ['withdrawals'],
    },
}

TRAILING_POLICIES = ('strict', 'tolerant')

def get_format_config(format_name: str) -> dict:
    """Get block format configuration by name"""
    format_name = format_name.lower()
    if format_name not in BLOCK_FORMATS:
        raise ValueError(f"Unknown block format: {format_name}. Available: {list(BLOCK_FORMATS.keys())}")
    return BLOCK_FORMATS[format_name]

def validate_trailing_policy(policy: str) -> str:
    """Normalize and check a trailing-field policy name"""
    policy = policy.lower()
    if policy not in TRAILING_POLICIES:
        raise ValueError(f"Unknown trailing policy: {policy}. Available: {list(TRAILING_POLICIES)}")
    return policy
