# src/config.py

import os
from src.errors import ConfigurationError

# Konfigurasi
# Ambil dari environment variables
HASH_ALGORITHM = os.environ.get('LB_HASH_ALGORITHM', 'md5')
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

ADDRESSES_STR = os.environ.get('SERVICE_ADDRESSES', '10.0.0.1:8080,10.0.0.2:8080,10.0.0.3:8080')
SERVICE_ADDRESSES = [a.strip() for a in ADDRESSES_STR.split(',') if a.strip()]


def load_replica_number() -> int:
    """Baca LB_REPLICA_NUMBER saat dipakai, supaya nilai salah jadi ConfigurationError."""
    raw = os.environ.get('LB_REPLICA_NUMBER', '160')
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"LB_REPLICA_NUMBER must be an integer, got '{raw}'") from e
