# src/errors.py


class LoadBalanceError(Exception):
    """Base error untuk semua kegagalan di layer load balancing."""


class ConfigurationError(LoadBalanceError):
    """
    Konfigurasi tidak valid (algoritma digest tidak tersedia, replica number salah).
    Fatal: dilempar sekali saat inisialisasi, tidak pernah di-retry.
    """


class InvalidInput(LoadBalanceError, ValueError):
    """Daftar alamat kosong. Caller harus refresh data discovery dulu."""
