import hashlib
import bisect
import logging
from typing import Callable, Dict, Hashable, List, Optional

from src.errors import ConfigurationError, InvalidInput

DEFAULT_REPLICA_NUMBER = 160

logger = logging.getLogger("ConsistentHashing")


def md5_digest(key: str) -> bytes:
    """Digest MD5 (16 byte) dari string key. Surrogate tunggal tetap di-encode (surrogatepass)."""
    return hashlib.md5(key.encode("utf-8", "surrogatepass"), usedforsecurity=False).digest()


def load_digest(algorithm: str = "md5") -> Callable[[str], bytes]:
    """
    Menyiapkan fungsi digest 128-bit dari hashlib.
    Dipanggil sekali saat startup. Kalau algoritma tidak tersedia
    (misal build FIPS) atau panjang digest bukan 16 byte -> ConfigurationError.
    """
    try:
        probe = hashlib.new(algorithm, usedforsecurity=False)
    except ValueError as e:
        logger.error(f"Digest algorithm '{algorithm}' tidak tersedia: {e}")
        raise ConfigurationError(f"digest algorithm '{algorithm}' is unavailable") from e

    if probe.digest_size != 16:
        logger.error(f"Digest algorithm '{algorithm}' menghasilkan {probe.digest_size} byte, butuh 16")
        raise ConfigurationError(f"digest algorithm '{algorithm}' must produce 16 bytes")

    if algorithm.lower() == "md5":
        return md5_digest

    def digest(key: str) -> bytes:
        return hashlib.new(algorithm, key.encode("utf-8", "surrogatepass"), usedforsecurity=False).digest()

    return digest


def ketama_hash(digest: bytes, idx: int) -> int:
    """
    Algoritma ketama: ambil grup 4 byte ke-idx dari digest 16 byte
    dan baca sebagai unsigned 32-bit little-endian.
    """
    return int.from_bytes(digest[idx * 4:idx * 4 + 4], "little")


class ConsistentHashRing:
    def __init__(self, addresses: List[str], replica_number: int = DEFAULT_REPLICA_NUMBER,
                 snapshot_token: Optional[Hashable] = None,
                 digest: Callable[[str], bytes] = md5_digest):
        """
        Membangun cincin (ring) hash untuk satu snapshot daftar alamat.
        :param addresses: List alamat service, cth: ['10.0.0.1:8080', ...]
        :param replica_number: Jumlah virtual node per alamat, harus kelipatan 4.
        :param snapshot_token: Penanda snapshot daftar alamat yang dipakai membangun ring ini.
        :param digest: Fungsi digest 128-bit.
        """
        if not addresses:
            raise InvalidInput("cannot build a hash ring from an empty address list")
        if replica_number <= 0 or replica_number % 4 != 0:
            raise ConfigurationError(f"replica number must be a positive multiple of 4, got {replica_number}")

        self.replica_number = replica_number
        self.snapshot_token = snapshot_token
        self._digest = digest

        virtual_nodes: Dict[int, str] = {}
        for address in addresses:
            # Satu digest 16 byte = 4 virtual node, jadi cukup replica_number / 4 digest
            for i in range(replica_number // 4):
                d = digest(f"{address}{i}")
                for h in range(4):
                    # Tabrakan posisi: yang terakhir menang
                    virtual_nodes[ketama_hash(d, h)] = address

        self._virtual_nodes = virtual_nodes
        self._positions = tuple(sorted(virtual_nodes))
        self.addresses = tuple(dict.fromkeys(addresses))

    def __len__(self) -> int:
        return len(self._positions)

    def distribution(self) -> Dict[str, int]:
        """Jumlah virtual node per alamat."""
        counts = {address: 0 for address in self.addresses}
        for address in self._virtual_nodes.values():
            counts[address] += 1
        return counts

    def select(self, key: str) -> str:
        """Mendapatkan alamat yang bertanggung jawab untuk key ini."""
        return self.select_for_hash(ketama_hash(self._digest(key), 0))

    def select_for_hash(self, hash_code: int) -> str:
        # Posisi terkecil yang >= hash_code
        idx = bisect.bisect_left(self._positions, hash_code)

        if idx == len(self._positions):
            idx = 0 # Wrap-around (kembali ke awal cincin)

        return self._virtual_nodes[self._positions[idx]]
