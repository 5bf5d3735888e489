# src/loadbalance/consistent_hash_load_balance.py

import logging
from typing import Dict, Hashable, List, Optional

from src.errors import ConfigurationError, InvalidInput
from src.loadbalance.load_balance import LoadBalance
from src.models.rpc import RpcRequest, ServiceSnapshot
from src.utils.consistent_hashing import DEFAULT_REPLICA_NUMBER, ConsistentHashRing, load_digest


class ConsistentHashLoadBalance(LoadBalance):
    def __init__(self, replica_number: int = DEFAULT_REPLICA_NUMBER, hash_algorithm: str = "md5"):
        self.logger = logging.getLogger("ConsistentHashLoadBalance")
        if replica_number <= 0 or replica_number % 4 != 0:
            raise ConfigurationError(f"replica number must be a positive multiple of 4, got {replica_number}")
        self.replica_number = replica_number
        # Gagal di sini = ConfigurationError, fatal
        self.digest = load_digest(hash_algorithm)

        # Format: self._selectors[service_name] = ConsistentHashRing (membawa snapshot_token-nya)
        # Hanya get/set per key, tanpa lock global. Dua caller bisa membangun ring
        # yang sama secara bersamaan; yang terakhir ditulis yang dipakai.
        self._selectors: Dict[str, ConsistentHashRing] = {}
        self.rebuild_count = 0

    def selector_for(self, service_name: str) -> Optional[ConsistentHashRing]:
        return self._selectors.get(service_name)

    def select(self, service_name: str, addresses: List[str], snapshot_token: Hashable, key: str) -> str:
        """
        Pilih alamat untuk key. Ring dibangun ulang hanya jika belum ada
        atau snapshot_token berbeda dengan token ring yang tersimpan.
        """
        if not addresses:
            raise InvalidInput(f"no service address available for '{service_name}'")

        selector = self._selectors.get(service_name)
        if selector is None or selector.snapshot_token != snapshot_token:
            selector = ConsistentHashRing(addresses, self.replica_number, snapshot_token, self.digest)
            self._selectors[service_name] = selector
            # Tidak atomik antar thread, hanya untuk diagnostik (bukan hitungan pasti)
            self.rebuild_count += 1
            self.logger.info(
                f"Ring for '{service_name}' rebuilt: {len(addresses)} addresses, "
                f"{len(selector)} virtual nodes, token={snapshot_token}"
            )

        address = selector.select(key)
        self.logger.debug(f"Key '{key}' -> mapped to '{address}'")
        return address

    def do_select(self, snapshot: ServiceSnapshot, rpc_request: RpcRequest) -> str:
        service_name = rpc_request.rpc_service_name
        # Service dan parameter yang sama -> key yang sama (retry idempoten ke node yang sama)
        key = service_name + str(list(rpc_request.parameters))
        return self.select(service_name, snapshot.addresses, snapshot.token, key)
