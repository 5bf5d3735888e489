# src/loadbalance/load_balance.py

from abc import ABC, abstractmethod
from src.errors import InvalidInput
from src.models.rpc import RpcRequest, ServiceSnapshot


class LoadBalance(ABC):
    """Strategi load balancing: pilih satu alamat dari snapshot untuk satu request."""

    def select_service_address(self, snapshot: ServiceSnapshot, rpc_request: RpcRequest) -> str:
        if not snapshot.addresses:
            raise InvalidInput(f"no service address available for '{rpc_request.rpc_service_name}'")
        # Hanya satu alamat, tidak perlu strategi apa pun
        if len(snapshot.addresses) == 1:
            return snapshot.addresses[0]
        return self.do_select(snapshot, rpc_request)

    @abstractmethod
    def do_select(self, snapshot: ServiceSnapshot, rpc_request: RpcRequest) -> str:
        ...
