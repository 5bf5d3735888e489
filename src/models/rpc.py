# src/models/rpc.py

import uuid
from typing import Any, List
from pydantic import BaseModel, ConfigDict, Field


class RpcRequest(BaseModel):
    """Deskriptor request RPC yang dibutuhkan load balancer (bukan payload lengkap)."""
    interface_name: str
    method_name: str
    parameters: List[Any] = Field(default_factory=list)
    group: str = ""
    version: str = ""

    @property
    def rpc_service_name(self) -> str:
        return self.interface_name + self.group + self.version


class ServiceSnapshot(BaseModel):
    """
    Satu snapshot daftar alamat dari service discovery.
    Setiap instance baru mendapat token baru, walaupun isinya sama.
    """
    model_config = ConfigDict(frozen=True)

    addresses: List[str]
    token: str = Field(default_factory=lambda: uuid.uuid4().hex)
