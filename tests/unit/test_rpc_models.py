import pytest
from pydantic import ValidationError
from src.models.rpc import RpcRequest, ServiceSnapshot

def test_rpc_service_name():
    request = RpcRequest(interface_name="orderService", method_name="get")
    assert request.rpc_service_name == "orderService"
    assert request.parameters == []

def test_snapshot_tokens_differ_for_same_contents():
    """Isi sama, instance berbeda -> token berbeda."""
    a = ServiceSnapshot(addresses=['10.0.0.1:8080'])
    b = ServiceSnapshot(addresses=['10.0.0.1:8080'])
    assert a.addresses == b.addresses
    assert a.token != b.token

def test_snapshot_is_frozen():
    snapshot = ServiceSnapshot(addresses=['10.0.0.1:8080'], token="snap-1")
    with pytest.raises(ValidationError):
        snapshot.token = "snap-2"
