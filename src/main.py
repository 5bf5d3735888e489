# src/main.py

import logging
import sys
from collections import defaultdict

from src.config import HASH_ALGORITHM, LOG_LEVEL, SERVICE_ADDRESSES, load_replica_number
from src.errors import LoadBalanceError
from src.loadbalance.consistent_hash_load_balance import ConsistentHashLoadBalance
from src.models.rpc import RpcRequest, ServiceSnapshot

# Setup logging
logging.basicConfig(level=LOG_LEVEL, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger("Main")


def report_distribution(load_balance: ConsistentHashLoadBalance, snapshot: ServiceSnapshot,
                        service: str = "orderService", samples: int = 10000):
    """Kirim `samples` request dengan parameter berbeda dan hitung alamat tujuannya."""
    counts = defaultdict(int)
    for i in range(samples):
        request = RpcRequest(interface_name=service, method_name="get", parameters=[i])
        counts[load_balance.select_service_address(snapshot, request)] += 1
    return dict(counts)


def main():
    try:
        load_balance = ConsistentHashLoadBalance(load_replica_number(), HASH_ALGORITHM)
        snapshot = ServiceSnapshot(addresses=SERVICE_ADDRESSES)
        counts = report_distribution(load_balance, snapshot)
    except LoadBalanceError as e:
        logger.error(f"Load balancer gagal: {e}")
        return 1

    total = sum(counts.values())
    for address in snapshot.addresses:
        share = counts.get(address, 0) / total
        logger.info(f"{address}: {counts.get(address, 0)} requests ({share:.1%})")
    logger.info(f"Ring rebuilds: {load_balance.rebuild_count}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
