import pytest

from allocator import AllocationService, Registry, TransactionLog
from models import ResourceType


@pytest.fixture
def registry():
    return Registry()


@pytest.fixture
def memory_log():
    return TransactionLog(path=None)


@pytest.fixture
def service(registry, memory_log):
    return AllocationService(registry, memory_log)


@pytest.fixture
def file_log(tmp_path):
    return TransactionLog(path=str(tmp_path / "resource_log.txt"))


@pytest.fixture
def populated_service(service):
    """Project P1 'Alpha', equipment R1, worker R2."""
    service.register_project("P1", "Alpha")
    service.register_resource("R1", ResourceType.EQUIPMENT)
    service.register_resource("R2", ResourceType.WORKER)
    return service
