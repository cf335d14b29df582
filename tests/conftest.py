import pytest

from pos_service.adapters.json_file_adapter import JsonFileStoreAdapter
from pos_service.adapters.memory_adapter import InMemoryStoreAdapter
from pos_service.app import create_app
from pos_service.services.product_service import ProductService
from pos_service.services.report_service import ReportService
from pos_service.services.sales_service import SalesService

FIXED_TIMESTAMP = "2024-05-01T12:00:00.000Z"


@pytest.fixture
def repository():
    return InMemoryStoreAdapter()


@pytest.fixture
def json_repository(tmp_path):
    return JsonFileStoreAdapter(tmp_path / "data" / "db.json")


@pytest.fixture
def product_service(repository):
    return ProductService(repository=repository)


@pytest.fixture
def sales_service(repository):
    return SalesService(repository=repository, clock=lambda: FIXED_TIMESTAMP)


@pytest.fixture
def report_service(repository):
    return ReportService(repository=repository)


@pytest.fixture
def app(repository):
    return create_app(repository=repository, test_config={"TESTING": True, "CACHE_TYPE": "NullCache"})


@pytest.fixture
def client(app):
    return app.test_client()


class RecordingLock:
    """Lock que cuenta cuántas veces se adquirió."""

    def __init__(self):
        self.entered = 0

    def __enter__(self):
        self.entered += 1
        return self

    def __exit__(self, *exc):
        return False
