import pytest
from protean.integrations.pytest import DomainFixture
from stockroom.item.item import Category
from stockroom.registry.registry import Registry


@pytest.fixture(scope="session")
def stockroom_bed():
    from stockroom.domain import stockroom

    bed = DomainFixture(stockroom)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(stockroom_bed):
    with stockroom_bed.domain_context():
        yield


@pytest.fixture()
def item_fields():
    return {
        "item_number": "A1",
        "description": "Oak table",
        "amount_in_storage": 10,
        "price": 500,
        "category": Category.TABLES,
        "brand": "Acme",
        "weight": 5.0,
        "width": 1.0,
        "length": 2.0,
        "color": "Brown",
    }


@pytest.fixture()
def registry():
    return Registry()


@pytest.fixture()
def registry_with_table(registry, item_fields):
    registry.register_new_item(**item_fields)
    return registry
