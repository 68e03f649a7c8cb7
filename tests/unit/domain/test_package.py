"""Tests for dao_core/domain/models/__init__.py: package exports."""

from dao_core.domain.models import __all__ as domain_all
from dao_core.domain.models import (
    DbExecuteType,
    Entity,
    Page,
    PageRequest,
    Query,
)


def test_domain_models_exports_expected_names():
    assert set(domain_all) == {
        "DbExecuteType",
        "Direction",
        "ID_FIELD",
        "Entity",
        "Order",
        "Sort",
        "PageRequest",
        "Page",
        "PagedList",
        "Query",
    }


def test_domain_models_exports_resolve():
    import dao_core.domain.models as models

    for name in domain_all:
        assert hasattr(models, name)


def test_db_execute_type_importable_from_package():
    assert DbExecuteType.SELECT == "select"


def test_entity_importable_from_package():
    assert Entity.__name__ == "Entity"


def test_page_importable_from_package():
    assert Page.__name__ == "Page"


def test_page_request_importable_from_package():
    assert PageRequest.__name__ == "PageRequest"


def test_query_importable_from_package():
    assert Query.__name__ == "Query"
