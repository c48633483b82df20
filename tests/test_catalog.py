from decimal import Decimal

import pytest
import requests
from fastapi.testclient import TestClient

from shopcart.domain.errors import NotFoundError
from shopcart.domain.schemas import ProductIn
from shopcart.product_service.main import app as product_service_app
from shopcart.repos.product_repo import ProductRepo
from shopcart.services import catalog as catalog_module
from shopcart.services import product_client as product_client_module
from shopcart.services.catalog import build_catalog
from shopcart.services.catalog_service import CatalogService
from shopcart.services.product_client import ProductClient


def test_catalog_service_crud(db):
    svc = CatalogService(db)

    created = svc.create_product(ProductIn(name="Lamp", price=Decimal("15.00"), description="Desk lamp"))
    assert svc.get_product(created.id).name == "Lamp"

    updated = svc.update_product(created.id, ProductIn(name="Lamp", price=Decimal("17.50")))
    assert updated.price == Decimal("17.50")
    assert updated.description == "Desk lamp"

    cleared = svc.update_product(created.id, ProductIn(name="Lamp", price=Decimal("17.50"), description=None))
    assert cleared.description is None

    svc.delete_product(created.id)
    with pytest.raises(NotFoundError):
        svc.get_product(created.id)


def test_list_products_newest_first(db, products):
    keyboard, mouse = products

    listed = CatalogService(db).list_products()

    assert [p.id for p in listed] == [mouse.id, keyboard.id]


def test_build_catalog_defaults_to_database(db):
    assert isinstance(build_catalog(db), ProductRepo)


def test_build_catalog_uses_http_client_when_configured(db, monkeypatch):
    monkeypatch.setattr(catalog_module, "PRODUCT_SERVICE_URL", "http://catalog:8000")

    assert isinstance(build_catalog(db), ProductClient)


@pytest.fixture
def mock_catalog_http(monkeypatch):
    """requests.get kierowany do lokalnego mocka product-service."""
    mock = TestClient(product_service_app)
    calls = []

    def fake_get(url, timeout):
        calls.append(url)
        return mock.get(url.replace("http://catalog:8000", ""))

    monkeypatch.setattr(product_client_module.requests, "get", fake_get)
    return calls


def test_product_client_finds_product(mock_catalog_http):
    product = ProductClient(base_url="http://catalog:8000/").find_product(2)

    assert product.name == "Mouse"
    assert product.price == Decimal("49.50")
    assert mock_catalog_http == ["http://catalog:8000/products/2"]


def test_product_client_returns_none_on_404(mock_catalog_http):
    assert ProductClient(base_url="http://catalog:8000").find_product(404) is None


def test_product_client_retries_connection_errors(monkeypatch):
    attempts = []

    def failing_get(url, timeout):
        attempts.append(url)
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(product_client_module.requests, "get", failing_get)

    with pytest.raises(requests.ConnectionError):
        ProductClient(base_url="http://catalog:8000").find_product(1)

    assert len(attempts) == 3
