# shopcart/services/product_client.py
import requests

from shopcart.domain.schemas import ProductOut
from shopcart.utils.retry import http_retry
from shopcart.utils.settings import PRODUCT_SERVICE_URL, HTTP_TIMEOUT_SECONDS
from shopcart.utils.logging import get_logger

logger = get_logger(__name__)


class ProductClient:
    """Czytnik katalogu po HTTP (product-service)."""

    def __init__(self, base_url: str | None = None, timeout: int | None = None):
        self.base_url = (base_url or PRODUCT_SERVICE_URL).rstrip("/")
        self.timeout = timeout or HTTP_TIMEOUT_SECONDS

    @http_retry()
    def _get(self, url: str) -> requests.Response:
        return requests.get(url, timeout=self.timeout)

    def find_product(self, product_id: int) -> ProductOut | None:
        url = f"{self.base_url}/products/{product_id}"
        logger.info(f"ProductClient GET {url}")

        resp = self._get(url)
        if resp.status_code == 404:
            return None
        resp.raise_for_status()
        return ProductOut.model_validate(resp.json())
