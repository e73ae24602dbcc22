# sdk/pycatalog.py
import requests
import httpx
from typing import Any, Dict, Optional

API_KEY_HEADER = "x-api-key"


class CatalogAPIError(Exception):
    """Raised for any non-2xx answer from the catalog service."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


def _product_payload(name: str, description: str, price: float, category: str, in_stock: bool) -> Dict[str, Any]:
    return {
        "name": name,
        "description": description,
        "price": price,
        "category": category,
        "inStock": in_stock,
    }


def _list_params(category=None, search=None, page=None, limit=None) -> Dict[str, Any]:
    params = {}
    if category:
        params["category"] = category
    if search:
        params["search"] = search
    if page is not None:
        params["page"] = page
    if limit is not None:
        params["limit"] = limit
    return params


class CatalogClient:
    def __init__(self, base_url: str = "http://localhost:3000", api_key: Optional[str] = None,
                 timeout: int = 10, session=None):
        self.base_url = base_url.rstrip("/")
        # anything with the requests.Session call interface works here
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.api_key = api_key
        if api_key:
            self.session.headers.update({API_KEY_HEADER: api_key})

    def _check(self, r):
        if r.status_code >= 400:
            try:
                message = r.json().get("error", r.text)
            except ValueError:
                message = r.text
            raise CatalogAPIError(r.status_code, message)
        return r

    def welcome(self) -> str:
        r = self.session.get(f"{self.base_url}/", timeout=self.timeout)
        return self._check(r).text

    # Products
    def list_products(self, category: Optional[str] = None, search: Optional[str] = None,
                      page: Optional[int] = None, limit: Optional[int] = None):
        params = _list_params(category, search, page, limit)
        r = self.session.get(f"{self.base_url}/api/products", params=params, timeout=self.timeout)
        return self._check(r).json()

    def get_product(self, product_id: str):
        r = self.session.get(f"{self.base_url}/api/products/{product_id}", timeout=self.timeout)
        return self._check(r).json()

    def create_product(self, name: str, description: str, price: float, category: str, in_stock: bool = True):
        payload = _product_payload(name, description, price, category, in_stock)
        r = self.session.post(f"{self.base_url}/api/products", json=payload, timeout=self.timeout)
        return self._check(r).json()

    def update_product(self, product_id: str, name: str, description: str, price: float,
                       category: str, in_stock: bool):
        payload = _product_payload(name, description, price, category, in_stock)
        r = self.session.put(f"{self.base_url}/api/products/{product_id}", json=payload, timeout=self.timeout)
        return self._check(r).json()

    def delete_product(self, product_id: str):
        r = self.session.delete(f"{self.base_url}/api/products/{product_id}", timeout=self.timeout)
        return self._check(r).json()

    def stats(self):
        r = self.session.get(f"{self.base_url}/api/products/stats", timeout=self.timeout)
        return self._check(r).json()

    # Async listing
    async def list_products_async(self, category: Optional[str] = None, search: Optional[str] = None,
                                  page: Optional[int] = None, limit: Optional[int] = None,
                                  transport: Optional[httpx.AsyncBaseTransport] = None):
        headers = {API_KEY_HEADER: self.api_key} if self.api_key else {}
        params = _list_params(category, search, page, limit)
        async with httpx.AsyncClient(timeout=self.timeout, headers=headers, transport=transport) as client:
            r = await client.get(f"{self.base_url}/api/products", params=params)
            return self._check(r).json()
