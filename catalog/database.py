import threading
from typing import Iterable, List, Optional

from .models import Product

# The catalog every process starts with.
SEED_PRODUCTS = [
    {
        "id": "1",
        "name": "Laptop",
        "description": "High-performance laptop with 16GB RAM",
        "price": 1200,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "2",
        "name": "Smartphone",
        "description": "Latest model with 128GB storage",
        "price": 800,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "3",
        "name": "Coffee Maker",
        "description": "Programmable coffee maker with timer",
        "price": 50,
        "category": "kitchen",
        "inStock": False,
    },
]


def seed_products() -> List[Product]:
    return [Product.model_validate(p) for p in SEED_PRODUCTS]


class ProductStore:
    """
    Ordered in-memory sequence of products.

    Order is insertion order. Callers that read an index and then write at it
    must hold ``lock`` across both steps.
    """

    def __init__(self, products: Optional[Iterable[Product]] = None):
        self._products: List[Product] = list(products or [])
        self.lock = threading.RLock()

    @classmethod
    def seeded(cls) -> "ProductStore":
        return cls(seed_products())

    def __len__(self) -> int:
        return len(self._products)

    def snapshot(self) -> List[Product]:
        with self.lock:
            return list(self._products)

    def append(self, product: Product) -> Product:
        with self.lock:
            if self.find_index_by_id(product.id) != -1:
                raise ValueError(f"duplicate product id: {product.id}")
            self._products.append(product)
            return product

    def find_by_id(self, product_id: str) -> Optional[Product]:
        with self.lock:
            for p in self._products:
                if p.id == product_id:
                    return p
            return None

    def find_index_by_id(self, product_id: str) -> int:
        with self.lock:
            for i, p in enumerate(self._products):
                if p.id == product_id:
                    return i
            return -1

    def replace_at(self, index: int, product: Product) -> Product:
        with self.lock:
            self._products[index] = product
            return product

    def remove_at(self, index: int) -> Product:
        with self.lock:
            return self._products.pop(index)

    def reset(self) -> None:
        with self.lock:
            self._products = seed_products()
