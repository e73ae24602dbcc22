#!/usr/bin/env python
import os

from sdk.pycatalog import CatalogClient, CatalogAPIError


def main():
    c = CatalogClient(
        base_url=os.getenv("CATALOG_URL", "http://127.0.0.1:3000"),
        api_key=os.getenv("API_KEY"),
    )

    print(c.welcome())

    # -----------------------------
    # Seeded catalog
    # -----------------------------
    print("\nListing products...")
    print(c.list_products())

    print("\nCategory stats...")
    print(c.stats())

    # -----------------------------
    # Create, update, delete
    # -----------------------------
    print("\nCreating a product...")
    mug = c.create_product("Mug", "", 10, "kitchen", True)
    print(mug)

    print("\nMarking it out of stock...")
    print(c.update_product(mug["id"], "Mug", "Stoneware, 350ml", 12, "kitchen", False))

    print("\nSearching for 'mug' in kitchen...")
    print(c.list_products(category="Kitchen", search="mug"))

    print("\nSecond page, one per page...")
    print(c.list_products(page=2, limit=1))

    print("\nDeleting it...")
    print(c.delete_product(mug["id"]))

    try:
        c.get_product(mug["id"])
    except CatalogAPIError as e:
        print(f"Lookup after delete: {e}")


if __name__ == "__main__":
    main()
