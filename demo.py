#!/usr/bin/env python
from sdk.pystore import StoreClient

def main():
    c = StoreClient()

    # -----------------------------
    # Reset everything for demo
    # -----------------------------
    print("Resetting catalog...")
    print(c.reset())

    # -----------------------------
    # List products
    # -----------------------------
    print("\nListing products...")
    for p in c.list_products():
        print(p)

    # -----------------------------
    # Create a product
    # -----------------------------
    print("\nCreating a product...")
    created = c.create_product(
        name="USB-C Hub", category="Accessories", description="7-in-1 adapter",
        price=4500, stock=40, image="/images/hub.jpg",
    )
    print(created)

    # -----------------------------
    # Partial update
    # -----------------------------
    print("\nChanging price and stock...")
    print(c.update_product(created["id"], price=3900, stock=35))

    # -----------------------------
    # Fetch, delete, fetch again
    # -----------------------------
    print("\nFetching product...")
    print(c.get_product(created["id"]))

    print("\nDeleting product...")
    print(c.delete_product(created["id"]))

    print("\nFetching deleted product...")
    print(c.get_product(created["id"]))  # None

if __name__ == "__main__":
    main()
