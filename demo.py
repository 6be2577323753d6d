#!/usr/bin/env python
import requests
from rich import print

from sdk.shopclient import ShopClient


def main():
    c = ShopClient(base_url="http://127.0.0.1:8080")

    # -----------------------------
    # Create a cart
    # -----------------------------
    print("\nCreating cart...")
    cart = c.create_cart()
    print(cart)

    # -----------------------------
    # Add a product that doesn't exist
    # -----------------------------
    print("\nAdding an unknown product...")
    try:
        c.add_to_cart(cart["id"], "does-not-exist", 1)
    except requests.HTTPError as e:
        print(e.response.status_code, e.response.json())

    # -----------------------------
    # Create a product and add it twice
    # -----------------------------
    print("\nCreating product...")
    product = c.create_product("Mate", "Mate de calabaza", "MATE-01", 2500, 10, "cocina")
    print(product)

    print("\nAdding it twice with quantity 2...")
    c.add_to_cart(cart["id"], product["id"], 2)
    print(c.add_to_cart(cart["id"], product["id"], 2))

    # -----------------------------
    # View cart
    # -----------------------------
    print("\nCart items...")
    print(c.get_cart(cart["id"]))

    # -----------------------------
    # Partial update, then delete
    # -----------------------------
    print("\nUpdating stock (a 0 would be ignored)...")
    print(c.update_product(product["id"], stock=7, price=0))

    print("\nDeleting product...")
    print(c.delete_product(product["id"]))
    print("Cart still references it:", c.get_cart(cart["id"]))


if __name__ == "__main__":
    main()
