import asyncio

from sdk.shopclient import ShopClient

# Each request loads, mutates and rewrites the whole carts file with no
# locking. A single uvicorn worker runs each handler without interleaving,
# so the final quantity matches; start the server with several workers
# (uvicorn shopapi.main:app --workers 4) and updates can be lost.


async def main():
    c = ShopClient(base_url="http://127.0.0.1:8080")

    product = c.create_product("Yerba", "Yerba mate 1kg", "YERBA-1", 3000, 50, "almacen")
    cart = c.create_cart()
    print(f"\n🛒 cart {cart['id']}, product {product['id']}")

    n = 20
    print(f"\n⚡ Sending {n} concurrent add-to-cart requests (quantity 1 each)...")
    responses = await asyncio.gather(*[
        c.add_to_cart_async(cart["id"], product["id"], 1) for _ in range(n)
    ])
    print("statuses:", sorted({r.status_code for r in responses}))

    items = c.get_cart(cart["id"])
    final = items[0]["quantity"] if items else 0
    if final == n:
        print(f"✅ final quantity {final}")
    else:
        print(f"❌ final quantity {final}, {n - final} updates lost")


if __name__ == "__main__":
    asyncio.run(main())
