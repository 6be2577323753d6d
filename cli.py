# cli.py
import argparse
import sys
from typing import Any, Dict, List, Optional

import requests
from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, FloatPrompt, IntPrompt, Prompt
from rich.table import Table

from sdk.shopclient import ShopClient

console = Console()

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
})


# ---------------------------
# Display helpers
# ---------------------------
def show_products(products: List[Dict[str, Any]]):
    if not products:
        console.print("[italic yellow]No products found[/italic yellow]")
        return

    table = Table(title="📦 Products", box=box.ROUNDED, header_style="bold cyan", show_lines=True)
    table.add_column("ID", style="dim", width=36)
    table.add_column("Title", style="bold", width=20)
    table.add_column("Code", width=10)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Stock", justify="right", width=8)
    table.add_column("Category", width=15)
    table.add_column("Available", width=9)

    for p in products:
        table.add_row(
            str(p.get("id", "N/A")),
            str(p.get("title", "N/A")),
            str(p.get("code", "")),
            str(p.get("price", "")),
            str(p.get("stock", "")),
            str(p.get("category", "")),
            "[green]yes[/green]" if p.get("available") else "[red]no[/red]",
        )
    console.print(table)


def show_cart(cart_id: str, items: List[Dict[str, Any]]):
    if not items:
        console.print(Panel("Cart is empty 🛍️", title=f"🛒 {cart_id}", style="blue"))
        return

    table = Table(box=box.ROUNDED, header_style="bold blue")
    table.add_column("Product", width=36)
    table.add_column("Qty", justify="right", width=8)
    for it in items:
        table.add_row(str(it.get("product")), str(it.get("quantity")))
    console.print(Panel(table, title=f"🛒 {cart_id}", border_style="blue"))


def show_error(e: Exception):
    # The API answers {"error": "..."} on every failure
    message = str(e)
    if isinstance(e, requests.HTTPError) and e.response is not None:
        try:
            message = f"HTTP {e.response.status_code}: {e.response.json().get('error', e.response.text)}"
        except ValueError:
            message = f"HTTP {e.response.status_code}: {e.response.text}"
    console.print(Panel.fit(f"[red]{message}[/red]", title="Error"))


def try_api(fn, *args, **kwargs):
    try:
        return fn(*args, **kwargs)
    except requests.RequestException as e:
        show_error(e)
        return None


# ---------------------------
# Interactive menu
# ---------------------------
def ask_optional_number(message: str, cast=float):
    # empty answer -> None, anything else must parse as a number
    while True:
        raw = Prompt.ask(message, default="").strip()
        if not raw:
            return None
        try:
            return cast(raw)
        except ValueError:
            console.print("[red]Please enter a valid number.[/red]")


def product_completer(c: ShopClient) -> WordCompleter:
    products = try_api(c.list_products) or []
    return WordCompleter([p["id"] for p in products if p.get("id")], ignore_case=True)


def menu(c: ShopClient):
    options = [
        ("1", "📦 List products"),
        ("2", "ℹ️ Get product"),
        ("3", "➕ Create product"),
        ("4", "✏️ Update product"),
        ("5", "🗑️ Delete product"),
        ("6", "🛒 Create cart"),
        ("7", "👀 View cart"),
        ("8", "➕ Add product to cart"),
        ("q", "👋 Quit"),
    ]
    while True:
        grid = Table.grid(padding=(0, 2))
        grid.add_column("Key", style="bold cyan")
        grid.add_column("Option")
        for row in options:
            grid.add_row(*row)
        console.print(Panel(grid, title="📋 Menu", border_style="yellow"))

        choice = prompt("Choose an option ", completer=WordCompleter([k for k, _ in options]),
                        style=custom_style).strip().lower()

        if choice == "1":
            products = try_api(c.list_products)
            if products is not None:
                show_products(products)

        elif choice == "2":
            pid = prompt("Product ID ", completer=product_completer(c), style=custom_style).strip()
            product = try_api(c.get_product, pid)
            if product:
                show_products([product])

        elif choice == "3":
            product = try_api(
                c.create_product,
                Prompt.ask("Title"),
                Prompt.ask("Description"),
                Prompt.ask("Code"),
                FloatPrompt.ask("Price", default=10.0),
                IntPrompt.ask("Stock", default=1),
                Prompt.ask("Category", default="general"),
                available=Confirm.ask("Available?", default=True),
            )
            if product:
                show_products([product])

        elif choice == "4":
            pid = prompt("Product ID ", completer=product_completer(c), style=custom_style).strip()
            console.print("[dim]Leave a field empty to keep its current value[/dim]")
            fields: Dict[str, Any] = {}
            for name in ("title", "description", "code", "category"):
                value = Prompt.ask(name.capitalize(), default="")
                if value:
                    fields[name] = value
            for name, cast in (("price", float), ("stock", int)):
                value = ask_optional_number(name.capitalize(), cast)
                if value is not None:
                    fields[name] = value
            product = try_api(c.update_product, pid, **fields)
            if product:
                show_products([product])

        elif choice == "5":
            pid = prompt("Product ID ", completer=product_completer(c), style=custom_style).strip()
            if Confirm.ask(f"Delete product {pid}?"):
                if try_api(c.delete_product, pid):
                    console.print(f"[green]Product {pid} deleted[/green]")

        elif choice == "6":
            cart = try_api(c.create_cart)
            if cart:
                console.print(Panel.fit(f"Created cart [green]{cart['id']}[/green]"))

        elif choice == "7":
            cid = Prompt.ask("Cart ID")
            items = try_api(c.get_cart, cid)
            if items is not None:
                show_cart(cid, items)

        elif choice == "8":
            cid = Prompt.ask("Cart ID")
            pid = prompt("Product ID ", completer=product_completer(c), style=custom_style).strip()
            qty = IntPrompt.ask("Quantity", default=1)
            cart = try_api(c.add_to_cart, cid, pid, qty)
            if cart:
                show_cart(cart["id"], cart.get("products", []))

        elif choice in ("q", "quit", "exit"):
            console.print(Panel.fit("[bold green]Bye! 👋[/bold green]"))
            return

        console.rule(style="dim")


# ---------------------------
# One-shot commands
# ---------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="shopapi CLI")
    parser.add_argument("--base-url", default="http://127.0.0.1:8080", help="API server")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("list-products", help="List all products")

    gp = subparsers.add_parser("get-product", help="Get a product by its ID")
    gp.add_argument("--product-id", required=True)

    cp = subparsers.add_parser("create-product", help="Create a product")
    cp.add_argument("--title", required=True)
    cp.add_argument("--description", required=True)
    cp.add_argument("--code", required=True)
    cp.add_argument("--price", type=float, required=True)
    cp.add_argument("--stock", type=int, required=True)
    cp.add_argument("--category", required=True)
    cp.add_argument("--unavailable", action="store_true", help="Create with available=false")
    cp.add_argument("--thumbnail", action="append", dest="thumbnails", help="Repeat for several")

    up = subparsers.add_parser("update-product", help="Update some fields of a product")
    up.add_argument("--product-id", required=True)
    up.add_argument("--title")
    up.add_argument("--description")
    up.add_argument("--code")
    up.add_argument("--price", type=float)
    up.add_argument("--stock", type=int)
    up.add_argument("--category")
    up.add_argument("--available", choices=["true", "false"])

    dp = subparsers.add_parser("delete-product", help="Delete a product")
    dp.add_argument("--product-id", required=True)

    subparsers.add_parser("create-cart", help="Create an empty cart")

    vc = subparsers.add_parser("view-cart", help="List the items of a cart")
    vc.add_argument("--cart-id", required=True)

    add = subparsers.add_parser("add-to-cart", help="Add a product to a cart")
    add.add_argument("--cart-id", required=True)
    add.add_argument("--product-id", required=True)
    add.add_argument("--qty", type=int, default=1)
    return parser


def run_command(c: ShopClient, args: argparse.Namespace):
    if args.command == "list-products":
        show_products(c.list_products())

    elif args.command == "get-product":
        show_products([c.get_product(args.product_id)])

    elif args.command == "create-product":
        show_products([c.create_product(
            args.title, args.description, args.code, args.price, args.stock, args.category,
            available=not args.unavailable, thumbnails=args.thumbnails,
        )])

    elif args.command == "update-product":
        fields = {name: getattr(args, name)
                  for name in ("title", "description", "code", "price", "stock", "category")
                  if getattr(args, name) is not None}
        if args.available is not None:
            fields["available"] = args.available == "true"
        show_products([c.update_product(args.product_id, **fields)])

    elif args.command == "delete-product":
        console.print(c.delete_product(args.product_id))

    elif args.command == "create-cart":
        console.print(c.create_cart())

    elif args.command == "view-cart":
        show_cart(args.cart_id, c.get_cart(args.cart_id))

    elif args.command == "add-to-cart":
        cart = c.add_to_cart(args.cart_id, args.product_id, args.qty)
        show_cart(cart["id"], cart.get("products", []))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    c = ShopClient(base_url=args.base_url)
    if args.command is None:
        menu(c)
        return 0
    try:
        run_command(c, args)
    except requests.RequestException as e:
        show_error(e)
        return 1
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
