# cli.py
import argparse
import os
import sys
from datetime import datetime
from typing import Any, Dict, List, Optional

import requests
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from sdk.pycatalog import CatalogClient, CatalogAPIError

console = Console()

DEFAULT_URL = "http://127.0.0.1:3000"

# Custom prompt style for prompt_toolkit
custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Display helpers
# ---------------------------
def show_products(products: List[Dict[str, Any]], title: str = "📦 Products Catalog"):
    if not products:
        console.print("[italic yellow]No products found[/italic yellow]")
        return

    table = Table(
        title=title,
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", overflow="fold")
    table.add_column("Name", style="bold")
    table.add_column("Description")
    table.add_column("Price", justify="right")
    table.add_column("Category")
    table.add_column("In stock", justify="center")

    for p in products:
        table.add_row(
            p.get("id", "N/A"),
            p.get("name", "N/A"),
            p.get("description", ""),
            f"{p.get('price', 0):.2f}",
            p.get("category", "N/A"),
            "[green]yes[/green]" if p.get("inStock") else "[red]no[/red]",
        )
    console.print(table)


def show_page(envelope: Dict[str, Any]):
    title = (f"📦 Products (page {envelope.get('page')}, "
             f"limit {envelope.get('limit')}, total {envelope.get('total')})")
    show_products(envelope.get("data", []), title=title)


def show_stats(stats: Dict[str, Any]):
    table = Table(title="📊 Products by category", box=box.ROUNDED, header_style="bold yellow")
    table.add_column("Category")
    table.add_column("Count", justify="right")
    for category, count in stats.get("byCategory", {}).items():
        table.add_row(category, str(count))
    table.add_row("[bold]total[/bold]", f"[bold]{stats.get('total', 0)}[/bold]")
    console.print(table)


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


# ---------------------------
# API wrapper
# ---------------------------
def try_api(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """
    Calls fn(*args, **kwargs) behind a spinner.
    Returns the result, or None after printing the error.
    """
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            transient=True,
        ) as progress:
            progress.add_task(description="Processing...", total=None)
            result = fn(*args, **kwargs)
    except (CatalogAPIError, requests.RequestException) as e:
        console.print(show_status(f"Error: {e}", False))
        return None

    if success_msg:
        console.print(show_status(success_msg, True))
    return result


def parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in ("true", "yes", "y", "1"):
        return True
    if value in ("false", "no", "n", "0"):
        return False
    raise argparse.ArgumentTypeError(f"expected true/false, got {raw!r}")


# ---------------------------
# Interactive menu
# ---------------------------
def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def ask_float(message: str, default: float = 10.0) -> float:
    while True:
        raw = Prompt.ask(message, default=str(default))
        try:
            return float(raw)
        except ValueError:
            console.print("[red]Please enter a valid number.[/red]")


def product_completer(c: CatalogClient) -> WordCompleter:
    envelope = try_api(c.list_products, limit=1000) or {}
    ids = [p["id"] for p in envelope.get("data", [])]
    return WordCompleter(ids, ignore_case=True)


def category_completer(c: CatalogClient) -> WordCompleter:
    stats = try_api(c.stats) or {}
    return WordCompleter(list(stats.get("byCategory", {})), ignore_case=True)


def ask_product_fields(c: CatalogClient, current: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    current = current or {}
    return {
        "name": prompt_with_autocomplete("Name", default=current.get("name", "")),
        "description": prompt_with_autocomplete("Description", default=current.get("description", "")),
        "price": ask_float("💰 Price", default=current.get("price", 10.0)),
        "category": prompt_with_autocomplete("🏷️ Category", completer=category_completer(c),
                                             default=current.get("category", "")),
        "in_stock": Confirm.ask("In stock?", default=current.get("inStock", True)),
    }


def menu(c: CatalogClient):
    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    console.print(Panel(f"[bold blue]Product Catalog CLI[/bold blue]  [dim]{now}[/dim]", style="bold blue"))

    options = [
        ("1", "📦 List products"),
        ("2", "🔍 Search / filter"),
        ("3", "ℹ️ Get product by ID"),
        ("4", "➕ Create product"),
        ("5", "✏️ Update product"),
        ("6", "🗑️ Delete product"),
        ("7", "📊 Category stats"),
        ("q", "👋 Quit"),
    ]

    while True:
        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        for row in options:
            menu_table.add_row(*row)
        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter([key for key, _ in options] + ["quit", "exit"])
        ).strip()

        if choice == "1":
            envelope = try_api(c.list_products)
            if envelope is not None:
                show_page(envelope)

        elif choice == "2":
            category = prompt_with_autocomplete("Category (blank for any)", completer=category_completer(c))
            search = prompt_with_autocomplete("Name contains (blank for any)")
            page = prompt_with_autocomplete("Page", default="1")
            envelope = try_api(c.list_products, category=category or None, search=search or None,
                               page=page or None)
            if envelope is not None:
                show_page(envelope)

        elif choice == "3":
            pid = prompt_with_autocomplete("Enter product ID", completer=product_completer(c))
            product = try_api(c.get_product, pid)
            if product is not None:
                show_products([product])

        elif choice == "4":
            fields = ask_product_fields(c)
            product = try_api(c.create_product, success_msg=f"Product '{fields['name']}' created", **fields)
            if product is not None:
                show_products([product])

        elif choice == "5":
            pid = prompt_with_autocomplete("Enter product ID", completer=product_completer(c))
            current = try_api(c.get_product, pid)
            if current is None:
                continue
            fields = ask_product_fields(c, current)
            product = try_api(c.update_product, pid, success_msg=f"Product {pid} updated", **fields)
            if product is not None:
                show_products([product])

        elif choice == "6":
            pid = prompt_with_autocomplete("Enter product ID", completer=product_completer(c))
            if Confirm.ask(f"[red]Delete product {pid}?[/red]"):
                try_api(c.delete_product, pid, success_msg=f"Product {pid} deleted")

        elif choice == "7":
            stats = try_api(c.stats)
            if stats is not None:
                show_stats(stats)

        elif choice.lower() in ("q", "quit", "exit"):
            console.print(Panel.fit("[bold green]Bye! 👋[/bold green]", title="Goodbye"))
            return

        console.print()
        console.rule(style="dim")


# ---------------------------
# Command line
# ---------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Product catalog CLI")
    parser.add_argument("--base-url", default=os.getenv("CATALOG_URL", DEFAULT_URL), help="Catalog service URL")
    parser.add_argument("--api-key", default=os.getenv("API_KEY"), help="Value for the x-api-key header")
    subparsers = parser.add_subparsers(dest="command", required=True)

    lp = subparsers.add_parser("list", help="List products")
    lp.add_argument("--category", help="Filter by category (case-insensitive)")
    lp.add_argument("--search", help="Substring to look for in product names")
    lp.add_argument("--page", type=int, help="1-based page number")
    lp.add_argument("--limit", type=int, help="Page size")

    gp = subparsers.add_parser("get", help="Get a product by its ID")
    gp.add_argument("product_id")

    for name, help_text in (("create", "Create a product"), ("update", "Replace a product")):
        sp = subparsers.add_parser(name, help=help_text)
        if name == "update":
            sp.add_argument("product_id")
        sp.add_argument("--name", required=True)
        sp.add_argument("--description", default="")
        sp.add_argument("--price", type=float, required=True)
        sp.add_argument("--category", required=True)
        sp.add_argument("--in-stock", type=parse_bool, default=True, help="true or false")

    dp = subparsers.add_parser("delete", help="Delete a product")
    dp.add_argument("product_id")

    subparsers.add_parser("stats", help="Count products per category")
    subparsers.add_parser("interactive", help="Menu-driven session with autocompletion")
    return parser


def main(argv: Optional[List[str]] = None, client: Optional[CatalogClient] = None) -> int:
    args = build_parser().parse_args(argv)
    c = client or CatalogClient(base_url=args.base_url, api_key=args.api_key)

    if args.command == "interactive":
        menu(c)
        return 0

    if args.command == "list":
        result = try_api(c.list_products, args.category, args.search, args.page, args.limit)
        render = show_page
    elif args.command == "get":
        result = try_api(c.get_product, args.product_id)
        render = lambda p: show_products([p])
    elif args.command == "create":
        result = try_api(c.create_product, args.name, args.description, args.price,
                         args.category, args.in_stock, success_msg="Product created")
        render = lambda p: show_products([p])
    elif args.command == "update":
        result = try_api(c.update_product, args.product_id, args.name, args.description,
                         args.price, args.category, args.in_stock, success_msg="Product updated")
        render = lambda p: show_products([p])
    elif args.command == "delete":
        result = try_api(c.delete_product, args.product_id, success_msg=f"Product {args.product_id} deleted")
        render = lambda body: show_products(body["deleted"], title="🗑️ Deleted")
    else:
        result = try_api(c.stats)
        render = show_stats

    if result is None:
        return 1
    render(result)
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
