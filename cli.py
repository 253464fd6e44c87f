# cli.py
import sys
from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, FloatPrompt, IntPrompt
from rich.table import Table

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter

from sdk.pystore import StoreClient

console = Console()
c = StoreClient()

FIELDS = ["name", "category", "description", "price", "stock", "image"]
ACTIONS = {
    "1": "List products",
    "2": "Show product",
    "3": "Add product",
    "4": "Edit product",
    "5": "Delete product",
    "6": "Reset catalog",
    "q": "Quit",
}


def show_products(products: List[Dict[str, Any]]):
    if not products:
        console.print("[italic yellow]Catalog is empty[/italic yellow]")
        return
    table = Table(title="Products", box=box.ROUNDED, header_style="bold cyan", show_lines=True)
    table.add_column("ID", justify="right")
    for name in FIELDS:
        table.add_column(name.capitalize(), justify="right" if name in ("price", "stock") else "left")
    for p in products:
        table.add_row(str(p["id"]), *(str(p.get(name, "")) for name in FIELDS))
    console.print(table)


def report(message: str, ok: bool = True):
    style = "green" if ok else "red"
    console.print(Panel.fit(f"[{style}]{message}[/{style}]"))


def call(fn, *args, **kwargs) -> Optional[Any]:
    """Run an SDK call, turning connection and HTTP errors into a red panel."""
    try:
        with console.status("Talking to the API..."):
            return fn(*args, **kwargs)
    except Exception as e:
        report(f"Error: {e}", ok=False)
        return None


def ask_id() -> Optional[int]:
    ids = [str(p["id"]) for p in call(c.list_products) or []]
    raw = prompt("Product ID: ", completer=WordCompleter(ids)).strip()
    if not raw.isdigit():
        report(f"'{raw}' is not a product ID", ok=False)
        return None
    return int(raw)


def add_product():
    fields = {
        "name": prompt("Name: "),
        "category": prompt("Category: ", default="general"),
        "description": prompt("Description: "),
        "price": FloatPrompt.ask("Price", default=1000.0),
        "stock": IntPrompt.ask("Stock", default=1),
        "image": prompt("Image path: ", default="/images/"),
    }
    created = call(c.create_product, **fields)
    if created:
        show_products([created])


def edit_product(pid: int):
    field = prompt("Field: ", completer=WordCompleter(FIELDS)).strip()
    if not field:
        return
    if field == "price":
        value: Any = FloatPrompt.ask("New price")
    elif field == "stock":
        value = IntPrompt.ask("New stock")
    else:
        value = prompt("New value: ")
    updated = call(c.update_product, pid, **{field: value})
    if updated:
        show_products([updated])
    else:
        report(f"Product {pid} not found", ok=False)


def menu():
    while True:
        console.rule("[bold blue]PyStore catalog[/bold blue]")
        for key, label in ACTIONS.items():
            console.print(f"[bold cyan]{key}[/bold cyan]  {label}")
        choice = prompt("> ", completer=WordCompleter(list(ACTIONS))).strip().lower()

        if choice == "1":
            products = call(c.list_products)
            if products is not None:
                show_products(products)
        elif choice in ("2", "4", "5"):
            pid = ask_id()
            if pid is None:
                continue
            if choice == "4":
                edit_product(pid)
            elif choice == "2":
                product = call(c.get_product, pid)
                if product:
                    show_products([product])
                else:
                    report(f"Product {pid} not found", ok=False)
            elif Confirm.ask(f"Delete product {pid}?"):
                resp = call(c.delete_product, pid)
                report(resp["message"] if resp else f"Product {pid} not found", ok=bool(resp))
        elif choice == "3":
            add_product()
        elif choice == "6":
            if Confirm.ask("[red]Restore the seed catalog?[/red]"):
                call(c.reset)
                report("Catalog reset")
        elif choice in ("q", "quit", "exit"):
            return


if __name__ == "__main__":
    try:
        menu()
    except KeyboardInterrupt:
        console.print("\n[bold red]Interrupted[/bold red]")
        sys.exit(1)
