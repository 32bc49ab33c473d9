"""Command-line interface for the product catalog.

Runs the HTTP server, prepares the database and manages products directly
through the same service layer the API uses.
"""

from decimal import Decimal, InvalidOperation

import typer
import uvicorn
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from sqlmodel import Session

from src.catalog.core.exceptions import CatalogError
from src.catalog.core.services import DbSessionService, ProductService
from src.catalog.entities.service.product import ProductDTO, ProductRepository
from src.catalog.runtime.context import get_config
from src.catalog.runtime.init_db import init_db

console = Console()

app = typer.Typer(
    name="catalog",
    help="Product catalog service CLI",
    rich_markup_mode="rich",
)
products_app = typer.Typer(help="Product management commands")
app.add_typer(products_app, name="products")


def get_db_service() -> DbSessionService:
    """Build the database service from the active configuration."""
    return DbSessionService()


def product_service(session: Session) -> ProductService:
    return ProductService(ProductRepository(session))


@app.command("serve")
def serve(
    host: str = typer.Option(None, help="Host to bind the server to"),
    port: int = typer.Option(None, help="Port to bind the server to"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
) -> None:
    """Start the HTTP server."""
    config = get_config()
    host = host or config.app.host
    port = port or config.app.port

    console.print(
        Panel.fit(
            f"[bold green]Serving product catalog on http://{host}:{port}[/bold green]",
            border_style="green",
        )
    )
    uvicorn.run(
        "src.catalog.api.http.app:app",
        host=host,
        port=port,
        reload=reload,
        log_config=None,
    )


@app.command("init-db")
def init_db_command() -> None:
    """Create the database tables."""
    init_db(get_db_service())
    console.print("[green]Database tables created[/green]")


@products_app.command("list")
def list_products() -> None:
    """List all stored products."""
    with get_db_service().get_session() as session:
        try:
            products = product_service(session).get_all_products()
        except CatalogError as e:
            console.print(f"[yellow]{e}[/yellow]")
            return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Name", style="green")
    table.add_column("Price", style="yellow", justify="right")
    for product in products:
        table.add_row(str(product.id), product.name, f"{product.price:.2f}")

    console.print(table)
    console.print(f"\n[dim]Showing {len(products)} products[/dim]")


@products_app.command("get")
def get_product(product_id: int = typer.Argument(..., help="Product ID")) -> None:
    """Show one product."""
    try:
        with get_db_service().get_session() as session:
            product = product_service(session).get_product_by_id(product_id)
    except CatalogError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1) from None

    console.print(f"[cyan]{product.id}[/cyan]  {product.name}  [yellow]{product.price:.2f}[/yellow]")


@products_app.command("add")
def add_product(
    product_id: int = typer.Argument(..., help="Product ID"),
    name: str = typer.Argument(..., help="Product name"),
    price: str = typer.Argument(..., help="Product price"),
) -> None:
    """Create or overwrite a product."""
    try:
        amount = Decimal(price)
    except InvalidOperation:
        console.print(f"[red]Invalid price: {price}[/red]")
        raise typer.Exit(1) from None

    try:
        with get_db_service().get_session() as session:
            product_service(session).save_product(
                ProductDTO(id=product_id, name=name, price=amount)
            )
    except CatalogError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1) from None

    console.print(f"[green]Saved product {product_id}[/green]")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
