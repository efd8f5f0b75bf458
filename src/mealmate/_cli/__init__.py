import asyncio
from typing import Any, Awaitable, Callable

import click
import httpx

from .._mealmate import MealMate
from ..models.errors import MealMateError
from ._formatters import format_output

format_option = click.option(
    "--format",
    "fmt",
    type=click.Choice(["json", "table"]),
    default="json",
    show_default=True,
    help="Output format",
)


def _run(
    ctx: click.Context, action: Callable[[MealMate], Awaitable[Any]], description: str
) -> Any:
    async def runner() -> Any:
        async with MealMate(debug=ctx.obj["debug"]) as client:
            return await action(client)

    try:
        return asyncio.run(runner())
    except (MealMateError, httpx.HTTPError) as e:
        click.echo(f"Error fetching {description}: {e}", err=True)
        raise click.Abort() from e


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """MealMate command line client.

    Reads MEALMATE_API_URL and MEALMATE_ID_TOKEN from the environment or a .env file.
    """
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug


@cli.command()
@format_option
@click.pass_context
def plans(ctx: click.Context, fmt: str) -> None:
    """List the available subscription plans."""
    response = _run(ctx, lambda client: client.subscription.get_plans(), "plans")
    format_output(response.plans, fmt)


@cli.command()
@click.argument("kind", type=click.Choice(["pantry", "grocery"]))
@format_option
@click.pass_context
def categories(ctx: click.Context, kind: str, fmt: str) -> None:
    """List pantry or grocery categories."""

    def action(client: MealMate) -> Awaitable[Any]:
        service = client.pantry if kind == "pantry" else client.grocery
        return service.get_categories()

    response = _run(ctx, action, f"{kind} categories")
    format_output(response.categories, fmt)


@cli.command()
@click.argument("endpoint")
@click.option("--public", is_flag=True, help="Send the request without a token")
@format_option
@click.pass_context
def get(ctx: click.Context, endpoint: str, public: bool, fmt: str) -> None:
    """Send an authenticated GET request to ENDPOINT and print the JSON response."""
    response = _run(
        ctx,
        lambda client: client.api_client.get(endpoint, require_auth=not public),
        endpoint,
    )
    format_output(response, fmt)


def main() -> None:
    cli(obj={})
