"""CLI commands for the party planner."""

import asyncio

import typer

from party_planner.bootstrap import BootstrapSequencer
from party_planner.config.logging import setup_logging
from party_planner.config.settings import settings
from party_planner.planner import PartyPlanner, build_planner
from party_planner.view.forms import SubmitEvent
from party_planner.view.regions import guests_at_event

app = typer.Typer(help="CLI commands for the party planner")


async def _bootstrapped_planner() -> PartyPlanner:
    """Build a planner and load the first snapshot."""
    planner = build_planner(settings)
    sequencer = BootstrapSequencer(planner)
    await sequencer.run()
    for stage in sequencer.failed_stages:
        typer.secho(f"Could not load {stage.value.removeprefix('loading_')}", fg=typer.colors.YELLOW)
    return planner


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests")):
    if verbose:
        setup_logging()


@app.command()
def render():
    """Load all parties and print the rendered page."""
    planner = asyncio.run(_bootstrapped_planner())
    typer.echo(planner.driver.document.to_html())


@app.command()
def list_parties():
    """List parties in the order the API returns them."""
    planner = asyncio.run(_bootstrapped_planner())

    if not planner.store.events:
        typer.secho("No parties found", fg=typer.colors.YELLOW)
        return
    for event in planner.store.events:
        typer.secho(f"  #{event.id} ", fg=typer.colors.CYAN, nl=False)
        typer.secho(f"{event.calendar_date} {event.name}", fg=typer.colors.BLUE)


@app.command()
def show_party(
    event_id: str = typer.Argument(
        ...,
        help="Party ID",
    ),
):
    """Show details and the guest list of one party."""

    async def _show_party():
        planner = await _bootstrapped_planner()
        found = await planner.select_event(event_id)
        return planner, found

    planner, found = asyncio.run(_show_party())
    if not found:
        typer.secho(f"Party not found: {event_id}", fg=typer.colors.RED)
        raise typer.Exit(1)

    event = planner.store.selected
    typer.secho(f"{event.name} #{event.id}", fg=typer.colors.GREEN)
    typer.secho(f"  Date: {event.calendar_date}", fg=typer.colors.BLUE)
    typer.secho(f"  Location: {event.location}", fg=typer.colors.BLUE)
    typer.secho(f"  {event.description}", fg=typer.colors.BLUE)

    guests = guests_at_event(tuple(planner.store.guests), tuple(planner.store.rsvps), event.id)
    typer.echo()
    if guests:
        typer.secho("Guests:", fg=typer.colors.GREEN)
        for guest in guests:
            typer.secho(f"  - {guest.name}", fg=typer.colors.BLUE)
    else:
        typer.secho("No guests yet", fg=typer.colors.YELLOW)


@app.command()
def add_party(
    name: str = typer.Option(..., "--name", "-n", help="Party name"),
    description: str = typer.Option(..., "--description", "-d", help="Party description"),
    date: str = typer.Option(..., "--date", help="Party date, YYYY-MM-DD"),
    location: str = typer.Option(..., "--location", "-l", help="Party location"),
):
    """Add a party through the add-party form and show the refreshed list."""

    async def _add_party():
        planner = await _bootstrapped_planner()
        submit_event = SubmitEvent(
            form_data={
                "name": name,
                "description": description,
                "date": date,
                "location": location,
            }
        )
        created = await planner.submit_add_event(submit_event)
        return planner, created

    planner, created = asyncio.run(_add_party())
    if not created:
        typer.secho("Failed to add party", fg=typer.colors.RED)
        raise typer.Exit(1)

    typer.secho("Party added!", fg=typer.colors.GREEN)
    typer.secho(f"  Parties now listed: {len(planner.store.events)}", fg=typer.colors.CYAN)


@app.command()
def delete_party(
    event_id: str = typer.Argument(
        ...,
        help="Party ID to delete",
    ),
):
    """Delete a party and show the refreshed list."""

    async def _delete_party():
        planner = await _bootstrapped_planner()
        deleted = await planner.delete_event(event_id)
        return planner, deleted

    planner, deleted = asyncio.run(_delete_party())
    if not deleted:
        typer.secho(f"Failed to delete party: {event_id}", fg=typer.colors.RED)
        raise typer.Exit(1)

    typer.secho(f"Party {event_id} deleted!", fg=typer.colors.GREEN)
    typer.secho(f"  Parties now listed: {len(planner.store.events)}", fg=typer.colors.CYAN)


if __name__ == "__main__":
    app()
