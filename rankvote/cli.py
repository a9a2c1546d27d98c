import json

import click

from rankvote.extensions import db
from rankvote.services import roster
from rankvote.services.voting import (
    close_voting,
    init_voting_status,
    open_voting,
    reset_votes,
)


def register_commands(app):
    @app.cli.command("init-db")
    def init_db():
        """Create tables and the closed voting window."""
        db.create_all()
        init_voting_status()
        db.session.commit()
        click.echo("Database initialised.")

    @app.cli.command("add-guest")
    @click.argument("name")
    def add_guest(name):
        guest = roster.register_guest(name)
        click.echo(f"{guest.id}\t{guest.name}\t{guest.code}")

    @app.cli.command("open-voting")
    def open_voting_command():
        open_voting()
        click.echo("Voting is open.")

    @app.cli.command("close-voting")
    def close_voting_command():
        result = close_voting()
        click.echo(json.dumps(result.to_dict(), indent=2))

    @app.cli.command("reset-votes")
    @click.confirmation_option(prompt="Delete every ballot?")
    def reset_votes_command():
        deleted = reset_votes()
        click.echo(f"Deleted {deleted} ballot(s).")
