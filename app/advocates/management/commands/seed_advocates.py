import click
from flask.cli import with_appcontext
from external.database import db, init_db
from app.advocates.models import Advocate
from app.advocates.schemas import AdvocateSchema
from app.advocates.management.data import ADVOCATES


def replace_advocates(records):
    """Replace every advocate row with ``records`` in one transaction.

    Records use the API's camelCase keys and are validated through
    AdvocateSchema before anything is deleted.
    """
    rows = AdvocateSchema(many=True).load(records)

    try:
        db.session.query(Advocate).delete()
        db.session.add_all([Advocate(**row) for row in rows])
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    return len(rows)


@click.command("init-db")
@with_appcontext
def init_db_command():
    """Create the advocates table and its indexes."""
    init_db()
    click.echo("✅ Database tables created.")


@click.command("seed-advocates")
@with_appcontext
def seed_advocates():
    """Replace all advocates with the bundled sample data."""
    click.echo("Seeding database...")

    try:
        count = replace_advocates(ADVOCATES)
    except Exception as e:
        click.echo(f"❌ Error seeding database: {str(e)}")
        raise

    click.echo(f"✅ Seeded {count} advocates")
