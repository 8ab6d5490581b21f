from __future__ import annotations

import click
from flask import Blueprint, current_app

from shopfront.app.extensions import db
from shopfront.app.models import Product, Review
from shopfront.app.seed_data import PRODUCTS, REVIEWS

cli_bp = Blueprint("cli", __name__, cli_group=None)


def seed_catalog(force: bool = False) -> int:
    """Load the demo catalog; returns the number of products inserted.

    Safe to run multiple times; it will no-op if products exist unless
    ``force`` is set, which replaces them.
    """
    if Product.query.count() > 0:
        if not force:
            return 0
        Review.query.delete()
        Product.query.delete()

    for row in PRODUCTS:
        product = Product(**row)
        db.session.add(product)
        for review in REVIEWS.get(row["name"], []):
            product.reviews.append(Review(**review))

    db.session.commit()
    current_app.logger.info("Seeded %d products", len(PRODUCTS))
    return len(PRODUCTS)


@cli_bp.cli.command("init-db")
def init_db() -> None:
    """Create tables."""
    db.create_all()
    click.echo("DB initialized (tables created).")


@cli_bp.cli.command("seed")
@click.option("--force", is_flag=True, help="Replace existing products.")
def seed(force: bool) -> None:
    """Seed the demo catalog."""
    db.create_all()
    inserted = seed_catalog(force=force)
    if inserted:
        click.echo(f"Seeded {inserted} products.")
    else:
        click.echo("Products already exist. Use --force to reseed.")
