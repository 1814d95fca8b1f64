"""Main entry point for the Aerostop reservation CLI."""

import click

from aerostop.config import configure_logging, get_logger, settings
from aerostop.services import ReceiptCounter, ReservationCalculator, RoomCatalog
from aerostop.services.runner import SessionRunner
from aerostop.storage import InventoryStore, ReservationLog

logger = get_logger(__name__)


def build_runner() -> SessionRunner:
    """Wire the runner from settings and load the room catalog."""
    catalog = RoomCatalog(
        InventoryStore(settings.storage.inventory_file, settings.storage.encoding)
    )
    catalog.load()
    return SessionRunner(
        catalog=catalog,
        counter=ReceiptCounter(settings.pricing.receipt_start),
        calculator=ReservationCalculator(settings.pricing.tax_rate),
        reservation_log=ReservationLog(
            settings.storage.reservations_file, settings.storage.encoding
        ),
    )


@click.command()
def main() -> None:
    """Aerostop Hotel reservation system.

    Runs reservation sessions one after another until interrupted.
    """
    configure_logging()
    logger.info(
        "Starting reservation system",
        inventory_file=str(settings.storage.inventory_file),
        reservations_file=str(settings.storage.reservations_file),
    )

    runner = build_runner()
    while True:
        runner.run_session()


if __name__ == "__main__":
    main()
