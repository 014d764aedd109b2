"""Demo run: ``python -m parcel_tracker``."""

from __future__ import annotations

import asyncio
import logging
import sys

from pydantic import ValidationError

from parcel_tracker.config import ParcelTrackerConfig
from parcel_tracker.contrib.sqlalchemy.engine import (
    create_engine_from_config,
    create_session_factory,
)
from parcel_tracker.contrib.sqlalchemy.models import create_schema
from parcel_tracker.contrib.sqlalchemy.store import ParcelStore
from parcel_tracker.exceptions import ParcelLockedError, ParcelTrackerError
from parcel_tracker.service import ParcelService

logger = logging.getLogger(__name__)

DEMO_CLIENT = 1
DEMO_ADDRESS = "Pskov, Pushkin st., Kolotushkin house, 5"
DEMO_NEW_ADDRESS = "Saratov, Vyazov st., 12"


async def run_demo(config: ParcelTrackerConfig) -> None:
    """Walk a parcel through its lifecycle against the configured database."""
    engine = create_engine_from_config(config)
    try:
        await create_schema(engine)
        store = ParcelStore.from_config(create_session_factory(engine), config)
        service = ParcelService(store)

        parcel = await service.register(DEMO_CLIENT, DEMO_ADDRESS)
        await service.change_address(parcel.number, DEMO_NEW_ADDRESS)
        await service.next_status(parcel.number)
        await service.list_client_parcels(DEMO_CLIENT)

        try:
            await service.delete(parcel.number)
        except ParcelLockedError as exc:
            logger.info("%s", exc)

        await service.list_client_parcels(DEMO_CLIENT)

        parcel = await service.register(DEMO_CLIENT, DEMO_ADDRESS)
        await service.delete(parcel.number)
        await service.list_client_parcels(DEMO_CLIENT)
    finally:
        await engine.dispose()


def main() -> int:
    try:
        config = ParcelTrackerConfig()
    except ValidationError as exc:
        logging.basicConfig()
        logger.error("Invalid configuration: %s", exc)
        return 1
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    try:
        asyncio.run(run_demo(config))
    except ParcelTrackerError as exc:
        logger.error("Demo failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
