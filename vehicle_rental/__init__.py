import logging

from .config import Config, setup_logging
from .exceptions import StorageError
from .models.store import Store
from .services.rental_manager import RentalManager

logger = logging.getLogger(__name__)


def create_app(data_path=None, config: Config | None = None) -> RentalManager:
    """Build the manager for one session and load the data file into it."""
    config = config or Config.from_env()
    if not config.testing:
        setup_logging(config.log_level)
    store = Store(data_path or config.data_file)
    manager = RentalManager(store)
    try:
        manager.load_from_file()  # data.txt or empty
    except StorageError as e:
        logger.error("Load failed (%s); starting empty.", e)
    logger.info("Using data file: %s", store.path)
    return manager
