import logging
import os
from pathlib import Path

from vehicle_rental.exceptions import StorageError
from vehicle_rental.models.customer import CustomerBase
from vehicle_rental.models.rental import Rental
from vehicle_rental.models.vehicle import VehicleBase
from vehicle_rental.utils.constants import DEFAULT_DATA_FILE

logger = logging.getLogger(__name__)


class Store:
    """
    In-memory record store owned by one RentalManager.

    Collections are insertion-ordered dicts keyed by registration / customer id,
    so every listing comes out in the order entities were added. Active rentals
    are keyed by the registration of the rented vehicle (one rental per vehicle).
    """

    def __init__(self, path: str | os.PathLike | None = None):
        self.path = str(path or DEFAULT_DATA_FILE)
        self.vehicles: dict[str, VehicleBase] = {}
        self.customers: dict[str, CustomerBase] = {}
        self.rentals: dict[str, Rental] = {}
        self.history: list[str] = []

    def clear(self) -> None:
        self.rentals.clear()
        self.vehicles.clear()
        self.customers.clear()
        self.history.clear()

    def counts(self) -> dict[str, int]:
        return {
            "vehicles": len(self.vehicles),
            "customers": len(self.customers),
            "rentals": len(self.rentals),
            "history": len(self.history),
        }

    # ---------- Persistence ----------
    def read_lines(self, path: str | os.PathLike | None = None) -> list[str] | None:
        """Return the file's lines without line endings, or None if it does not exist."""
        target = str(path or self.path)
        if not os.path.exists(target):
            logger.info("Data file %s not found; starting empty.", target)
            return None
        try:
            with open(target, "r", encoding="utf-8") as f:
                return [line.rstrip("\r\n") for line in f]
        except OSError as e:
            raise StorageError(f"Could not open file for loading: {e}") from e
        except UnicodeDecodeError as e:
            raise StorageError(f"Data file {target} is not valid UTF-8: {e}") from e

    def write_lines(self, lines: list[str], path: str | os.PathLike | None = None) -> None:
        """Write the lines to the data file safely (atomic replace)."""
        target = str(path or self.path)
        parent = Path(target).resolve().parent
        tmp = target + ".tmp"
        try:
            os.makedirs(parent, exist_ok=True)
            with open(tmp, "w", encoding="utf-8", newline="\n") as f:
                for line in lines:
                    f.write(line)
                    f.write("\n")
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, target)
        except OSError as e:
            raise StorageError(f"Could not open file for saving: {e}") from e
