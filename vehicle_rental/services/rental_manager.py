"""Rental manager: owns all records and enforces the uniqueness and availability rules."""

from __future__ import annotations

import logging
import os
from typing import Optional

from vehicle_rental.exceptions import (
    CustomerHasRentalError,
    CustomerNotFoundError,
    DuplicateCustomerError,
    DuplicateVehicleError,
    RentalNotFoundError,
    ValidationError,
    VehicleInUseError,
    VehicleNotFoundError,
    VehicleUnavailableError,
)
from vehicle_rental.models.customer import CustomerBase
from vehicle_rental.models.rental import Rental
from vehicle_rental.models.store import Store
from vehicle_rental.models.vehicle import VehicleBase
from vehicle_rental.services.codec import (
    SectionReader,
    customer_from_line,
    encode_sections,
    rental_fields,
    vehicle_from_line,
)
from vehicle_rental.utils.constants import FIELD_SEP
from vehicle_rental.utils.filters import fmt_number

logger = logging.getLogger(__name__)


class RentalManager:
    """
    Application service that:
    - Owns vehicles, customers, active rentals and the rental history
    - Validates rent/return requests against the current state
    - Saves and restores everything through the Store
    Every failing operation raises before touching state.
    """

    def __init__(self, store: Optional[Store] = None):
        self.store = store or Store()

    # --------------- Vehicles ---------------
    def add_vehicle(self, vehicle: Optional[VehicleBase]) -> None:
        if vehicle is None:
            raise ValidationError("Vehicle cannot be null.")
        if vehicle.registration in self.store.vehicles:
            raise DuplicateVehicleError()
        self.store.vehicles[vehicle.registration] = vehicle
        logger.info("Added vehicle %s (%s)", vehicle.registration, vehicle.type_tag)

    def remove_vehicle(self, registration: str) -> None:
        """Delete a vehicle unless an active rental still points at it."""
        if registration in self.store.rentals:
            raise VehicleInUseError()
        if registration not in self.store.vehicles:
            raise VehicleNotFoundError()
        del self.store.vehicles[registration]
        logger.info("Removed vehicle %s", registration)

    def get_vehicle(self, registration: str) -> Optional[VehicleBase]:
        return self.store.vehicles.get(registration)

    def all_vehicles(self) -> list[VehicleBase]:
        return list(self.store.vehicles.values())

    def vehicles_of_type(self, *classes: type) -> list[VehicleBase]:
        return [v for v in self.store.vehicles.values() if isinstance(v, classes)]

    def find_by_brand(self, brand: str) -> list[VehicleBase]:
        return [v for v in self.store.vehicles.values() if v.brand == brand]

    def find_by_max_price(self, max_price: float) -> list[VehicleBase]:
        return [v for v in self.store.vehicles.values() if v.base_cost <= max_price]

    def find_available(self) -> list[VehicleBase]:
        """Vehicles with no active rental."""
        return [v for reg, v in self.store.vehicles.items() if reg not in self.store.rentals]

    def is_rented(self, registration: str) -> bool:
        return registration in self.store.rentals

    # --------------- Customers ---------------
    def add_customer(self, customer: Optional[CustomerBase]) -> None:
        if customer is None:
            raise ValidationError("Customer cannot be null.")
        if customer.customer_id in self.store.customers:
            raise DuplicateCustomerError()
        self.store.customers[customer.customer_id] = customer
        logger.info("Added customer %s (%s)", customer.customer_id, customer.type_tag)

    def remove_customer(self, customer_id: str) -> None:
        if any(r.customer_id == customer_id for r in self.store.rentals.values()):
            raise CustomerHasRentalError()
        if customer_id not in self.store.customers:
            raise CustomerNotFoundError()
        del self.store.customers[customer_id]
        logger.info("Removed customer %s", customer_id)

    def get_customer(self, customer_id: str) -> Optional[CustomerBase]:
        return self.store.customers.get(customer_id)

    def all_customers(self) -> list[CustomerBase]:
        return list(self.store.customers.values())

    def customers_of_type(self, *classes: type) -> list[CustomerBase]:
        return [c for c in self.store.customers.values() if isinstance(c, classes)]

    # --------------- Rentals ---------------
    def rent_vehicle(self, registration: str, customer_id: str, start: str, end: str) -> Rental:
        """
        Open a rental for an available vehicle.
        The Rental validates its own dates; nothing is recorded if it refuses.
        """
        if registration not in self.store.vehicles:
            raise VehicleNotFoundError()
        if customer_id not in self.store.customers:
            raise CustomerNotFoundError()
        if registration in self.store.rentals:
            raise VehicleUnavailableError()
        rental = Rental(registration, customer_id, start, end)
        self.store.rentals[registration] = rental
        logger.info("Rented %s to %s (%s -> %s)", registration, customer_id, start, end)
        return rental

    def return_vehicle(self, registration: str, new_mileage: float) -> float:
        """
        Close the active rental of a vehicle:
        - mileage is updated (it may not go down)
        - the cost is computed over the rental duration
        - one summary line is archived to the history
        Returns the total cost.
        """
        rental = self.store.rentals.get(registration)
        if rental is None:
            raise RentalNotFoundError()
        vehicle = self.store.vehicles[registration]
        customer = self.store.customers[rental.customer_id]

        vehicle.update_mileage(new_mileage)
        cost = rental.total_cost(vehicle)

        self.store.history.append(FIELD_SEP.join([
            f"{vehicle.brand} {vehicle.model} ({vehicle.registration})",
            f"{customer.name} ({customer.customer_id})",
            rental.start_date,
            rental.end_date,
            fmt_number(cost),
        ]))
        del self.store.rentals[registration]
        logger.info("Returned %s, cost %s zl", registration, fmt_number(cost))
        return cost

    def get_rental(self, registration: str) -> Optional[Rental]:
        return self.store.rentals.get(registration)

    def active_rentals(self) -> list[Rental]:
        return list(self.store.rentals.values())

    def history(self) -> list[str]:
        return list(self.store.history)

    # --------------- Persistence ---------------
    def save_to_file(self, path: str | os.PathLike | None = None) -> None:
        lines = encode_sections(
            self.store.vehicles.values(),
            self.store.customers.values(),
            self.store.rentals.values(),
            self.store.history,
        )
        self.store.write_lines(lines, path)
        logger.info("Saved %s to %s", self.store.counts(), path or self.store.path)

    def load_from_file(self, path: str | os.PathLike | None = None) -> bool:
        """
        Replace the current state with the file's content.
        Returns False (state untouched) when the file does not exist.
        Broken vehicle/customer lines and rentals that no longer validate are skipped.
        """
        lines = self.store.read_lines(path)
        if lines is None:
            return False

        # fill a scratch manager first so a corrupt file leaves this one intact
        staging = RentalManager(Store(self.store.path))
        staging._replay(lines)

        self.store.clear()
        self.store.vehicles.update(staging.store.vehicles)
        self.store.customers.update(staging.store.customers)
        self.store.rentals.update(staging.store.rentals)
        self.store.history.extend(staging.store.history)

        logger.info("Loaded %s from %s", self.store.counts(), path or self.store.path)
        return True

    def _replay(self, lines: list[str]) -> None:
        reader = SectionReader(lines)

        for line in reader.records("vehicle"):
            if not line:
                continue
            try:
                vehicle = vehicle_from_line(line)
                self.add_vehicle(vehicle)
            except (ValueError, DuplicateVehicleError) as e:
                logger.warning("[Error Loading Vehicle]: %s Line: %s", e, line)

        for line in reader.records("customer"):
            if not line:
                continue
            try:
                self.add_customer(customer_from_line(line))
            except (ValueError, DuplicateCustomerError) as e:
                logger.warning("[Error Loading Customer]: %s Line: %s", e, line)

        for line in reader.records("rental"):
            fields = rental_fields(line)
            if fields is None:
                continue
            try:
                self.rent_vehicle(*fields)
            except (ValidationError, VehicleNotFoundError, CustomerNotFoundError,
                    VehicleUnavailableError) as e:
                logger.debug("Skipped rental %r: %s", line, e)

        self.store.history.extend(reader.records("history"))
