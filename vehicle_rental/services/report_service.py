from __future__ import annotations

from typing import Iterable

from vehicle_rental.models.customer import BusinessCustomer, PrivateCustomer
from vehicle_rental.models.vehicle import CombustionCar, ElectricCar, Motorcycle, Truck
from vehicle_rental.services.rental_manager import RentalManager
from vehicle_rental.utils.constants import FIELD_SEP, RECORD_DIVIDER, RENTAL_DIVIDER

# vehicle listing filter -> (classes, message when nothing matches)
VEHICLE_FILTERS = {
    "all": (None, "No vehicles in the system."),
    "cars": ((CombustionCar, ElectricCar), "No cars found."),
    "combustion": ((CombustionCar,), "No combustion cars found."),
    "electric": ((ElectricCar,), "No electric cars found."),
    "motorcycles": ((Motorcycle,), "No motorcycles found."),
    "trucks": ((Truck,), "No trucks found."),
}

CUSTOMER_FILTERS = {
    "all": (None, "No customers in the system."),
    "private": ((PrivateCustomer,), "No private customers found."),
    "business": ((BusinessCustomer,), "No business customers found."),
}


def render_listing(items: Iterable, empty_message: str) -> str:
    """Descriptions separated by divider lines, or the empty message."""
    blocks = [f"{item.describe()}\n{RECORD_DIVIDER}" for item in items]
    if not blocks:
        return empty_message
    return "\n".join(blocks)


class ReportService:
    """Read-only text reports over the manager's current records."""

    def __init__(self, manager: RentalManager):
        self.manager = manager

    def vehicles(self, which: str = "all") -> str:
        classes, empty = VEHICLE_FILTERS[which]
        if classes is None:
            items = self.manager.all_vehicles()
        else:
            items = self.manager.vehicles_of_type(*classes)
        return render_listing(items, empty)

    def customers(self, which: str = "all") -> str:
        classes, empty = CUSTOMER_FILTERS[which]
        if classes is None:
            items = self.manager.all_customers()
        else:
            items = self.manager.customers_of_type(*classes)
        return render_listing(items, empty)

    def active_rentals(self) -> str:
        rentals = self.manager.active_rentals()
        if not rentals:
            return "No active rentals."
        blocks = []
        for r in rentals:
            vehicle = self.manager.get_vehicle(r.registration)
            customer = self.manager.get_customer(r.customer_id)
            blocks.append(f"{r.describe(vehicle, customer)}\n{RENTAL_DIVIDER}")
        return "\n".join(blocks)

    def rental_history(self) -> str:
        """
        History lines are archived as text; lines with fewer than five fields
        are not shown.
        """
        entries = self.manager.history()
        if not entries:
            return "No rental history."
        out = ["=== Rental History ==="]
        for entry in entries:
            parts = entry.split(FIELD_SEP)
            if len(parts) < 5:
                continue
            out.extend([
                f"Vehicle: {parts[0]}",
                f"Customer: {parts[1]}",
                f"Period: {parts[2]} - {parts[3]}",
                f"Cost: {parts[4]} zl",
                RECORD_DIVIDER,
            ])
        return "\n".join(out)

    # --------------- Search ---------------
    def vehicle_lookup(self, registration: str) -> str:
        v = self.manager.get_vehicle(registration)
        return v.describe() if v else "Vehicle not found."

    def customer_lookup(self, customer_id: str) -> str:
        c = self.manager.get_customer(customer_id)
        return c.describe() if c else "Customer not found."

    def vehicles_by_brand(self, brand: str) -> str:
        return render_listing(self.manager.find_by_brand(brand),
                              f"No vehicles found for brand: {brand}")

    def vehicles_by_max_price(self, max_price: float) -> str:
        return render_listing(self.manager.find_by_max_price(max_price),
                              "No vehicles found within this price range.")

    def available_vehicles(self) -> str:
        return render_listing(self.manager.find_available(),
                              "No available vehicles at the moment.")
