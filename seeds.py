from vehicle_rental import create_app
from vehicle_rental.models.customer import BusinessCustomer, PrivateCustomer
from vehicle_rental.models.vehicle import (
    CombustionCar,
    ElectricCar,
    FuelType,
    LicenceCategory,
    Motorcycle,
    Truck,
)
from vehicle_rental.services.rental_manager import RentalManager

DEMO_VEHICLES = [
    CombustionCar("WA12345", "Toyota", "Corolla", 42000, 150, LicenceCategory.B,
                  1600, 6.5, FuelType.GASOLINE, 5),
    CombustionCar("KR5521C", "Skoda", "Octavia", 87000, 170, LicenceCategory.B,
                  2000, 5.4, FuelType.DIESEL, 5),
    ElectricCar("PO7E001", "Tesla", "Model 3", 15000, 320, LicenceCategory.B, 75, 4),
    Truck("GD90TR1", "Volvo", "FH16", 310000, 600, LicenceCategory.C,
          12800, 32.0, FuelType.DIESEL, 18000),
    Motorcycle("WX4M0T", "Yamaha", "MT-07", 8000, 90, LicenceCategory.A,
               689, 4.3, FuelType.GASOLINE),
]

DEMO_CUSTOMERS = [
    PrivateCustomer("Jan Kowalski", "Warszawa, Marszalkowska 10", "ABC123456"),
    PrivateCustomer("Anna Nowak", "Krakow, Florianska 3", "DEF654321"),
    BusinessCustomer("Logistyka Sp. z o.o.", "Gdansk, Portowa 7", "5252248481"),
]


def ensure_vehicle(manager: RentalManager, vehicle) -> bool:
    """Add the vehicle unless its registration is already taken."""
    if manager.get_vehicle(vehicle.registration):
        return False
    manager.add_vehicle(vehicle)
    return True


def ensure_customer(manager: RentalManager, customer) -> bool:
    if manager.get_customer(customer.customer_id):
        return False
    manager.add_customer(customer)
    return True


def main():
    manager = create_app()

    added_v = sum(ensure_vehicle(manager, v) for v in DEMO_VEHICLES)
    added_c = sum(ensure_customer(manager, c) for c in DEMO_CUSTOMERS)

    manager.save_to_file()

    print(f"Seed complete: {added_v} vehicles and {added_c} customers added.")
    print(f"Data file: {manager.store.path}")


if __name__ == "__main__":
    main()
