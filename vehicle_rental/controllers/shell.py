"""
Interactive text-menu shell for the rental desk.

The shell only prompts, calls RentalManager / ReportService and prints; every
rule lives in the services. Typed errors are reported and the menu continues.
"""

import click

from vehicle_rental import create_app
from vehicle_rental.controllers.params import DATE, FUEL, NIP, TEXT
from vehicle_rental.exceptions import RentalSystemError
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
from vehicle_rental.services.report_service import ReportService
from vehicle_rental.utils.filters import fmt_number

MAIN_MENU = """
=== VEHICLE RENTAL SYSTEM ===
1. Add Vehicle
2. Remove Vehicle
3. Show Vehicles
4. Add Customer
5. Remove Customer
6. Show Customers
7. Rent Vehicle
8. Return Vehicle
9. Show Active Rentals
10. Show Rental History
11. Search
12. Save Data
0. Exit"""

VEHICLE_MENU = """
Choose display option:
1. All Vehicles
2. Cars
3. Motorcycles
4. Trucks"""

CAR_MENU = """
Choose Car Type:
1. All Cars
2. Combustion Cars
3. Electric Cars"""

CUSTOMER_MENU = """
Choose display option:
1. All Customers
2. Private Customers
3. Business Customers"""

SEARCH_MENU = """
=== SEARCH ===
1. Vehicle by Registration
2. Vehicles by Brand
3. Customer by ID
4. Vehicles by Max Price
5. Available Vehicles"""

DOORS = click.IntRange(2, 5)
NON_NEGATIVE_INT = click.IntRange(min=0)
NON_NEGATIVE_FLOAT = click.FloatRange(min=0)


class Shell:
    """Menu loop driving one RentalManager."""

    def __init__(self, manager: RentalManager, reports: ReportService | None = None):
        self.manager = manager
        self.reports = reports or ReportService(manager)
        self.actions = {
            1: self.add_vehicle,
            2: self.remove_vehicle,
            3: self.show_vehicles,
            4: self.add_customer,
            5: self.remove_customer,
            6: self.show_customers,
            7: self.rent_vehicle,
            8: self.return_vehicle,
            9: self.show_rentals,
            10: self.show_history,
            11: self.search,
            12: self.save,
        }

    def run(self) -> None:
        while True:
            click.echo(MAIN_MENU)
            choice = click.prompt("Select option", type=int)
            if choice == 0:
                self.exit()
                return
            action = self.actions.get(choice)
            if action is None:
                click.echo("Invalid option.")
                continue
            try:
                action()
            except RentalSystemError as e:
                click.echo(f"Operation failed: {e}")

    # --------------- Vehicles ---------------
    def add_vehicle(self) -> None:
        vtype = click.prompt(
            "Select Type:    1.CombustionCar    2.ElectricCar    3.Truck    4.Motorcycle",
            type=click.IntRange(min=1),
        )
        if vtype > 4:
            click.echo("Invalid vehicle type selected.")
            return
        brand = click.prompt("Brand", type=TEXT)
        model = click.prompt("Model", type=TEXT)
        reg = click.prompt("Reg Number", type=TEXT)
        price = click.prompt("Base Price (zl/day)", type=NON_NEGATIVE_FLOAT)
        mileage = click.prompt("Initial Mileage (km)", type=NON_NEGATIVE_FLOAT)
        common = dict(registration=reg, brand=brand, model=model, mileage=mileage, base_cost=price)
        try:
            if vtype == 1:
                vehicle = CombustionCar(
                    **common, licence=LicenceCategory.B,
                    engine_size=click.prompt("Engine Displacement (cm^3)", type=NON_NEGATIVE_INT),
                    fuel_consumption=click.prompt("Fuel Consumption (L/100km)", type=NON_NEGATIVE_FLOAT),
                    fuel_type=click.prompt("Fuel Type (d - Diesel, p - Petrol)", type=FUEL),
                    doors=click.prompt("Number of Doors (2-5)", type=DOORS),
                )
            elif vtype == 2:
                vehicle = ElectricCar(
                    **common, licence=LicenceCategory.B,
                    battery_capacity=click.prompt("Battery Capacity (kWh)", type=NON_NEGATIVE_FLOAT),
                    doors=click.prompt("Number of Doors (2-5)", type=DOORS),
                )
            elif vtype == 3:
                engine = click.prompt("Engine Displacement (cm^3)", type=NON_NEGATIVE_INT)
                cargo = click.prompt("Cargo Capacity (kg)", type=NON_NEGATIVE_INT)
                consumption = click.prompt("Fuel Consumption (L/100km)", type=NON_NEGATIVE_FLOAT)
                vehicle = Truck(
                    **common, licence=LicenceCategory.C,
                    engine_size=engine, fuel_consumption=consumption,
                    fuel_type=click.prompt("Fuel Type (d - Diesel, p - Petrol)", type=FUEL),
                    cargo_capacity=cargo,
                )
            else:
                vehicle = Motorcycle(
                    **common, licence=LicenceCategory.A,
                    engine_size=click.prompt("Engine Displacement (cm^3)", type=NON_NEGATIVE_INT),
                    fuel_consumption=click.prompt("Fuel Consumption (L/100km)", type=NON_NEGATIVE_FLOAT),
                    fuel_type=FuelType.GASOLINE,
                )
            self.manager.add_vehicle(vehicle)
        except RentalSystemError as e:
            click.echo(f"Error: {e}")
            return
        click.echo("Vehicle added successfully.")

    def remove_vehicle(self) -> None:
        reg = click.prompt("Reg Number", type=TEXT)
        self.manager.remove_vehicle(reg)
        click.echo("Vehicle removed successfully.")

    def show_vehicles(self) -> None:
        click.echo(VEHICLE_MENU)
        choice = click.prompt("", type=int, prompt_suffix="")
        if choice == 2:
            click.echo(CAR_MENU)
            car_choice = click.prompt("", type=int, prompt_suffix="")
            which = {1: "cars", 2: "combustion", 3: "electric"}.get(car_choice)
            if which is None:
                click.echo("Invalid car type.")
                return
        else:
            which = {1: "all", 3: "motorcycles", 4: "trucks"}.get(choice)
            if which is None:
                click.echo("Invalid option.")
                return
        click.echo()
        click.echo(self.reports.vehicles(which))

    # --------------- Customers ---------------
    def add_customer(self) -> None:
        ctype = click.prompt("Select Type:   1.Private    2.Business", type=int)
        if ctype not in (1, 2):
            click.echo("Invalid customer type selected.")
            return
        name = click.prompt("Name and Surname" if ctype == 1 else "Company Name", type=TEXT)
        address = click.prompt("Address (City, street, house number)", type=TEXT)
        try:
            if ctype == 1:
                customer = PrivateCustomer(name, address, click.prompt("ID Card Number", type=TEXT))
            else:
                customer = BusinessCustomer(name, address, click.prompt("NIP", type=NIP))
            self.manager.add_customer(customer)
        except RentalSystemError as e:
            click.echo(f"Error: {e}")
            return
        click.echo("Customer added successfully.")

    def remove_customer(self) -> None:
        customer_id = click.prompt("ID", type=TEXT)
        self.manager.remove_customer(customer_id)
        click.echo("Customer removed successfully.")

    def show_customers(self) -> None:
        click.echo(CUSTOMER_MENU)
        choice = click.prompt("", type=int, prompt_suffix="")
        which = {1: "all", 2: "private", 3: "business"}.get(choice)
        if which is None:
            click.echo("Invalid option.")
            return
        click.echo()
        click.echo(self.reports.customers(which))

    # --------------- Rentals ---------------
    def rent_vehicle(self) -> None:
        reg = click.prompt("Vehicle Reg", type=TEXT)
        customer_id = click.prompt("Customer ID", type=TEXT)
        start = click.prompt("Start (YYYY-MM-DD)", type=DATE)
        end = click.prompt("End (YYYY-MM-DD)", type=DATE)
        self.manager.rent_vehicle(reg, customer_id, start, end)
        click.echo("Vehicle rented successfully.")

    def return_vehicle(self) -> None:
        reg = click.prompt("Vehicle Reg", type=TEXT)
        mileage = click.prompt("New Mileage (km)", type=NON_NEGATIVE_FLOAT)
        cost = self.manager.return_vehicle(reg, mileage)
        click.echo(f"Vehicle returned. Total Cost: {fmt_number(cost)} zl")

    def show_rentals(self) -> None:
        click.echo()
        click.echo(self.reports.active_rentals())

    def show_history(self) -> None:
        click.echo(self.reports.rental_history())

    # --------------- Search ---------------
    def search(self) -> None:
        click.echo(SEARCH_MENU)
        choice = click.prompt("Select option", type=int)
        if choice == 1:
            reg = click.prompt("Enter Registration", type=TEXT)
            click.echo()
            click.echo(self.reports.vehicle_lookup(reg))
        elif choice == 2:
            brand = click.prompt("Enter Brand", type=TEXT)
            click.echo()
            click.echo(self.reports.vehicles_by_brand(brand))
        elif choice == 3:
            customer_id = click.prompt("Enter Customer ID (NIP/ID Card)", type=TEXT)
            click.echo(self.reports.customer_lookup(customer_id))
        elif choice == 4:
            max_price = click.prompt("Enter Max Price", type=NON_NEGATIVE_FLOAT)
            click.echo()
            click.echo(self.reports.vehicles_by_max_price(max_price))
        elif choice == 5:
            click.echo()
            click.echo(self.reports.available_vehicles())
        else:
            click.echo("Invalid option.")

    # --------------- Session ---------------
    def save(self) -> None:
        self.manager.save_to_file()
        click.echo("Saved.")

    def exit(self) -> None:
        if click.confirm("Do you want to save data before exiting?"):
            try:
                self.manager.save_to_file()
                click.echo("Data saved.")
            except RentalSystemError as e:
                click.echo(f"Operation failed: {e}")
        click.echo("Exiting...")


@click.command()
def main():
    """Vehicle rental desk: manage the fleet, customers and rentals."""
    click.echo("Loading data...")
    manager = create_app()
    click.echo("Data loaded.")
    Shell(manager).run()


if __name__ == "__main__":
    main()
