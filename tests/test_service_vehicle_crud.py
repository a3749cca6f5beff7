"""
Unit tests for fleet and customer CRUD on RentalManager. Focus on the
uniqueness rules and the pure lookups: failed calls leave collections unchanged
and every listing follows insertion order.
"""

import pytest

from vehicle_rental.exceptions import (
    CustomerNotFoundError,
    DuplicateCustomerError,
    DuplicateVehicleError,
    ValidationError,
    VehicleNotFoundError,
)
from vehicle_rental.models.customer import BusinessCustomer, PrivateCustomer

from conftest import make_combustion_car, make_electric_car, make_truck


def test_add_and_remove_vehicle(manager):
    car = make_combustion_car()
    manager.add_vehicle(car)
    assert manager.get_vehicle("WA12345") is car

    manager.remove_vehicle("WA12345")
    assert manager.get_vehicle("WA12345") is None
    assert manager.all_vehicles() == []


def test_duplicate_registration_is_a_conflict(manager):
    manager.add_vehicle(make_combustion_car())
    with pytest.raises(DuplicateVehicleError):
        manager.add_vehicle(make_electric_car(reg="WA12345"))
    assert len(manager.all_vehicles()) == 1
    assert manager.get_vehicle("WA12345").kind() == "Car"


def test_missing_vehicle_is_rejected(manager):
    with pytest.raises(ValidationError):
        manager.add_vehicle(None)


def test_invalid_vehicle_leaves_no_trace(manager):
    with pytest.raises(ValidationError):
        manager.add_vehicle(make_combustion_car(base_cost=0))
    assert manager.all_vehicles() == []


def test_remove_unknown_vehicle(manager):
    with pytest.raises(VehicleNotFoundError):
        manager.remove_vehicle("NOPE")


def test_find_by_brand_is_exact(seeded):
    seeded.add_vehicle(make_combustion_car(reg="WA2", model="Yaris"))
    assert [v.registration for v in seeded.find_by_brand("Toyota")] == ["WA12345", "WA2"]
    assert seeded.find_by_brand("toyota") == []
    assert seeded.find_by_brand("Toy") == []


def test_find_by_max_price_is_inclusive(seeded):
    # costs: car 150, electric 320, truck 600, motorcycle 90
    assert [v.registration for v in seeded.find_by_max_price(150)] == ["WA12345", "WX4M0T"]
    assert seeded.find_by_max_price(10) == []
    assert len(seeded.find_by_max_price(1000)) == 4


def test_vehicles_of_type(seeded):
    from vehicle_rental.models.vehicle import CombustionCar, ElectricCar, Truck

    cars = seeded.vehicles_of_type(CombustionCar, ElectricCar)
    assert [v.registration for v in cars] == ["WA12345", "PO7E001"]
    assert seeded.vehicles_of_type(Truck) == [make_truck()]


# ---------- customers ----------
def test_add_get_remove_customer(manager):
    c = PrivateCustomer("Jan Kowalski", "Warszawa", "ABC123456")
    manager.add_customer(c)
    assert manager.get_customer("ABC123456") is c

    manager.remove_customer("ABC123456")
    assert manager.get_customer("ABC123456") is None


def test_duplicate_customer_id_is_a_conflict(manager):
    manager.add_customer(PrivateCustomer("Jan", "Warszawa", "5252248481"))
    with pytest.raises(DuplicateCustomerError):
        manager.add_customer(BusinessCustomer("Firma", "Gdansk", "5252248481"))
    assert len(manager.all_customers()) == 1


def test_remove_unknown_customer(manager):
    with pytest.raises(CustomerNotFoundError):
        manager.remove_customer("X")
    with pytest.raises(ValidationError):
        manager.add_customer(None)


def test_customers_of_type(seeded):
    assert [c.customer_id for c in seeded.customers_of_type(BusinessCustomer)] == ["5252248481"]
    assert [c.customer_id for c in seeded.customers_of_type(PrivateCustomer)] == ["ABC123456"]
