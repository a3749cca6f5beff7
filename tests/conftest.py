import sys, os, pathlib

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

import pytest

from vehicle_rental.models.customer import BusinessCustomer, PrivateCustomer
from vehicle_rental.models.store import Store
from vehicle_rental.models.vehicle import (
    CombustionCar,
    ElectricCar,
    FuelType,
    LicenceCategory,
    Motorcycle,
    Truck,
)
from vehicle_rental.services.rental_manager import RentalManager


@pytest.fixture(autouse=True)
def test_env(monkeypatch):
    """Keep create_app() from installing log handlers during tests."""
    monkeypatch.setenv("APP_ENV", "test")
    yield


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "data.txt"


@pytest.fixture
def manager(data_file):
    """A fresh manager whose store points at a per-test data file."""
    return RentalManager(Store(data_file))


def make_combustion_car(reg="WA12345", **kw):
    fields = dict(registration=reg, brand="Toyota", model="Corolla", mileage=42000,
                  base_cost=150, licence=LicenceCategory.B, engine_size=1600,
                  fuel_consumption=6.5, fuel_type=FuelType.GASOLINE, doors=5)
    fields.update(kw)
    return CombustionCar(**fields)


def make_electric_car(reg="PO7E001", **kw):
    fields = dict(registration=reg, brand="Tesla", model="Model 3", mileage=15000,
                  base_cost=320, licence=LicenceCategory.B, battery_capacity=75, doors=4)
    fields.update(kw)
    return ElectricCar(**fields)


def make_truck(reg="GD90TR1", **kw):
    fields = dict(registration=reg, brand="Volvo", model="FH16", mileage=310000,
                  base_cost=600, licence=LicenceCategory.C, engine_size=12800,
                  fuel_consumption=32.0, fuel_type=FuelType.DIESEL, cargo_capacity=18000)
    fields.update(kw)
    return Truck(**fields)


def make_motorcycle(reg="WX4M0T", **kw):
    fields = dict(registration=reg, brand="Yamaha", model="MT-07", mileage=8000,
                  base_cost=90, licence=LicenceCategory.A, engine_size=689,
                  fuel_consumption=4.3, fuel_type=FuelType.GASOLINE)
    fields.update(kw)
    return Motorcycle(**fields)


@pytest.fixture
def factories():
    """Vehicle builders with valid defaults; keyword overrides per test."""
    return {
        "combustion": make_combustion_car,
        "electric": make_electric_car,
        "truck": make_truck,
        "motorcycle": make_motorcycle,
    }


@pytest.fixture
def seeded(manager):
    """
    Manager with one vehicle of each variant plus one private and one
    business customer, in a known insertion order.
    """
    for v in (make_combustion_car(), make_electric_car(), make_truck(), make_motorcycle()):
        manager.add_vehicle(v)
    manager.add_customer(PrivateCustomer("Jan Kowalski", "Warszawa", "ABC123456"))
    manager.add_customer(BusinessCustomer("Logistyka", "Gdansk", "5252248481"))
    return manager
