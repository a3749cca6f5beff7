import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from vehicle_rental.exceptions import ValidationError
from vehicle_rental.utils.constants import CARGO_RATE, MAX_REG_LENGTH, VehicleKind, VehicleTag
from vehicle_rental.utils.filters import fmt_number


class _CodedEnum(Enum):
    """Enum whose members are stored in the save file by declaration index."""

    @property
    def code(self) -> int:
        return list(type(self)).index(self)

    @classmethod
    def from_code(cls, code: int):
        members = list(cls)
        if not 0 <= code < len(members):
            raise ValueError(f"Unknown {cls.__name__} code: {code}")
        return members[code]


class LicenceCategory(_CodedEnum):
    A = "A"
    B = "B"
    C = "C"


class FuelType(_CodedEnum):
    GASOLINE = "Gasoline"
    DIESEL = "Diesel"


def _require_text(value, label: str) -> None:
    if not isinstance(value, str) or not value:
        raise ValidationError(f"{label} cannot be empty.")


def _require_positive(value, message: str) -> None:
    if not math.isfinite(value) or value <= 0:
        raise ValidationError(message)


def _require_count(value, label: str) -> int:
    """Positive whole number; integral floats such as 1598.0 come back as int."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{label} must be a whole number.")
    if isinstance(value, float) and not value.is_integer():
        raise ValidationError(f"{label} must be a whole number.")
    _require_positive(value, f"{label} must be positive.")
    return int(value)


def _require_mileage(value) -> None:
    if not math.isfinite(value) or value < 0:
        raise ValidationError("Mileage cannot be negative.")


@dataclass
class VehicleBase(ABC):
    """
    Base vehicle model. ``base_cost`` is the listed price per day.
    Subclasses decide how the rental cost is derived from it.
    """
    registration: str
    brand: str
    model: str
    mileage: float  # km
    base_cost: float  # zl per day
    licence: LicenceCategory

    type_tag = ""
    label = ""

    def __post_init__(self) -> None:
        if not isinstance(self.registration, str) or not self.registration:
            raise ValidationError("Registration number cannot be empty.")
        if len(self.registration) > MAX_REG_LENGTH:
            raise ValidationError(f"Registration number cannot exceed {MAX_REG_LENGTH} characters.")
        _require_text(self.brand, "Brand")
        _require_text(self.model, "Model")
        _require_mileage(self.mileage)
        _require_positive(self.base_cost, "Base cost must be positive.")
        try:
            self.licence = LicenceCategory(self.licence)
        except ValueError:
            raise ValidationError(f"Invalid licence category: {self.licence!r}") from None

    @abstractmethod
    def compute_rent_cost(self, days: int) -> float:
        """Price for a rental of ``days`` days."""

    @abstractmethod
    def kind(self) -> str:
        """Main vehicle type: Car, Truck or Motorcycle."""

    def _detail_lines(self) -> list[str]:
        return []

    def describe(self) -> str:
        lines = [
            f"{self.label}: {self.brand} {self.model} [{self.registration}]",
            f"  Mileage: {fmt_number(self.mileage)} km",
            f"  Base Cost: {fmt_number(self.base_cost)} zl/day",
            f"  Licence: {self.licence.value}",
        ]
        lines.extend(self._detail_lines())
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.describe()

    # ---------- setters ----------
    def update_mileage(self, new_mileage: float) -> None:
        """Mileage only ever goes up."""
        _require_mileage(new_mileage)
        if new_mileage < self.mileage:
            raise ValidationError("New mileage cannot be lower than current mileage.")
        self.mileage = new_mileage

    def update_base_cost(self, new_cost: float) -> None:
        _require_positive(new_cost, "Base cost must be positive.")
        self.base_cost = new_cost


@dataclass
class CombustionVehicle(VehicleBase):
    engine_size: int  # cm3
    fuel_consumption: float  # L/100km
    fuel_type: FuelType

    def __post_init__(self) -> None:
        super().__post_init__()
        self.engine_size = _require_count(self.engine_size, "Engine size")
        _require_positive(self.fuel_consumption, "Fuel consumption must be positive.")
        try:
            self.fuel_type = FuelType(self.fuel_type)
        except ValueError:
            raise ValidationError(f"Invalid fuel type: {self.fuel_type!r}") from None

    def _detail_lines(self) -> list[str]:
        return [
            f"  Engine: {self.engine_size} cm3",
            f"  Fuel: {self.fuel_type.value} ({fmt_number(self.fuel_consumption)} L/100km)",
        ]

    def update_engine_size(self, size: int) -> None:
        self.engine_size = _require_count(size, "Engine size")

    def update_fuel_consumption(self, consumption: float) -> None:
        _require_positive(consumption, "Fuel consumption must be positive.")
        self.fuel_consumption = consumption


@dataclass
class CombustionCar(CombustionVehicle):
    """
    Cars follow the base rule. A non-positive duration is rejected.
    """
    doors: int

    type_tag = VehicleTag.COMBUSTION_CAR
    label = "Car"

    def __post_init__(self) -> None:
        super().__post_init__()
        self.doors = _require_count(self.doors, "Number of doors")

    def compute_rent_cost(self, days: int) -> float:
        if days <= 0:
            raise ValidationError("Rental duration must be positive.")
        return self.base_cost * days

    def kind(self) -> str:
        return VehicleKind.CAR

    def _detail_lines(self) -> list[str]:
        return super()._detail_lines() + [f"  Doors: {self.doors}"]

    def update_doors(self, doors: int) -> None:
        self.doors = _require_count(doors, "Doors")


@dataclass
class ElectricVehicle(VehicleBase):
    battery_capacity: float  # kWh

    def __post_init__(self) -> None:
        super().__post_init__()
        _require_positive(self.battery_capacity, "Battery capacity must be positive.")

    def update_battery_capacity(self, capacity: float) -> None:
        _require_positive(capacity, "Battery capacity must be positive.")
        self.battery_capacity = capacity


@dataclass
class ElectricCar(ElectricVehicle):
    """
    Electric cars price like combustion cars, but a non-positive duration
    costs nothing instead of failing.
    """
    doors: int

    type_tag = VehicleTag.ELECTRIC_CAR
    label = "Electric Car"

    def __post_init__(self) -> None:
        super().__post_init__()
        self.doors = _require_count(self.doors, "Number of doors")

    def compute_rent_cost(self, days: int) -> float:
        if days <= 0:
            return 0.0
        return self.base_cost * days

    def kind(self) -> str:
        return VehicleKind.CAR

    def describe(self) -> str:
        # battery is listed straight after the header
        lines = [
            f"{self.label}: {self.brand} {self.model} [{self.registration}]",
            f"  Battery: {fmt_number(self.battery_capacity)} kWh",
            f"  Mileage: {fmt_number(self.mileage)} km",
            f"  Base Cost: {fmt_number(self.base_cost)} zl/day",
            f"  Licence: {self.licence.value}",
            f"  Doors: {self.doors}",
        ]
        return "\n".join(lines)

    def update_doors(self, doors: int) -> None:
        self.doors = _require_count(doors, "Doors")


@dataclass
class Truck(CombustionVehicle):
    """
    Trucks carry a per-day surcharge proportional to cargo capacity.
    A non-positive duration costs nothing.
    """
    cargo_capacity: int  # kg

    type_tag = VehicleTag.TRUCK
    label = "Truck"

    def __post_init__(self) -> None:
        super().__post_init__()
        self.cargo_capacity = _require_count(self.cargo_capacity, "Cargo capacity")

    def compute_rent_cost(self, days: int) -> float:
        if days <= 0:
            return 0.0
        return (self.base_cost * days) + (self.cargo_capacity * CARGO_RATE * days)

    def kind(self) -> str:
        return VehicleKind.TRUCK

    def _detail_lines(self) -> list[str]:
        return super()._detail_lines() + [f"  Cargo Capacity: {self.cargo_capacity} kg"]

    def update_cargo_capacity(self, capacity: int) -> None:
        self.cargo_capacity = _require_count(capacity, "Cargo capacity")


@dataclass
class Motorcycle(CombustionVehicle):
    """
    Motorcycles follow the base rule. A non-positive duration is rejected.
    """

    type_tag = VehicleTag.MOTORCYCLE
    label = "Motorcycle"

    def compute_rent_cost(self, days: int) -> float:
        if days <= 0:
            raise ValidationError("Rental duration must be positive.")
        return self.base_cost * days

    def kind(self) -> str:
        return VehicleKind.MOTORCYCLE
