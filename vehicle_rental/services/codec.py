"""Line mappers between model objects and the ';'-separated save file."""

from __future__ import annotations

from typing import Callable, Iterator, Optional

from vehicle_rental.exceptions import StorageError, ValidationError
from vehicle_rental.models.customer import BusinessCustomer, CustomerBase, PrivateCustomer
from vehicle_rental.models.rental import Rental
from vehicle_rental.models.vehicle import (
    CombustionCar,
    ElectricCar,
    FuelType,
    LicenceCategory,
    Motorcycle,
    Truck,
    VehicleBase,
)
from vehicle_rental.utils.constants import FIELD_SEP, CustomerTag, VehicleTag
from vehicle_rental.utils.filters import fmt_field


def _join(*fields) -> str:
    return FIELD_SEP.join(str(f) for f in fields)


def _split(line: str) -> list[str]:
    return line.split(FIELD_SEP)


# ----------------- model -> line -----------------
def vehicle_to_line(v: VehicleBase) -> str:
    head = (v.type_tag, v.brand, v.model, v.registration, fmt_field(v.base_cost))
    if isinstance(v, ElectricCar):
        return _join(*head, fmt_field(v.battery_capacity), v.licence.code,
                     fmt_field(v.mileage), v.doors)
    if isinstance(v, (CombustionCar, Truck, Motorcycle)):
        fields = [*head, v.engine_size, fmt_field(v.fuel_consumption), v.fuel_type.code,
                  v.licence.code, fmt_field(v.mileage)]
        if isinstance(v, CombustionCar):
            fields.append(v.doors)
        elif isinstance(v, Truck):
            fields.append(v.cargo_capacity)
        return _join(*fields)
    raise ValidationError(f"Unsupported vehicle type: {type(v).__name__}")


def customer_to_line(c: CustomerBase) -> str:
    return _join(c.type_tag, c.name, c.address, c.customer_id)


def rental_to_line(r: Rental) -> str:
    return _join(r.registration, r.customer_id, r.start_date, r.end_date)


# ----------------- line -> model -----------------
def _combustion_car(p: list[str]) -> VehicleBase:
    return CombustionCar(
        registration=p[3], brand=p[1], model=p[2],
        mileage=float(p[9]), base_cost=float(p[4]),
        licence=LicenceCategory.from_code(int(p[8])),
        engine_size=int(p[5]), fuel_consumption=float(p[6]),
        fuel_type=FuelType.from_code(int(p[7])), doors=int(p[10]),
    )


def _electric_car(p: list[str]) -> VehicleBase:
    return ElectricCar(
        registration=p[3], brand=p[1], model=p[2],
        mileage=float(p[7]), base_cost=float(p[4]),
        licence=LicenceCategory.from_code(int(p[6])),
        battery_capacity=float(p[5]), doors=int(p[8]),
    )


def _truck(p: list[str]) -> VehicleBase:
    return Truck(
        registration=p[3], brand=p[1], model=p[2],
        mileage=float(p[9]), base_cost=float(p[4]),
        licence=LicenceCategory.from_code(int(p[8])),
        engine_size=int(p[5]), fuel_consumption=float(p[6]),
        fuel_type=FuelType.from_code(int(p[7])), cargo_capacity=int(p[10]),
    )


def _motorcycle(p: list[str]) -> VehicleBase:
    return Motorcycle(
        registration=p[3], brand=p[1], model=p[2],
        mileage=float(p[9]), base_cost=float(p[4]),
        licence=LicenceCategory.from_code(int(p[8])),
        engine_size=int(p[5]), fuel_consumption=float(p[6]),
        fuel_type=FuelType.from_code(int(p[7])),
    )


# tag -> (minimum field count, builder)
VEHICLE_PARSERS: dict[str, tuple[int, Callable[[list[str]], VehicleBase]]] = {
    VehicleTag.COMBUSTION_CAR: (11, _combustion_car),
    VehicleTag.ELECTRIC_CAR: (9, _electric_car),
    VehicleTag.TRUCK: (11, _truck),
    VehicleTag.MOTORCYCLE: (10, _motorcycle),
}

CUSTOMER_TYPES: dict[str, type[CustomerBase]] = {
    CustomerTag.PRIVATE: PrivateCustomer,
    CustomerTag.BUSINESS: BusinessCustomer,
}


def vehicle_from_line(line: str) -> VehicleBase:
    """
    Build a vehicle from a save-file line.
    Raises ValueError (ValidationError included) on unknown tags, short lines
    or bad field values.
    """
    parts = _split(line)
    entry = VEHICLE_PARSERS.get(parts[0])
    if entry is None:
        raise ValidationError(f"Unknown vehicle type: {parts[0]!r}")
    min_fields, build = entry
    if len(parts) < min_fields:
        raise ValidationError(f"Expected {min_fields} fields, got {len(parts)}")
    return build(parts)


def customer_from_line(line: str) -> CustomerBase:
    parts = _split(line)
    cls = CUSTOMER_TYPES.get(parts[0])
    if cls is None:
        raise ValidationError(f"Unknown customer type: {parts[0]!r}")
    if len(parts) < 4:
        raise ValidationError(f"Expected 4 fields, got {len(parts)}")
    return cls(parts[1], parts[2], parts[3])


def rental_fields(line: str) -> Optional[tuple[str, str, str, str]]:
    """(reg, customer_id, start, end) or None when the line is too short."""
    parts = _split(line)
    if len(parts) < 4:
        return None
    return parts[0], parts[1], parts[2], parts[3]


# ----------------- sections -----------------
class SectionReader:
    """
    Walks the four count-prefixed sections of a save file.
    A missing count line reads as zero; a non-numeric one is a StorageError.
    """

    def __init__(self, lines: list[str]):
        self._lines: Iterator[str] = iter(lines)

    def _next(self) -> Optional[str]:
        return next(self._lines, None)

    def records(self, section: str) -> Iterator[str]:
        header = self._next()
        if header is None or not header.strip():
            return
        try:
            count = int(header.strip())
        except ValueError:
            raise StorageError(f"Corrupt data file: bad {section} count {header!r}") from None
        for _ in range(count):
            line = self._next()
            if line is None:
                break
            yield line


def encode_sections(vehicles, customers, rentals, history) -> list[str]:
    lines: list[str] = [str(len(vehicles))]
    lines.extend(vehicle_to_line(v) for v in vehicles)
    lines.append(str(len(customers)))
    lines.extend(customer_to_line(c) for c in customers)
    lines.append(str(len(rentals)))
    lines.extend(rental_to_line(r) for r in rentals)
    lines.append(str(len(history)))
    lines.extend(history)
    return lines
