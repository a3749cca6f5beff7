# vehicle_rental/utils/constants.py

"""
Global constants for vehicle kinds, save-file tags and report layout.
These constants are imported by models, services and the shell.
"""

# Date format (used for rental start/end)
DATE_FMT = "YYYY-MM-DD"

# Save file
DEFAULT_DATA_FILE = "data.txt"
FIELD_SEP = ";"

# Report layout
RECORD_DIVIDER = "-----------------"
RENTAL_DIVIDER = "================="

MAX_REG_LENGTH = 9
NIP_LENGTH = 10

# Per-day cargo surcharge applied to trucks (zl per kg of capacity)
CARGO_RATE = 0.1


class VehicleKind:
    CAR = "Car"
    TRUCK = "Truck"
    MOTORCYCLE = "Motorcycle"


class VehicleTag:
    COMBUSTION_CAR = "CombustionCar"
    ELECTRIC_CAR = "ElectricCar"
    TRUCK = "Truck"
    MOTORCYCLE = "Motorcycle"


class CustomerKind:
    PRIVATE = "Private"
    BUSINESS = "Business"


class CustomerTag:
    PRIVATE = "PrivateCustomer"
    BUSINESS = "BusinessCustomer"
