import pytest

from vehicle_rental.exceptions import (
    CustomerNotFoundError,
    InvalidDateRangeError,
    RentalNotFoundError,
    ValidationError,
    VehicleNotFoundError,
    VehicleUnavailableError,
)


def test_rent_marks_vehicle_unavailable(seeded):
    rental = seeded.rent_vehicle("WA12345", "ABC123456", "2024-01-01", "2024-01-04")
    assert rental.rental_duration_days() == 3
    assert seeded.is_rented("WA12345")
    assert "WA12345" not in [v.registration for v in seeded.find_available()]
    assert seeded.active_rentals() == [rental]


def test_second_rent_without_return_fails(seeded):
    seeded.rent_vehicle("WA12345", "ABC123456", "2024-01-01", "2024-01-04")
    with pytest.raises(VehicleUnavailableError) as exc:
        seeded.rent_vehicle("WA12345", "5252248481", "2024-02-01", "2024-02-04")
    assert "already rented" in str(exc.value)
    assert len(seeded.active_rentals()) == 1


def test_unknown_vehicle_or_customer(seeded):
    with pytest.raises(VehicleNotFoundError):
        seeded.rent_vehicle("NOPE", "ABC123456", "2024-01-01", "2024-01-04")
    with pytest.raises(CustomerNotFoundError):
        seeded.rent_vehicle("WA12345", "NOPE", "2024-01-01", "2024-01-04")
    assert seeded.active_rentals() == []


def test_bad_dates_record_nothing(seeded):
    with pytest.raises(InvalidDateRangeError):
        seeded.rent_vehicle("WA12345", "ABC123456", "2024-01-04", "2024-01-04")
    with pytest.raises(InvalidDateRangeError):
        seeded.rent_vehicle("WA12345", "ABC123456", "2023-02-29", "2023-03-04")
    assert seeded.active_rentals() == []
    assert not seeded.is_rented("WA12345")


def test_return_without_rental_fails(seeded):
    with pytest.raises(RentalNotFoundError):
        seeded.return_vehicle("WA12345", 50000)
    assert seeded.history() == []


def test_return_archives_one_history_line(seeded):
    seeded.rent_vehicle("WA12345", "ABC123456", "2024-01-01", "2024-01-04")
    cost = seeded.return_vehicle("WA12345", 42500)

    assert cost == 450
    assert seeded.get_vehicle("WA12345").mileage == 42500
    assert seeded.active_rentals() == []
    assert seeded.history() == [
        "Toyota Corolla (WA12345);Jan Kowalski (ABC123456);2024-01-01;2024-01-04;450"
    ]
    assert "WA12345" in [v.registration for v in seeded.find_available()]


def test_truck_return_includes_cargo_surcharge(seeded):
    seeded.rent_vehicle("GD90TR1", "5252248481", "2024-03-01", "2024-03-03")
    # 600*2 + 18000*0.1*2
    assert seeded.return_vehicle("GD90TR1", 310400) == pytest.approx(4800)
    assert seeded.history()[0].endswith(";4800")


def test_lower_mileage_keeps_rental_open(seeded):
    seeded.rent_vehicle("WA12345", "ABC123456", "2024-01-01", "2024-01-04")
    with pytest.raises(ValidationError):
        seeded.return_vehicle("WA12345", 100)
    assert seeded.is_rented("WA12345")
    assert seeded.get_vehicle("WA12345").mileage == 42000
    assert seeded.history() == []


def test_vehicle_cycles_back_to_available(seeded):
    seeded.rent_vehicle("WX4M0T", "ABC123456", "2024-05-01", "2024-05-02")
    seeded.return_vehicle("WX4M0T", 8000)
    seeded.rent_vehicle("WX4M0T", "5252248481", "2024-06-01", "2024-06-03")
    assert seeded.return_vehicle("WX4M0T", 8200) == 180
    assert len(seeded.history()) == 2


def test_get_rental_follows_rent_and_return(seeded):
    assert seeded.get_rental("WA12345") is None
    rental = seeded.rent_vehicle("WA12345", "ABC123456", "2024-01-01", "2024-01-04")
    assert seeded.get_rental("WA12345") is rental
    assert seeded.get_rental("PO7E001") is None
    seeded.return_vehicle("WA12345", 42100)
    assert seeded.get_rental("WA12345") is None
