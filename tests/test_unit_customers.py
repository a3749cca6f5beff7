import dataclasses

import pytest

from vehicle_rental.exceptions import ValidationError
from vehicle_rental.models.customer import BusinessCustomer, PrivateCustomer
from vehicle_rental.utils.validators import valid_nip


def test_private_customer_is_keyed_by_id_card():
    c = PrivateCustomer("Jan Kowalski", "Warszawa", "ABC123456")
    assert c.customer_id == "ABC123456"
    assert c.kind() == "Private"
    assert c.describe() == (
        "Private Customer [ABC123456]: Jan Kowalski\n"
        "  Address: Warszawa\n"
        "  ID Card: ABC123456"
    )


def test_business_customer_is_keyed_by_nip():
    c = BusinessCustomer("Logistyka", "Gdansk", "5252248481")
    assert c.customer_id == "5252248481"
    assert c.kind() == "Business"
    assert c.describe().splitlines() == [
        "Business Customer [5252248481]: Logistyka",
        "  Address: Gdansk",
        "  NIP: 5252248481",
    ]


@pytest.mark.parametrize("args", [
    ("", "Warszawa", "ABC123456"),
    ("Jan", "", "ABC123456"),
    ("Jan", "Warszawa", ""),
])
def test_empty_fields_are_rejected(args):
    with pytest.raises(ValidationError):
        PrivateCustomer(*args)
    with pytest.raises(ValidationError):
        BusinessCustomer(*args)


def test_customers_are_immutable():
    c = PrivateCustomer("Jan", "Warszawa", "ABC123456")
    with pytest.raises(dataclasses.FrozenInstanceError):
        c.name = "Other"


def test_entity_does_not_check_nip_format():
    # NIP format is enforced by the input layer only.
    assert BusinessCustomer("Firma", "Lodz", "123").customer_id == "123"


@pytest.mark.parametrize("nip, ok", [
    ("5252248481", True),
    ("525224848", False),
    ("52522484811", False),
    ("52522A8481", False),
    ("", False),
    (None, False),
])
def test_valid_nip(nip, ok):
    assert valid_nip(nip) is ok
