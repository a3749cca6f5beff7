from abc import ABC, abstractmethod
from dataclasses import dataclass

from vehicle_rental.exceptions import ValidationError
from vehicle_rental.utils.constants import CustomerKind, CustomerTag


@dataclass(frozen=True)
class CustomerBase(ABC):
    """
    Base customer model. The unique ``customer_id`` comes from the identity
    document of each variant (ID card for private renters, NIP for companies).
    """
    name: str
    address: str

    type_tag = ""

    def __post_init__(self) -> None:
        if not self.customer_id:
            raise ValidationError("ID cannot be empty.")
        if not self.name:
            raise ValidationError("Name cannot be empty.")
        if not self.address:
            raise ValidationError("Address cannot be empty.")

    @property
    @abstractmethod
    def customer_id(self) -> str:
        ...

    @abstractmethod
    def kind(self) -> str:
        ...

    @abstractmethod
    def describe(self) -> str:
        ...

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True)
class PrivateCustomer(CustomerBase):
    id_card: str

    type_tag = CustomerTag.PRIVATE

    @property
    def customer_id(self) -> str:
        return self.id_card

    def kind(self) -> str:
        return CustomerKind.PRIVATE

    def describe(self) -> str:
        return (
            f"Private Customer [{self.customer_id}]: {self.name}\n"
            f"  Address: {self.address}\n"
            f"  ID Card: {self.id_card}"
        )


@dataclass(frozen=True)
class BusinessCustomer(CustomerBase):
    """Company renter; the NIP must be ten digits, which the input layer enforces."""
    nip: str

    type_tag = CustomerTag.BUSINESS

    @property
    def customer_id(self) -> str:
        return self.nip

    def kind(self) -> str:
        return CustomerKind.BUSINESS

    def describe(self) -> str:
        return (
            f"Business Customer [{self.customer_id}]: {self.name}\n"
            f"  Address: {self.address}\n"
            f"  NIP: {self.nip}"
        )
