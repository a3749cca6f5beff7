"""click parameter types for the shell prompts; a failed conversion re-prompts."""

import click

from vehicle_rental.models.rental import validate_date
from vehicle_rental.models.vehicle import FuelType
from vehicle_rental.utils.constants import DATE_FMT, FIELD_SEP
from vehicle_rental.utils.validators import norm_text, safe_text, valid_nip


class TextType(click.ParamType):
    """Non-empty free text that can be written to the save file."""

    name = "text"

    def convert(self, value, param, ctx):
        s = norm_text(value)
        if not s:
            self.fail("Input cannot be empty. Please try again.", param, ctx)
        if not safe_text(s):
            self.fail(f"Input cannot contain '{FIELD_SEP}'.", param, ctx)
        return s


class DateType(click.ParamType):
    name = "date"

    def convert(self, value, param, ctx):
        s = norm_text(value)
        if not validate_date(s):
            self.fail(f"Invalid date format or value. Please use {DATE_FMT}.", param, ctx)
        return s


class NipType(click.ParamType):
    name = "nip"

    def convert(self, value, param, ctx):
        s = norm_text(value)
        if not valid_nip(s):
            self.fail("Invalid NIP. It must consist of exactly 10 digits.", param, ctx)
        return s


class FuelTypeParam(click.ParamType):
    """'d' for Diesel, 'p' for Petrol (Gasoline)."""

    name = "fuel"
    choices = {"d": FuelType.DIESEL, "p": FuelType.GASOLINE}

    def convert(self, value, param, ctx):
        if isinstance(value, FuelType):
            return value
        fuel = self.choices.get(norm_text(value).lower())
        if fuel is None:
            self.fail("Invalid fuel type.", param, ctx)
        return fuel


TEXT = TextType()
DATE = DateType()
NIP = NipType()
FUEL = FuelTypeParam()
