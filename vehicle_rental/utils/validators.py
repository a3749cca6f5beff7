"""Input-layer validators shared by the shell and the dev scripts."""

from typing import Optional

from vehicle_rental.utils.constants import FIELD_SEP, NIP_LENGTH


def valid_nip(s: Optional[str]) -> bool:
    """A NIP (tax id) is exactly ten ASCII digits."""
    if not s:
        return False
    return len(s) == NIP_LENGTH and all("0" <= ch <= "9" for ch in s)


def safe_text(s: Optional[str]) -> bool:
    """Non-empty and free of the save-file field separator."""
    return bool(s) and FIELD_SEP not in s and "\n" not in s


def norm_text(value: Optional[str]) -> str:
    """Strip surrounding whitespace; return '' for None."""
    return (value or "").strip()
