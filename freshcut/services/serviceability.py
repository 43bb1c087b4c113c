"""Delivery coverage by pincode."""
import os
import re
from typing import FrozenSet

DEFAULT_SERVICEABLE_PINCODES = "110001,560001,400001,800001"

_PINCODE_RE = re.compile(r"[0-9]{6}")


def _load_pincodes() -> FrozenSet[str]:
    raw = os.environ.get("SERVICEABLE_PINCODES", DEFAULT_SERVICEABLE_PINCODES)
    return frozenset(code.strip() for code in raw.split(",") if code.strip())


SERVICEABLE_PINCODES = _load_pincodes()


def is_valid_pincode(pincode: str) -> bool:
    """Indian postal codes are exactly six digits."""
    return bool(pincode) and bool(_PINCODE_RE.fullmatch(pincode))


def is_serviceable(pincode: str) -> bool:
    return is_valid_pincode(pincode) and pincode in SERVICEABLE_PINCODES
