"""Tests for pincode validation and serviceability"""
import pytest

from freshcut.services.serviceability import SERVICEABLE_PINCODES, is_serviceable, is_valid_pincode


@pytest.mark.parametrize("pincode", ["110001", "560001", "999999"])
def test_valid_pincode(pincode):
    assert is_valid_pincode(pincode) is True


@pytest.mark.parametrize("pincode", [
    "",
    "11000",
    "1100011",
    "11000a",
    " 110001",
    "110001\n",
    "\u0661\u0661\u0660\u0660\u0660\u0661",  # Arabic-Indic digits
])
def test_invalid_pincode(pincode):
    assert is_valid_pincode(pincode) is False


def test_default_coverage():
    assert SERVICEABLE_PINCODES == {"110001", "560001", "400001", "800001"}


def test_is_serviceable():
    assert is_serviceable("400001") is True
    assert is_serviceable("999999") is False
    assert is_serviceable("40000") is False
