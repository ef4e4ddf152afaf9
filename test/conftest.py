"""
Shared fixtures for the Estes pickup tests
"""

import pytest

from estes_pickup.core.settings import EstesIntegrationSettings
from estes_pickup.schemas.estes_pickup_schema import (
    Address, Contact, EstesCredentials, Name, Phone, PickupRequestInput, Shipper
)


CONFIRMATION_BODY = b"""<?xml version="1.0" encoding="UTF-8"?>
<soapenv:Envelope xmlns:soapenv="http://schemas.xmlsoap.org/soap/envelope/">
  <soapenv:Body>
    <ns2:createPickupRequestWSResponse xmlns:ns2="http://estespickup.base.ws.provider.soapws.pickupRequest">
      <requestNumber>PU123456</requestNumber>
    </ns2:createPickupRequestWSResponse>
  </soapenv:Body>
</soapenv:Envelope>"""

ERROR_BODY = b"""<?xml version="1.0" encoding="UTF-8"?>
<error>
  <code>PR-104</code>
  <description>Pickup date is in the past</description>
  <badData>2020-01-01</badData>
</error>"""


@pytest.fixture
def pickup() -> PickupRequestInput:
    """Fully populated pickup request"""
    return PickupRequestInput(
        shipper=Shipper(
            shipper_name="Acme Widgets",
            shipper_address=Address(
                address_line1="123 Main St",
                city="Richmond",
                state_province="VA",
                postal_code="23230",
                country="US",
                address_line2="Dock 4"
            ),
            shipper_contact=Contact(
                name=Name(first="Jane", middle="Q", last="Doe"),
                email="jane@acme.test",
                phone=Phone(area_code="804", number="5551234")
            )
        ),
        pickup_date="2026-10-20",
        pickup_start_time="0900",
        pickup_end_time="1700",
        total_pieces=12,
        total_weight=1500.0,
        total_handling_units=3,
        who_requested="Jane Doe"
    )


@pytest.fixture
def minimal_pickup() -> PickupRequestInput:
    """Pickup request with only the required fields"""
    return PickupRequestInput(
        shipper=Shipper(shipper_name="Acme Widgets"),
        pickup_date="2026-10-20",
        pickup_start_time="0900",
        pickup_end_time="1700",
        total_pieces=1,
        total_weight=12.5,
        total_handling_units=1
    )


@pytest.fixture
def credentials() -> EstesCredentials:
    return EstesCredentials(username="acme", password="s3cret")


@pytest.fixture
def sandbox_settings() -> EstesIntegrationSettings:
    """Settings isolated from the environment and any .env file"""
    return EstesIntegrationSettings(
        _env_file=None,
        estes_use_production=False,
        estes_base_url_prod="https://api.estes.test/pickup",
        estes_base_url_sandbox="https://apitest.estes.test/pickup",
        estes_username="acme",
        estes_password="s3cret"
    )


@pytest.fixture
def confirmation_body() -> bytes:
    return CONFIRMATION_BODY


@pytest.fixture
def error_body() -> bytes:
    return ERROR_BODY
