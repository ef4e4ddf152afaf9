"""
Pydantic models for the Estes pickup request API
"""

from typing import Optional
from pydantic import BaseModel, Field, SecretStr


SOAPENV_NAMESPACE = "http://schemas.xmlsoap.org/soap/envelope/"
EST_NAMESPACE = "http://estespickup.base.ws.provider.soapws.pickupRequest"


class Name(BaseModel):
    """Contact name"""
    first: str = ""
    middle: str = ""
    last: str = ""


class Phone(BaseModel):
    """Contact phone number"""
    area_code: str = Field("", description="First 3 digits")
    number: str = Field("", description="Last 7 digits, numbers only")


class Contact(BaseModel):
    """Shipper contact"""
    name: Name = Field(default_factory=Name)
    email: str = ""
    phone: Phone = Field(default_factory=Phone)


class Address(BaseModel):
    """Shipper address"""
    address_line1: str
    city: str
    state_province: str
    postal_code: str
    country: str = Field(..., description="Country abbreviation, e.g. US")
    address_line2: str = ""


class Shipper(BaseModel):
    """Where the freight is picked up"""
    shipper_name: str
    shipper_address: Optional[Address] = None
    shipper_contact: Optional[Contact] = None


class PickupRequestInput(BaseModel):
    """Shipment to schedule for pickup"""
    shipper: Shipper
    pickup_date: str = Field(..., description="yyyy-mm-dd")
    pickup_start_time: str = Field(..., description="hhmm")
    pickup_end_time: str = Field(..., description="hhmm")
    total_pieces: int = Field(..., ge=0)
    total_weight: float
    total_handling_units: int = Field(..., ge=0, description="Skids")

    request_number: str = ""
    who_requested: str = ""


class PickupRequestEnvelope(BaseModel):
    """SOAP envelope wrapping one pickup request"""
    soapenv_namespace: str = SOAPENV_NAMESPACE
    est_namespace: str = EST_NAMESPACE
    pickup_request_input: PickupRequestInput


class PickupConfirmation(BaseModel):
    """Successful pickup request, confirmed by Estes"""
    request_number: str


class PickupRejection(BaseModel):
    """Error returned by Estes when a pickup cannot be scheduled"""
    code: str = ""
    description: str = ""
    bad_data: str = ""


class EstesCredentials(BaseModel):
    """Basic auth credentials of the Estes account"""
    username: str
    password: SecretStr
