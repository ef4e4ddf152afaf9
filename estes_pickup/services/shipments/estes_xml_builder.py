"""XML builder for the Estes createPickupRequestWS SOAP envelope."""

import logging
import xml.etree.ElementTree as ET
from typing import Optional, Union

from estes_pickup.core.exceptions import SerializationError
from estes_pickup.schemas.estes_pickup_schema import (
    PickupRequestEnvelope, PickupRequestInput, Shipper, Address, Contact
)

logger = logging.getLogger(__name__)

ADDRESS_TAGS = ("addressLine1", "city", "stateProvince", "postalCode", "countryAbbrev", "addressLine2")


class EstesPickupXMLBuilder:
    """Builds the pickup request envelope in the element order Estes expects"""

    def build_envelope(self, envelope: PickupRequestEnvelope) -> bytes:
        """
        Serialize a pickup request envelope.

        Args:
            envelope: Envelope with namespaces and the pickup request

        Returns:
            UTF-8 encoded XML document, without XML declaration

        Raises:
            SerializationError: If the document cannot be produced as well-formed XML
        """
        try:
            # Models are not validated on assignment, recheck before building
            envelope = PickupRequestEnvelope.model_validate(envelope.model_dump(warnings=False))

            root = ET.Element("soapenv:Envelope")
            root.set("xmlns:soapenv", envelope.soapenv_namespace)
            root.set("xmlns:est", envelope.est_namespace)

            body = ET.SubElement(root, "soapenv:Body")
            operation = ET.SubElement(body, "est:createPickupRequestWS")
            self._build_pickup_request_input(operation, envelope.pickup_request_input)

            xml_bytes = ET.tostring(root, encoding="utf-8", short_empty_elements=False)
        except (TypeError, ValueError, AttributeError) as e:
            raise SerializationError(f"Could not build Estes pickup XML: {e}") from e

        # Parsers normalize a raw CR to LF, only text nodes can hold one
        xml_bytes = xml_bytes.replace(b"\r", b"&#13;")

        # ElementTree escapes markup but lets invalid characters through
        try:
            ET.fromstring(xml_bytes)
        except ET.ParseError as e:
            raise SerializationError(
                f"Estes pickup XML is not well-formed: {e}",
                details={"position": list(e.position)}
            ) from e

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Estes pickup XML:\n%s", xml_bytes.decode("utf-8"))
        return xml_bytes

    def _build_pickup_request_input(self, parent: ET.Element, pickup: PickupRequestInput) -> None:
        """Build pickupRequestInput: shipper, window, quantities, tracking fields."""
        request_input = ET.SubElement(parent, "pickupRequestInput")

        self._build_shipper(request_input, pickup.shipper)

        self._set_text(request_input, "pickupDate", pickup.pickup_date)
        self._set_text(request_input, "pickupStartTime", pickup.pickup_start_time)
        self._set_text(request_input, "pickupEndTime", pickup.pickup_end_time)

        self._set_text(request_input, "totalPieces", pickup.total_pieces)
        self._set_text(request_input, "totalWeight", format_weight(pickup.total_weight))
        self._set_text(request_input, "totalHandlingUnits", pickup.total_handling_units)

        self._set_text(request_input, "requestNumber", pickup.request_number)
        self._set_text(request_input, "whoRequested", pickup.who_requested)

    def _build_shipper(self, parent: ET.Element, shipper: Shipper) -> None:
        shipper_elem = ET.SubElement(parent, "shipper")
        self._set_text(shipper_elem, "shipperName", shipper.shipper_name)

        address_wrapper = ET.SubElement(shipper_elem, "shipperAddress")
        self._build_address(address_wrapper, shipper.shipper_address)

        contacts_wrapper = ET.SubElement(shipper_elem, "shipperContacts")
        self._build_contact(contacts_wrapper, shipper.shipper_contact or Contact())

    def _build_address(self, parent: ET.Element, address: Optional[Address]) -> None:
        address_info = ET.SubElement(parent, "addressInfo")

        if address is None:
            # Estes still expects the block, with empty elements
            for tag in ADDRESS_TAGS:
                self._set_text(address_info, tag, None)
            return

        values = (
            address.address_line1,
            address.city,
            address.state_province,
            address.postal_code,
            address.country,
            address.address_line2,
        )
        for tag, value in zip(ADDRESS_TAGS, values):
            self._set_text(address_info, tag, value)

    def _build_contact(self, parent: ET.Element, contact: Contact) -> None:
        contact_elem = ET.SubElement(parent, "shipperContact")

        name_elem = ET.SubElement(contact_elem, "name")
        self._set_text(name_elem, "firstName", contact.name.first)
        self._set_text(name_elem, "middleName", contact.name.middle)
        self._set_text(name_elem, "lastName", contact.name.last)

        self._set_text(contact_elem, "email", contact.email)

        phone_elem = ET.SubElement(contact_elem, "phone")
        self._set_text(phone_elem, "areaCode", contact.phone.area_code)
        self._set_text(phone_elem, "number", contact.phone.number)

    def _set_text(self, parent: ET.Element, tag: str, value: Optional[Union[str, int]]) -> None:
        """Append a child element; None becomes an empty element."""
        element = ET.SubElement(parent, tag)
        element.text = "" if value is None else str(value)


def format_weight(weight: float) -> str:
    """
    Shortest decimal form of a weight, without '.0' for whole numbers.

    Whole numbers are always written in full (1000000), never in exponent form.
    """
    if weight.is_integer():
        return str(int(weight))
    return repr(weight)
