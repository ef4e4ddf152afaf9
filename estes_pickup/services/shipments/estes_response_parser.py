"""Parser for Estes pickup request replies."""

import logging
import xml.etree.ElementTree as ET
from typing import Optional

from estes_pickup.core.exceptions import CarrierRejectedError, MalformedResponseError
from estes_pickup.schemas.estes_pickup_schema import PickupConfirmation, PickupRejection

logger = logging.getLogger(__name__)


def _local_name(tag: str) -> str:
    """Strip the '{namespace}' part of a tag."""
    return tag.rsplit("}", 1)[-1]


def _find_child(parent: ET.Element, name: str) -> Optional[ET.Element]:
    """First direct child with the given local name, whatever its namespace."""
    for child in parent:
        if _local_name(child.tag) == name:
            return child
    return None


def _child_text(parent: ET.Element, name: str) -> str:
    child = _find_child(parent, name)
    if child is None or child.text is None:
        return ""
    return child.text.strip()


class EstesResponseParser:
    """
    Classifies an Estes reply body.

    Estes does not signal rejected pickups through HTTP status codes, so the
    body is tried as a confirmation first, then as an error.

    Confirmation shape (the envelope prefix may vary or be absent):
    <Envelope>
      <Body>
        <createPickupRequestWSResponse>
          <requestNumber>...</requestNumber>
        </createPickupRequestWSResponse>
      </Body>
    </Envelope>

    Error shape:
    <error>
      <code>...</code>
      <description>...</description>
      <badData>...</badData>
    </error>
    """

    @staticmethod
    def _parse_root(body: bytes) -> Optional[ET.Element]:
        try:
            return ET.fromstring(body)
        except ET.ParseError as e:
            logger.debug("Estes response is not well-formed XML: %s", e)
            return None

    def parse_success(self, body: bytes) -> Optional[PickupConfirmation]:
        """
        Read the body as a pickup confirmation.

        Returns:
            PickupConfirmation (request number possibly empty), or None if the
            body does not have the confirmation shape
        """
        root = self._parse_root(body)
        if root is None or _local_name(root.tag) != "Envelope":
            return None

        request_number = ""
        soap_body = _find_child(root, "Body")
        if soap_body is not None:
            response = _find_child(soap_body, "createPickupRequestWSResponse")
            if response is not None:
                request_number = _child_text(response, "requestNumber")

        return PickupConfirmation(request_number=request_number)

    def parse_error(self, body: bytes) -> Optional[PickupRejection]:
        """
        Read the body as an Estes error.

        Returns:
            PickupRejection, or None if the body does not have the error shape
        """
        root = self._parse_root(body)
        if root is None or _local_name(root.tag) != "error":
            return None

        return PickupRejection(
            code=_child_text(root, "code"),
            description=_child_text(root, "description"),
            bad_data=_child_text(root, "badData"),
        )

    def classify(self, body: bytes) -> PickupConfirmation:
        """
        Decide whether the reply confirms the pickup.

        Args:
            body: Raw reply body

        Returns:
            PickupConfirmation with a non-empty request number

        Raises:
            CarrierRejectedError: Body is an Estes error
            MalformedResponseError: Body matches neither shape
        """
        confirmation = self.parse_success(body)
        if confirmation is not None and confirmation.request_number:
            return confirmation

        rejection = self.parse_error(body)
        if rejection is not None:
            logger.warning(
                f"Estes pickup request rejected: code={rejection.code} "
                f"description={rejection.description} bad_data={rejection.bad_data}"
            )
            raise CarrierRejectedError(rejection)

        reason = "empty request number" if confirmation is not None else "unexpected document"
        logger.error(f"Estes pickup request failed, {reason}")
        logger.debug("Estes raw response: %r", body)
        raise MalformedResponseError(body, reason)
