import httpx
import base64
import asyncio
from datetime import date, time, timedelta
from typing import Dict, Optional
import logging

from estes_pickup.core.settings import EstesIntegrationSettings, get_estes_settings
from estes_pickup.core.exceptions import PickupTimeoutError, TransportError
from estes_pickup.schemas.estes_pickup_schema import (
    EstesCredentials, PickupConfirmation, PickupRequestEnvelope, PickupRequestInput
)
from estes_pickup.services.shipments.estes_xml_builder import EstesPickupXMLBuilder
from estes_pickup.services.shipments.estes_response_parser import EstesResponseParser

logger = logging.getLogger(__name__)


class EstesClient:
    """Estes pickup request SOAP client with Basic Auth"""

    def __init__(
        self,
        settings: Optional[EstesIntegrationSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.settings = settings or get_estes_settings()
        self.timeout = self.settings.estes_timeout
        self.xml_builder = EstesPickupXMLBuilder()
        self.parser = EstesResponseParser()
        self._transport = transport

    async def request_pickup(
        self,
        pickup: PickupRequestInput,
        credentials: EstesCredentials
    ) -> PickupConfirmation:
        """
        Schedule a pickup with Estes

        Args:
            pickup: Shipment to pick up
            credentials: Estes account credentials

        Returns:
            PickupConfirmation with the Estes request number

        Raises:
            SerializationError: Request could not be encoded
            TransportError: Connection failure
            PickupTimeoutError: No complete reply within the timeout
            CarrierRejectedError: Estes refused the pickup
            MalformedResponseError: Reply could not be understood
        """
        envelope = PickupRequestEnvelope(pickup_request_input=pickup)
        xml_bytes = self.xml_builder.build_envelope(envelope)

        body = await self._post_envelope(
            xml_bytes,
            self.settings.endpoint_url,
            credentials,
            self.timeout
        )

        confirmation = self.parser.classify(body)
        logger.info(f"Estes pickup scheduled, request number {confirmation.request_number}")
        return confirmation

    async def _post_envelope(
        self,
        xml_bytes: bytes,
        url: str,
        credentials: EstesCredentials,
        timeout: timedelta
    ) -> bytes:
        """
        POST the envelope once and return the raw reply body.

        The status code is not checked, Estes reports failures in the body.

        Raises:
            PickupTimeoutError: The full exchange took longer than timeout
            TransportError: The request could not be built, sent or read
        """
        timeout_seconds = timeout.total_seconds()
        headers = self._get_headers(credentials)

        logger.info(f"Estes Pickup Request URL: {url}")

        try:
            async with httpx.AsyncClient(timeout=timeout_seconds, transport=self._transport) as client:
                # httpx timeouts apply per phase, wait_for bounds the whole exchange
                response = await asyncio.wait_for(
                    client.post(url, content=xml_bytes, headers=headers),
                    timeout=timeout_seconds
                )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            logger.error(f"Estes pickup request timed out after {timeout_seconds}s")
            raise PickupTimeoutError(
                f"No reply from Estes within {timeout_seconds}s",
                url=url,
                timeout_seconds=timeout_seconds
            ) from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.error(f"Estes pickup request error: {e}")
            raise TransportError(f"Estes pickup request failed: {e}", url=url) from e

        logger.info(f"Estes Pickup Response Status: {response.status_code}")
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Estes Pickup Response Body: %s", response.text)
        return response.content

    def _get_headers(self, credentials: EstesCredentials) -> Dict[str, str]:
        """
        Generate HTTP headers for Estes API requests

        Args:
            credentials: Estes username and password

        Returns:
            Headers dict
        """
        auth_string = f"{credentials.username}:{credentials.password.get_secret_value()}"
        auth_b64 = base64.b64encode(auth_string.encode("utf-8")).decode("ascii")

        return {
            "Authorization": f"Basic {auth_b64}",
            "Content-Type": "text/xml"
        }


# Utility functions for external use
def format_pickup_date(pickup_date: date) -> str:
    """Format a date as Estes expects it: yyyy-mm-dd"""
    return pickup_date.strftime("%Y-%m-%d")


def format_pickup_time(pickup_time: time) -> str:
    """Format a time as Estes expects it: hhmm, 24 hour clock"""
    return pickup_time.strftime("%H%M")
