import logging

from estes_pickup.core.settings import EstesIntegrationSettings
from estes_pickup.schemas.estes_pickup_schema import PickupConfirmation, PickupRequestInput
from estes_pickup.services.interfaces.estes_pickup_service_interface import IEstesPickupService
from estes_pickup.services.shipments.estes_client import EstesClient

logger = logging.getLogger(__name__)


class EstesPickupService(IEstesPickupService):
    """Estes pickup service, schedules pickups with the configured account"""

    def __init__(self, estes_client: EstesClient, settings: EstesIntegrationSettings):
        self.estes_client = estes_client
        self.settings = settings

    async def request_pickup(self, pickup: PickupRequestInput) -> PickupConfirmation:
        """
        Schedule an Estes pickup

        Args:
            pickup: Shipment to pick up

        Returns:
            PickupConfirmation with the Estes request number

        Raises:
            ConfigurationError: Estes credentials are not configured
        """
        credentials = self.settings.credentials()

        logger.info(
            f"Requesting Estes pickup for {pickup.shipper.shipper_name} on {pickup.pickup_date} "
            f"({pickup.pickup_start_time}-{pickup.pickup_end_time})"
        )
        return await self.estes_client.request_pickup(pickup, credentials)
