from abc import ABC, abstractmethod

from estes_pickup.schemas.estes_pickup_schema import PickupConfirmation, PickupRequestInput


class IEstesPickupService(ABC):
    """Interface for Estes pickup service operations"""

    @abstractmethod
    async def request_pickup(self, pickup: PickupRequestInput) -> PickupConfirmation:
        """Schedule a pickup with the configured Estes account"""
        pass
