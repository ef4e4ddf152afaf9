from fastapi import APIRouter, Depends
import logging

from estes_pickup.core.settings import get_estes_settings
from estes_pickup.schemas.estes_pickup_schema import PickupConfirmation, PickupRequestInput
from estes_pickup.services.interfaces.estes_pickup_service_interface import IEstesPickupService
from estes_pickup.services.routers.estes_pickup_service import EstesPickupService
from estes_pickup.services.shipments.estes_client import EstesClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/pickups/estes", tags=["Estes Pickups"])


def get_estes_pickup_service() -> IEstesPickupService:
    """Dependency to get Estes pickup service"""
    settings = get_estes_settings()
    return EstesPickupService(EstesClient(settings), settings)


@router.post("", response_model=PickupConfirmation)
async def request_pickup(
    pickup: PickupRequestInput,
    estes_service: IEstesPickupService = Depends(get_estes_pickup_service)
):
    """
    Schedule an LTL pickup with Estes

    Args:
        pickup: Shipper, pickup window and shipment quantities
        estes_service: Estes pickup service dependency

    Returns:
        Estes request number of the scheduled pickup
    """
    return await estes_service.request_pickup(pickup)
