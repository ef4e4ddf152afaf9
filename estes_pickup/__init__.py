"""
Client for the Estes LTL pickup request API
"""

from estes_pickup.core.exceptions import (
    PickupException,
    SerializationError,
    TransportError,
    PickupTimeoutError,
    CarrierRejectedError,
    MalformedResponseError,
    ConfigurationError,
)
from estes_pickup.core.settings import EstesIntegrationSettings, get_estes_settings
from estes_pickup.schemas.estes_pickup_schema import (
    Address,
    Contact,
    EstesCredentials,
    Name,
    Phone,
    PickupConfirmation,
    PickupRejection,
    PickupRequestInput,
    Shipper,
)
from estes_pickup.services.shipments.estes_client import EstesClient, format_pickup_date, format_pickup_time
