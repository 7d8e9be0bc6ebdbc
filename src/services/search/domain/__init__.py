from .enum import FlightSource as FlightSource
from .provider import ExternalFlightProvider as ExternalFlightProvider
from .value_object import ExternalFlight as ExternalFlight
from .value_object import UnifiedFlight as UnifiedFlight
from .value_object import estimate_price as estimate_price
