from .external_flight import ExternalFlight as ExternalFlight
from .external_flight import estimate_price as estimate_price
from .unified_flight import UnifiedFlight as UnifiedFlight
