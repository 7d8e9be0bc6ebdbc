from .external_flight_provider import ExternalFlightProvider as ExternalFlightProvider
