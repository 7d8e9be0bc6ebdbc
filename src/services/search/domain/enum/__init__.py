from .flight_source import FlightSource as FlightSource
