from .flight_events import FlightStatusChanged as FlightStatusChanged
from .flight_events import SeatStatusChanged as SeatStatusChanged
