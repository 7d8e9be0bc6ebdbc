from .airport_repository import AirportRepository as AirportRepository
from .flight_repository import FlightRepository as FlightRepository
