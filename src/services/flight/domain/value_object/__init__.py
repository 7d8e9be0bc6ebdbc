from .airport_code import AirportCode as AirportCode
from .flight_id import FlightId as FlightId
from .flight_number import FlightNumber as FlightNumber
from .schedule import Schedule as Schedule
from .seat_id import SeatId as SeatId
from .seat_number import SeatNumber as SeatNumber
