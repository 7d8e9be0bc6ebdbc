from .entity import Airport as Airport
from .entity import Flight as Flight
from .entity import Seat as Seat
from .enum import FlightStatus as FlightStatus
from .enum import SeatClass as SeatClass
from .enum import SeatStatus as SeatStatus
from .event import FlightStatusChanged as FlightStatusChanged
from .event import SeatStatusChanged as SeatStatusChanged
from .factory import FlightDetails as FlightDetails
from .factory import FlightFactory as FlightFactory
from .repository import AirportRepository as AirportRepository
from .repository import FlightRepository as FlightRepository
from .value_object import AirportCode as AirportCode
from .value_object import FlightId as FlightId
from .value_object import FlightNumber as FlightNumber
from .value_object import Schedule as Schedule
from .value_object import SeatId as SeatId
from .value_object import SeatNumber as SeatNumber
