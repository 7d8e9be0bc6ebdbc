from .entity import Passenger as Passenger
from .factory import PassengerDetails as PassengerDetails
from .factory import PassengerFactory as PassengerFactory
from .repository import PassengerRepository as PassengerRepository
from .value_object import Email as Email
from .value_object import PassengerId as PassengerId
from .value_object import PassportNumber as PassportNumber
from .value_object import PhoneNumber as PhoneNumber
