from .email import Email as Email
from .passenger_id import PassengerId as PassengerId
from .passport_number import PassportNumber as PassportNumber
from .phone_number import PhoneNumber as PhoneNumber
