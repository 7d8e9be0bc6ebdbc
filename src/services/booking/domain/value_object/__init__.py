from .booking_id import BookingId as BookingId
from .booking_reference import BookingReference as BookingReference
