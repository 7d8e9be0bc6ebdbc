import threading
from decimal import Decimal

import pytest

from services.booking.applications.get_bookings import BookingQueryService
from services.booking.domain.enum import BookingStatus
from services.flight.domain.enum import SeatStatus
from services.flight.domain.value_object import SeatId, SeatNumber
from services.shared.domain import (
    InvalidBookingException,
    ResourceNotFoundException,
    SeatUnavailableException,
)


def _seat(flight, number: str) -> str:
    return str(SeatId(flight.id, SeatNumber(number)))


class TestCreateBooking:
    """予約作成のテスト"""

    def test_create_reserves_seat_and_persists_booking(
        self, repos, add_flight, add_passenger
    ):
        # Arrange
        flight = add_flight()
        passenger = add_passenger()

        # Act
        booking = repos.create_booking_service().create(
            str(passenger.id), str(flight.id), _seat(flight, "1A")
        )

        # Assert
        assert booking.status == BookingStatus.PENDING
        assert booking.total_price.amount == Decimal("800.00")
        stored_flight = repos.flights.find_by_id(flight.id)
        assert stored_flight.available_seats == 11
        assert stored_flight.seat(SeatNumber("1A")).status == SeatStatus.RESERVED
        assert repos.bookings.find_by_id(booking.id).reference == booking.reference

    def test_unknown_passenger_is_checked_first(self, repos):
        with pytest.raises(ResourceNotFoundException, match="Passenger not found"):
            repos.create_booking_service().create("nobody", "no-flight", "x:1A")

    def test_unknown_flight(self, repos, add_passenger):
        passenger = add_passenger()

        with pytest.raises(ResourceNotFoundException, match="Flight not found"):
            repos.create_booking_service().create(
                str(passenger.id), "no-flight", "no-flight:1A"
            )

    def test_seat_of_another_flight_writes_nothing(
        self, repos, store, add_flight, add_passenger
    ):
        flight = add_flight("AA101")
        other = add_flight("AA102")
        passenger = add_passenger()

        with pytest.raises(InvalidBookingException):
            repos.create_booking_service().create(
                str(passenger.id), str(flight.id), _seat(other, "1A")
            )

        assert store.bookings == {}
        assert repos.flights.find_by_id(other.id).available_seats == 12

    def test_reserved_seat_is_unavailable(self, repos, add_flight, add_passenger):
        flight = add_flight()
        first = add_passenger()
        second = add_passenger("jiro@example.com", "TK7654321")
        service = repos.create_booking_service()
        service.create(str(first.id), str(flight.id), _seat(flight, "2B"))

        with pytest.raises(SeatUnavailableException, match="Seat 2B is not available"):
            service.create(str(second.id), str(flight.id), _seat(flight, "2B"))

    def test_concurrent_requests_for_the_same_seat(
        self, new_repos, store, add_flight, add_passenger
    ):
        """同じ座席を同時に予約しても成功するのは1件だけ"""
        # Arrange
        flight = add_flight()
        passengers = [
            add_passenger(),
            add_passenger("jiro@example.com", "TK7654321"),
        ]
        barrier = threading.Barrier(2, timeout=5)
        results: list = []

        def book(passenger) -> None:
            repos = new_repos()
            repos.flights.after_read = barrier.wait
            try:
                results.append(
                    repos.create_booking_service().create(
                        str(passenger.id), str(flight.id), _seat(flight, "1C")
                    )
                )
            except SeatUnavailableException as e:
                results.append(e)

        # Act
        threads = [threading.Thread(target=book, args=(p,)) for p in passengers]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        # Assert
        assert len(results) == 2
        assert sum(isinstance(r, SeatUnavailableException) for r in results) == 1
        assert len(store.bookings) == 1
        assert store.flights[flight.id].available_seats == 11


class TestConfirmAndCancelBooking:
    """予約の確定・キャンセルのテスト"""

    @pytest.fixture
    def booking(self, repos, add_flight, add_passenger):
        flight = add_flight()
        passenger = add_passenger()
        return repos.create_booking_service().create(
            str(passenger.id), str(flight.id), _seat(flight, "1A")
        )

    def test_confirm_occupies_seat(self, repos, booking):
        confirmed = repos.confirm_booking_service().confirm(str(booking.id))

        assert confirmed.status == BookingStatus.CONFIRMED
        flight = repos.flights.find_by_id(booking.flight_id)
        assert flight.seat(SeatNumber("1A")).status == SeatStatus.OCCUPIED
        assert flight.available_seats == 11
        assert repos.bookings.find_by_id(booking.id).status == BookingStatus.CONFIRMED

    def test_confirm_twice_raises(self, repos, booking):
        service = repos.confirm_booking_service()
        service.confirm(str(booking.id))

        with pytest.raises(InvalidBookingException):
            service.confirm(str(booking.id))

    def test_cancel_releases_seat_for_rebooking(
        self, repos, booking, add_passenger
    ):
        # Act
        cancelled = repos.cancel_booking_service().cancel(str(booking.id))

        # Assert
        assert cancelled.status == BookingStatus.CANCELLED
        flight = repos.flights.find_by_id(booking.flight_id)
        assert flight.available_seats == 12
        assert flight.seat(SeatNumber("1A")).status == SeatStatus.AVAILABLE

        other = add_passenger("jiro@example.com", "TK7654321")
        rebooked = repos.create_booking_service().create(
            str(other.id), str(booking.flight_id), str(booking.seat_id)
        )
        assert rebooked.id != booking.id
        assert repos.flights.find_by_id(booking.flight_id).available_seats == 11

    def test_cancel_confirmed_booking(self, repos, booking):
        repos.confirm_booking_service().confirm(str(booking.id))

        repos.cancel_booking_service().cancel(str(booking.id))

        flight = repos.flights.find_by_id(booking.flight_id)
        assert flight.available_seats == 12
        assert flight.seat(SeatNumber("1A")).status == SeatStatus.AVAILABLE

    def test_cancel_twice_raises(self, repos, booking):
        service = repos.cancel_booking_service()
        service.cancel(str(booking.id))

        with pytest.raises(InvalidBookingException, match="already cancelled"):
            service.cancel(str(booking.id))
        assert repos.flights.find_by_id(booking.flight_id).available_seats == 12

    def test_unknown_booking(self, repos):
        with pytest.raises(ResourceNotFoundException, match="Booking not found"):
            repos.cancel_booking_service().cancel("missing")


class TestBookingQueryService:
    def test_list_by_passenger_and_status(
        self, repos, add_flight, add_passenger
    ):
        flight = add_flight()
        passenger = add_passenger()
        service = repos.create_booking_service()
        first = service.create(str(passenger.id), str(flight.id), _seat(flight, "1A"))
        service.create(str(passenger.id), str(flight.id), _seat(flight, "1B"))
        repos.cancel_booking_service().cancel(str(first.id))
        query = BookingQueryService(repos.bookings, repos.passengers)

        assert len(query.list_by_passenger(str(passenger.id))) == 2
        assert [b.id for b in query.list_all(BookingStatus.CANCELLED)] == [first.id]
        assert query.get_by_reference(str(first.reference).lower()).id == first.id

    def test_list_by_unknown_passenger(self, repos):
        query = BookingQueryService(repos.bookings, repos.passengers)

        with pytest.raises(ResourceNotFoundException):
            query.list_by_passenger("missing")

    @pytest.mark.parametrize("reference", ["BK12", "not-a-reference"])
    def test_malformed_reference_is_not_found(self, repos, reference):
        query = BookingQueryService(repos.bookings, repos.passengers)

        with pytest.raises(ResourceNotFoundException, match="bookingReference"):
            query.get_by_reference(reference)
