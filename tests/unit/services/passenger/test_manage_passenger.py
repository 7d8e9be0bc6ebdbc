from datetime import date

import pytest

from services.flight.domain.value_object import SeatId, SeatNumber
from services.passenger.applications.delete_passenger import DeletePassengerService
from services.passenger.applications.register_passenger import (
    RegisterPassengerService,
)
from services.passenger.applications.update_passenger import UpdatePassengerService
from services.passenger.domain.factory import PassengerDetails, PassengerFactory
from services.passenger.domain.value_object import Email, PassportNumber
from services.shared.domain import (
    DuplicateResourceException,
    InvalidBookingException,
    OptimisticLockException,
    ResourceNotFoundException,
)


@pytest.fixture
def factory():
    return PassengerFactory(today=lambda: date(2026, 5, 1))


@pytest.fixture
def details():
    def _factory(**overrides) -> PassengerDetails:
        base: PassengerDetails = {
            "first_name": "Taro",
            "last_name": "Yamada",
            "email": "taro@example.com",
            "phone_number": "0312345678",
            "date_of_birth": date(1990, 1, 1),
            "passport_number": "TK1234567",
            "nationality": "Japan",
        }
        base.update(overrides)
        return base

    return _factory


@pytest.fixture
def update_service(repos, factory):
    return UpdatePassengerService(
        uow=repos.uow, repository=repos.passengers, factory=factory
    )


@pytest.fixture
def delete_service(repos):
    return DeletePassengerService(
        uow=repos.uow,
        passenger_repository=repos.passengers,
        booking_repository=repos.bookings,
    )


class TestUpdatePassengerService:
    """乗客更新のテスト"""

    def test_update_keeps_id_and_moves_unique_keys(
        self, update_service, repos, store, add_passenger, details
    ):
        # Arrange
        passenger = add_passenger()

        # Act
        updated = update_service.update(
            str(passenger.id),
            details(email="Jiro@Example.com", passport_number="tk7654321"),
        )

        # Assert
        assert updated.id == passenger.id
        assert str(updated.email) == "jiro@example.com"
        assert repos.passengers.find_by_email(Email("jiro@example.com")).id == (
            passenger.id
        )
        assert "PASSENGER_EMAIL#taro@example.com" not in store.unique_keys
        assert "PASSENGER_PASSPORT#TK1234567" not in store.unique_keys
        assert "PASSENGER_PASSPORT#TK7654321" in store.unique_keys

    def test_released_email_can_be_registered_again(
        self, update_service, repos, add_passenger, details, factory
    ):
        passenger = add_passenger()
        update_service.update(str(passenger.id), details(email="jiro@example.com"))
        register = RegisterPassengerService(
            uow=repos.uow, repository=repos.passengers, factory=factory
        )

        other = register.register(details(passport_number="ZZ0000001"))

        assert str(other.email) == "taro@example.com"

    def test_unchanged_unique_keys_are_kept(
        self, update_service, repos, store, add_passenger, details
    ):
        passenger = add_passenger()

        update_service.update(str(passenger.id), details(first_name="Saburo"))

        stored = repos.passengers.find_by_id(passenger.id)
        assert stored.first_name == "Saburo"
        assert "PASSENGER_EMAIL#taro@example.com" in store.unique_keys
        assert repos.passengers.find_by_passport_number(
            PassportNumber("TK1234567")
        ).id == passenger.id

    def test_email_of_another_passenger_is_rejected(
        self, update_service, add_passenger, details
    ):
        passenger = add_passenger()
        add_passenger("jiro@example.com", "TK7654321")

        with pytest.raises(DuplicateResourceException, match="email"):
            update_service.update(str(passenger.id), details(email="jiro@example.com"))

    def test_passport_of_another_passenger_is_rejected(
        self, update_service, add_passenger, details
    ):
        passenger = add_passenger()
        add_passenger("jiro@example.com", "TK7654321")

        with pytest.raises(DuplicateResourceException, match="passportNumber"):
            update_service.update(
                str(passenger.id), details(passport_number="TK7654321")
            )

    def test_concurrent_update_is_rejected_at_commit(
        self, update_service, repos, new_repos, add_passenger, details, factory
    ):
        """読み込み後に他の更新が入った場合は競合"""
        passenger = add_passenger()
        current = repos.passengers.find_by_id(passenger.id)
        other = new_repos()
        update_service.update(str(passenger.id), details(email="jiro@example.com"))

        other.passengers.update(
            factory.rebuild(passenger.id, details(email="saburo@example.com")),
            previous=current,
        )

        with pytest.raises(OptimisticLockException):
            other.uow.commit()
        stored = repos.passengers.find_by_id(passenger.id)
        assert str(stored.email) == "jiro@example.com"

    def test_unknown_passenger(self, update_service, details):
        with pytest.raises(ResourceNotFoundException, match="Passenger not found"):
            update_service.update("missing", details())

    def test_date_of_birth_must_be_in_the_past(
        self, update_service, add_passenger, details
    ):
        passenger = add_passenger()

        with pytest.raises(ValueError, match="past"):
            update_service.update(
                str(passenger.id), details(date_of_birth=date(2030, 1, 1))
            )


class TestDeletePassengerService:
    """乗客削除のテスト"""

    def test_delete_releases_unique_keys(
        self, delete_service, repos, store, add_passenger
    ):
        passenger = add_passenger()

        delete_service.delete(str(passenger.id))

        assert repos.passengers.find_by_id(passenger.id) is None
        assert "PASSENGER_EMAIL#taro@example.com" not in store.unique_keys
        assert "PASSENGER_PASSPORT#TK1234567" not in store.unique_keys

    def test_passenger_with_active_booking_is_kept(
        self, delete_service, repos, add_passenger, add_flight
    ):
        passenger = add_passenger()
        flight = add_flight()
        repos.create_booking_service().create(
            str(passenger.id), str(flight.id), str(SeatId(flight.id, SeatNumber("1A")))
        )

        with pytest.raises(
            InvalidBookingException,
            match="Cannot delete passenger with active bookings",
        ):
            delete_service.delete(str(passenger.id))
        assert repos.passengers.find_by_id(passenger.id) is not None

    def test_passenger_with_cancelled_booking_can_be_deleted(
        self, delete_service, repos, add_passenger, add_flight
    ):
        passenger = add_passenger()
        flight = add_flight()
        booking = repos.create_booking_service().create(
            str(passenger.id), str(flight.id), str(SeatId(flight.id, SeatNumber("1A")))
        )
        repos.cancel_booking_service().cancel(str(booking.id))

        delete_service.delete(str(passenger.id))

        assert repos.passengers.find_by_id(passenger.id) is None

    def test_unknown_passenger(self, delete_service):
        with pytest.raises(ResourceNotFoundException, match="Passenger not found"):
            delete_service.delete("missing")
