import copy
import threading
from collections.abc import Callable
from datetime import date
from decimal import Decimal

import pytest

from services.booking.applications.cancel_booking import CancelBookingService
from services.booking.applications.confirm_booking import ConfirmBookingService
from services.booking.applications.create_booking import CreateBookingService
from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.factory import BookingFactory
from services.booking.domain.repository import BookingRepository
from services.flight.applications.seat_allocation import SeatAllocationService
from services.flight.domain.entity import Airport, Flight
from services.flight.domain.enum import FlightStatus, SeatStatus
from services.flight.domain.event import FlightStatusChanged, SeatStatusChanged
from services.flight.domain.factory import FlightDetails, FlightFactory
from services.flight.domain.repository import AirportRepository, FlightRepository
from services.flight.domain.value_object import AirportCode
from services.passenger.domain.entity import Passenger
from services.passenger.domain.factory import PassengerDetails, PassengerFactory
from services.passenger.domain.repository import PassengerRepository
from services.payment.domain.entity import Payment
from services.payment.domain.repository import PaymentRepository
from services.shared.domain import (
    DomainException,
    DuplicateResourceException,
    InvalidBookingException,
    OptimisticLockException,
    ResourceNotFoundException,
    UnitOfWork,
)


class InMemoryStore:
    """テスト用の永続化領域（DynamoDB テーブルの代わり）"""

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.airports: dict = {}
        self.flights: dict = {}
        self.passengers: dict = {}
        self.bookings: dict = {}
        self.payments: dict = {}
        self.unique_keys: set[str] = set()


class InMemoryUnitOfWork(UnitOfWork):
    """条件チェック（check）と反映（apply）の組をステージし、commit でまとめて適用する

    全ての check が通った場合のみ apply する（all-or-nothing）。
    """

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store
        self._staged: list[tuple[Callable[[], None], Callable[[], None]]] = []
        self.commit_count = 0

    @property
    def store(self) -> InMemoryStore:
        return self._store

    def stage(self, check: Callable[[], None], apply: Callable[[], None]) -> None:
        self._staged.append((check, apply))

    def commit(self) -> None:
        staged = self._staged.copy()
        self._staged.clear()
        with self._store.lock:
            for check, _ in staged:
                check()
            for _, apply in staged:
                apply()
        self.commit_count += 1

    def rollback(self) -> None:
        self._staged.clear()


def _unique(store: InMemoryStore, key: str, on_conflict: DomainException):
    def check() -> None:
        if key in store.unique_keys:
            raise on_conflict

    def apply() -> None:
        store.unique_keys.add(key)

    return check, apply


class InMemoryAirportRepository(AirportRepository):
    def __init__(self, uow: InMemoryUnitOfWork) -> None:
        self._uow = uow
        self._store = uow.store

    def save(self, airport: Airport) -> None:
        snapshot = copy.deepcopy(airport)
        self._uow.stage(
            *_unique(
                self._store,
                f"AIRPORT#{airport.code}",
                DuplicateResourceException.of("Airport", "code", airport.code),
            )
        )
        self._uow.stage(
            lambda: None,
            lambda: self._store.airports.__setitem__(airport.code, snapshot),
        )

    def update(self, airport: Airport) -> None:
        snapshot = copy.deepcopy(airport)

        def check() -> None:
            if airport.code not in self._store.airports:
                raise ResourceNotFoundException.of("Airport", airport.code, "code")

        self._uow.stage(
            check, lambda: self._store.airports.__setitem__(airport.code, snapshot)
        )

    def delete(self, airport: Airport) -> None:
        def check() -> None:
            if airport.code not in self._store.airports:
                raise ResourceNotFoundException.of("Airport", airport.code, "code")

        def apply() -> None:
            del self._store.airports[airport.code]

        self._uow.stage(check, apply)

    def find_by_id(self, code):
        return copy.deepcopy(self._store.airports.get(code))

    def find_all(self, city=None):
        return [
            copy.deepcopy(a)
            for a in self._store.airports.values()
            if city is None or a.city.lower() == city.lower()
        ]


def _replay(flight: Flight, events: list) -> None:
    """記録されたイベントを最新の集約に再適用する（条件付き更新の代わり）"""
    for event in events:
        if isinstance(event, SeatStatusChanged):
            seat = flight.seat(event.seat_number)
            if seat is None or seat.status != event.previous:
                raise OptimisticLockException(f"Seat {event.seat_number} changed")
            if event.current == SeatStatus.RESERVED:
                flight.reserve_seat(event.seat_number)
            elif event.current == SeatStatus.OCCUPIED:
                flight.occupy_seat(event.seat_number)
            elif event.current == SeatStatus.AVAILABLE:
                flight.release_seat(event.seat_number)
        elif isinstance(event, FlightStatusChanged):
            if flight.status != event.previous:
                raise OptimisticLockException("Flight status changed")
            flight.change_status(event.current)
    flight.flush_domain_events()


class InMemoryFlightRepository(FlightRepository):
    def __init__(self, uow: InMemoryUnitOfWork) -> None:
        self._uow = uow
        self._store = uow.store
        self.after_read: Callable[[], None] | None = None

    def save(self, flight: Flight) -> None:
        flight.flush_domain_events()
        snapshot = copy.deepcopy(flight)
        self._uow.stage(
            *_unique(
                self._store,
                f"FLIGHT_NUMBER#{flight.flight_number}",
                DuplicateResourceException.of(
                    "Flight", "flightNumber", flight.flight_number
                ),
            )
        )
        self._uow.stage(
            lambda: None,
            lambda: self._store.flights.__setitem__(flight.id, snapshot),
        )

    def update(self, flight: Flight) -> None:
        events = flight.flush_domain_events()
        if not events:
            return
        replayed: dict = {}

        def check() -> None:
            current = copy.deepcopy(self._store.flights[flight.id])
            try:
                _replay(current, events)
            except DomainException as e:
                raise OptimisticLockException(
                    f"Flight was modified concurrently: flight_id={flight.id}"
                ) from e
            replayed["flight"] = current

        def apply() -> None:
            self._store.flights[flight.id] = replayed["flight"]

        self._uow.stage(check, apply)

    def delete(self, flight: Flight) -> None:
        available = flight.available_seats

        def check() -> None:
            current = self._store.flights.get(flight.id)
            if current is None or current.available_seats != available:
                raise OptimisticLockException(
                    f"Flight was modified concurrently: flight_id={flight.id}"
                )

        def apply() -> None:
            del self._store.flights[flight.id]
            self._store.unique_keys.discard(f"FLIGHT_NUMBER#{flight.flight_number}")

        self._uow.stage(check, apply)

    def find_by_id(self, flight_id):
        flight = copy.deepcopy(self._store.flights.get(flight_id))
        if self.after_read is not None:
            self.after_read()
        return flight

    def find_by_flight_number(self, flight_number):
        for flight in self._store.flights.values():
            if flight.flight_number == flight_number:
                return copy.deepcopy(flight)
        return None

    def find_all(self, status=None):
        return [
            copy.deepcopy(f)
            for f in self._store.flights.values()
            if status is None or f.status == status
        ]

    def search(
        self, departure_airport, arrival_airport, departure_from, departure_until
    ):
        return [
            copy.deepcopy(f)
            for f in self._store.flights.values()
            if f.departure_airport == departure_airport
            and f.arrival_airport == arrival_airport
            and not f.departure_time.is_before(departure_from)
            and f.departure_time.is_before(departure_until)
        ]


def _passenger_keys(passenger: Passenger) -> tuple[str, str]:
    return (
        f"PASSENGER_EMAIL#{passenger.email}",
        f"PASSENGER_PASSPORT#{passenger.passport_number}",
    )


class InMemoryPassengerRepository(PassengerRepository):
    def __init__(self, uow: InMemoryUnitOfWork) -> None:
        self._uow = uow
        self._store = uow.store

    def save(self, passenger: Passenger) -> None:
        snapshot = copy.deepcopy(passenger)
        self._uow.stage(
            *_unique(
                self._store,
                f"PASSENGER_EMAIL#{passenger.email}",
                DuplicateResourceException.of("Passenger", "email", passenger.email),
            )
        )
        self._uow.stage(
            *_unique(
                self._store,
                f"PASSENGER_PASSPORT#{passenger.passport_number}",
                DuplicateResourceException.of(
                    "Passenger", "passportNumber", passenger.passport_number
                ),
            )
        )
        self._uow.stage(
            lambda: None,
            lambda: self._store.passengers.__setitem__(passenger.id, snapshot),
        )

    def update(self, passenger: Passenger, previous: Passenger) -> None:
        snapshot = copy.deepcopy(passenger)
        old_keys = _passenger_keys(previous)
        new_keys = _passenger_keys(passenger)

        def check() -> None:
            current = self._store.passengers.get(passenger.id)
            if current is None or _passenger_keys(current) != old_keys:
                raise OptimisticLockException(
                    f"Passenger was modified concurrently: passenger_id={passenger.id}"
                )
            if new_keys[0] != old_keys[0] and new_keys[0] in self._store.unique_keys:
                raise DuplicateResourceException.of(
                    "Passenger", "email", passenger.email
                )
            if new_keys[1] != old_keys[1] and new_keys[1] in self._store.unique_keys:
                raise DuplicateResourceException.of(
                    "Passenger", "passportNumber", passenger.passport_number
                )

        def apply() -> None:
            self._store.unique_keys.difference_update(old_keys)
            self._store.unique_keys.update(new_keys)
            self._store.passengers[passenger.id] = snapshot

        self._uow.stage(check, apply)

    def delete(self, passenger: Passenger) -> None:
        def check() -> None:
            if passenger.id not in self._store.passengers:
                raise ResourceNotFoundException.of("Passenger", passenger.id)

        def apply() -> None:
            del self._store.passengers[passenger.id]
            self._store.unique_keys.difference_update(_passenger_keys(passenger))

        self._uow.stage(check, apply)

    def find_by_id(self, passenger_id):
        return copy.deepcopy(self._store.passengers.get(passenger_id))

    def find_by_email(self, email):
        for passenger in self._store.passengers.values():
            if passenger.email == email:
                return copy.deepcopy(passenger)
        return None

    def find_by_passport_number(self, passport_number):
        for passenger in self._store.passengers.values():
            if passenger.passport_number == passport_number:
                return copy.deepcopy(passenger)
        return None

    def find_all(self):
        return [copy.deepcopy(p) for p in self._store.passengers.values()]


class InMemoryBookingRepository(BookingRepository):
    def __init__(self, uow: InMemoryUnitOfWork) -> None:
        self._uow = uow
        self._store = uow.store

    def save(self, booking: Booking) -> None:
        snapshot = copy.deepcopy(booking)
        self._uow.stage(
            *_unique(
                self._store,
                f"BOOKING_REF#{booking.reference}",
                DuplicateResourceException.of(
                    "Booking", "bookingReference", booking.reference
                ),
            )
        )
        self._uow.stage(
            lambda: None,
            lambda: self._store.bookings.__setitem__(booking.id, snapshot),
        )

    def update(self, booking: Booking, expected_status: BookingStatus) -> None:
        snapshot = copy.deepcopy(booking)

        def check() -> None:
            if self._store.bookings[booking.id].status != expected_status:
                raise OptimisticLockException(
                    f"Booking status conflict: booking_id={booking.id}"
                )

        def apply() -> None:
            self._store.bookings[booking.id] = snapshot

        self._uow.stage(check, apply)

    def find_by_id(self, booking_id):
        return copy.deepcopy(self._store.bookings.get(booking_id))

    def find_by_reference(self, reference):
        for booking in self._store.bookings.values():
            if booking.reference == reference:
                return copy.deepcopy(booking)
        return None

    def find_by_passenger_id(self, passenger_id):
        return [
            copy.deepcopy(b)
            for b in self._store.bookings.values()
            if b.passenger_id == passenger_id
        ]

    def find_by_flight_id(self, flight_id):
        return [
            copy.deepcopy(b)
            for b in self._store.bookings.values()
            if b.flight_id == flight_id
        ]

    def find_all(self, status=None):
        return [
            copy.deepcopy(b)
            for b in self._store.bookings.values()
            if status is None or b.status == status
        ]


class InMemoryPaymentRepository(PaymentRepository):
    def __init__(self, uow: InMemoryUnitOfWork) -> None:
        self._uow = uow
        self._store = uow.store
        self.after_read: Callable[[], None] | None = None

    def save(self, payment: Payment) -> None:
        snapshot = copy.deepcopy(payment)
        self._uow.stage(
            *_unique(
                self._store,
                f"PAYMENT#{payment.booking_id}",
                InvalidBookingException("Payment already processed for this booking"),
            )
        )
        self._uow.stage(
            lambda: None,
            lambda: self._store.payments.__setitem__(payment.booking_id, snapshot),
        )

    def find_by_id(self, payment_id):
        return self.find_by_booking_id(payment_id.booking_id)

    def find_by_booking_id(self, booking_id):
        payment = copy.deepcopy(self._store.payments.get(booking_id))
        if self.after_read is not None:
            self.after_read()
        return payment

    def find_by_transaction_id(self, transaction_id):
        for payment in self._store.payments.values():
            if payment.transaction_id == transaction_id:
                return copy.deepcopy(payment)
        return None

    def find_all(self):
        return [copy.deepcopy(p) for p in self._store.payments.values()]


class Repositories:
    """1つの UnitOfWork を共有するリポジトリ一式（Lambda 1呼び出し分に相当）"""

    def __init__(self, store: InMemoryStore) -> None:
        self.uow = InMemoryUnitOfWork(store)
        self.airports = InMemoryAirportRepository(self.uow)
        self.flights = InMemoryFlightRepository(self.uow)
        self.passengers = InMemoryPassengerRepository(self.uow)
        self.bookings = InMemoryBookingRepository(self.uow)
        self.payments = InMemoryPaymentRepository(self.uow)
        self.seat_allocation = SeatAllocationService(self.flights)

    def create_booking_service(self) -> CreateBookingService:
        return CreateBookingService(
            uow=self.uow,
            passenger_repository=self.passengers,
            flight_repository=self.flights,
            booking_repository=self.bookings,
            seat_allocation=self.seat_allocation,
            factory=BookingFactory(),
        )

    def confirm_booking_service(self) -> ConfirmBookingService:
        return ConfirmBookingService(
            uow=self.uow,
            booking_repository=self.bookings,
            seat_allocation=self.seat_allocation,
        )

    def cancel_booking_service(self) -> CancelBookingService:
        return CancelBookingService(
            uow=self.uow,
            booking_repository=self.bookings,
            seat_allocation=self.seat_allocation,
        )


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def repos(store):
    """インメモリのリポジトリ一式"""
    return Repositories(store)


@pytest.fixture
def new_repos(store):
    """同じ store を共有する別の呼び出し用リポジトリ一式を作る Factory fixture"""

    def _factory() -> Repositories:
        return Repositories(store)

    return _factory


@pytest.fixture
def add_airport(repos):
    """空港を登録済みにする Factory fixture"""

    def _factory(code: str = "JFK", name: str | None = None) -> Airport:
        airport = Airport(
            code=AirportCode(code),
            name=name or f"{code} International",
            city="City",
            country="Country",
        )
        repos.airports.save(airport)
        repos.uow.commit()
        return airport

    return _factory


@pytest.fixture
def add_flight(repos):
    """フライト（座席表つき）を登録済みにする Factory fixture"""

    def _factory(
        flight_number: str = "AA101",
        departure_airport: str = "JFK",
        arrival_airport: str = "LAX",
        departure_time: str = "2026-12-01T10:00:00",
        arrival_time: str = "2026-12-01T15:00:00",
        total_seats: int = 12,
        base_price: str = "200.00",
        status: FlightStatus = FlightStatus.SCHEDULED,
    ) -> Flight:
        details: FlightDetails = {
            "flight_number": flight_number,
            "airline_name": "American Airlines",
            "departure_airport": departure_airport,
            "arrival_airport": arrival_airport,
            "departure_time": departure_time,
            "arrival_time": arrival_time,
            "total_seats": total_seats,
            "base_price": Decimal(base_price),
            "currency": "USD",
        }
        flight = FlightFactory().create(details)
        flight.change_status(status)
        repos.flights.save(flight)
        repos.uow.commit()
        return flight

    return _factory


@pytest.fixture
def add_passenger(repos):
    """乗客を登録済みにする Factory fixture"""

    def _factory(
        email: str = "taro@example.com", passport_number: str = "TK1234567"
    ) -> Passenger:
        details: PassengerDetails = {
            "first_name": "Taro",
            "last_name": "Yamada",
            "email": email,
            "phone_number": "0312345678",
            "date_of_birth": date(1990, 1, 1),
            "passport_number": passport_number,
            "nationality": "Japan",
        }
        passenger = PassengerFactory().create(details)
        repos.passengers.save(passenger)
        repos.uow.commit()
        return passenger

    return _factory
