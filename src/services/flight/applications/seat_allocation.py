from aws_lambda_powertools import Logger

from services.flight.domain.entity import Flight, Seat
from services.flight.domain.repository import FlightRepository
from services.flight.domain.value_object import FlightId, SeatId
from services.shared.domain import InvalidBookingException, ResourceNotFoundException

logger = Logger(child=True)


class SeatAllocationService:
    """座席割り当てエンジン

    座席ステータスと空席数を同時に遷移させ、フライトの条件付き更新を
    呼び出し元の UnitOfWork にステージする（commit は呼び出し元が行う）。
    """

    def __init__(self, flight_repository: FlightRepository) -> None:
        self._flight_repository = flight_repository

    def reserve(self, seat_id: SeatId, flight: Flight) -> Seat:
        """座席を仮押さえする（AVAILABLE → RESERVED、空席数 -1）"""
        self._ensure_belongs(seat_id, flight)
        seat = flight.reserve_seat(seat_id.seat_number)
        self._flight_repository.update(flight)
        logger.info("Seat reserved", extra={"seat_id": str(seat_id)})
        return seat

    def occupy(self, seat_id: SeatId) -> Seat:
        """仮押さえ中の座席を確定する（RESERVED → OCCUPIED）"""
        flight = self._load_flight(seat_id.flight_id, seat_id)
        seat = flight.occupy_seat(seat_id.seat_number)
        self._flight_repository.update(flight)
        logger.info("Seat occupied", extra={"seat_id": str(seat_id)})
        return seat

    def release(self, seat_id: SeatId, flight_id: FlightId) -> Seat:
        """座席を解放する（→ AVAILABLE、空席数 +1）"""
        flight = self._load_flight(flight_id, seat_id)
        self._ensure_belongs(seat_id, flight)
        seat = flight.release_seat(seat_id.seat_number)
        self._flight_repository.update(flight)
        logger.info("Seat released", extra={"seat_id": str(seat_id)})
        return seat

    def _load_flight(self, flight_id: FlightId, seat_id: SeatId) -> Flight:
        flight = self._flight_repository.find_by_id(flight_id)
        if flight is None:
            raise ResourceNotFoundException.of("Seat", seat_id)
        return flight

    def _ensure_belongs(self, seat_id: SeatId, flight: Flight) -> None:
        """座席がフライトに属することを確認する（座席自体が無ければ NotFound）"""
        if seat_id.flight_id == flight.id:
            return
        owner = self._flight_repository.find_by_id(seat_id.flight_id)
        if owner is None or owner.seat(seat_id.seat_number) is None:
            raise ResourceNotFoundException.of("Seat", seat_id)
        raise InvalidBookingException(
            "Selected seat does not belong to the chosen flight"
        )
