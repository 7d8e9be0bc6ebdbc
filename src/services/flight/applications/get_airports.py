from services.flight.domain.entity import Airport
from services.flight.domain.repository import AirportRepository
from services.flight.domain.value_object import AirportCode
from services.shared.domain import ResourceNotFoundException


class AirportQueryService:
    """空港の参照ユースケース"""

    def __init__(self, repository: AirportRepository) -> None:
        self._repository = repository

    def get(self, code: str) -> Airport:
        airport_code = AirportCode(code)
        airport = self._repository.find_by_id(airport_code)
        if airport is None:
            raise ResourceNotFoundException.of("Airport", airport_code, "code")
        return airport

    def list_all(self, city: str | None = None) -> list[Airport]:
        return self._repository.find_all(city=city)
