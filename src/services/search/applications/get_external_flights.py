from services.search.domain import ExternalFlight, ExternalFlightProvider
from services.shared.domain import ResourceNotFoundException


class ExternalFlightQueryService:
    """外部フライト情報の参照（プロバイダへの読み取りのみ）"""

    def __init__(self, provider: ExternalFlightProvider) -> None:
        self._provider = provider

    def list_all(self) -> list[ExternalFlight]:
        return self._provider.fetch_all()

    def by_number(self, flight_number: str) -> list[ExternalFlight]:
        return self._provider.fetch_by_number(flight_number.strip().upper())

    def by_route(self, origin: str, destination: str) -> list[ExternalFlight]:
        return self._provider.fetch_by_route(
            origin.strip().upper(), destination.strip().upper()
        )

    def get(self, external_id: str) -> ExternalFlight:
        flight = self._provider.fetch_by_id(external_id.strip())
        if flight is None:
            raise ResourceNotFoundException.of("External flight", external_id)
        return flight
