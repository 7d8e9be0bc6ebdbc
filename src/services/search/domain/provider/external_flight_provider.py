from abc import ABC, abstractmethod

from services.search.domain.value_object import ExternalFlight


class ExternalFlightProvider(ABC):
    """外部フライト情報プロバイダ

    実装は例外を外に送出せず、取得できない場合は空の結果を返す。
    """

    @abstractmethod
    def fetch_all(self) -> list[ExternalFlight]:
        raise NotImplementedError

    @abstractmethod
    def fetch_by_number(self, flight_number: str) -> list[ExternalFlight]:
        raise NotImplementedError

    @abstractmethod
    def fetch_by_route(self, origin: str, destination: str) -> list[ExternalFlight]:
        raise NotImplementedError

    def fetch_by_id(self, external_id: str) -> ExternalFlight | None:
        """IDで1件取得する（便名検索の先頭）"""
        flights = self.fetch_by_number(external_id)
        return flights[0] if flights else None
