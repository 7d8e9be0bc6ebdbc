from abc import abstractmethod

from services.flight.domain.entity import Flight
from services.flight.domain.enum import FlightStatus
from services.flight.domain.value_object import AirportCode, FlightId, FlightNumber
from services.shared.domain import IsoDateTime, Repository


class FlightRepository(Repository[Flight, FlightId]):
    """フライトレポジトリ"""

    @abstractmethod
    def save(self, flight: Flight) -> None:
        """新規作成をステージする（便名重複は commit 時に競合）"""
        raise NotImplementedError

    @abstractmethod
    def update(self, flight: Flight) -> None:
        """ドメインイベントから条件付き更新をステージする

        座席ステータスと空席数は、イベント発生前の状態であることを条件に
        同時に更新される。条件不成立は commit 時に OptimisticLockException となる。
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, flight: Flight) -> None:
        """削除をステージする

        読み込み後に空席数が変わっていた（新たな予約が入った）場合は
        commit 時に OptimisticLockException となる。便名のロック用アイテムも削除する。
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, flight_id: FlightId) -> Flight | None:
        raise NotImplementedError

    @abstractmethod
    def find_by_flight_number(self, flight_number: FlightNumber) -> Flight | None:
        raise NotImplementedError

    @abstractmethod
    def find_all(self, status: FlightStatus | None = None) -> list[Flight]:
        raise NotImplementedError

    @abstractmethod
    def search(
        self,
        departure_airport: AirportCode,
        arrival_airport: AirportCode,
        departure_from: IsoDateTime,
        departure_until: IsoDateTime,
    ) -> list[Flight]:
        """区間・出発時刻 [from, until) で予約可能なフライトを検索"""
        raise NotImplementedError
