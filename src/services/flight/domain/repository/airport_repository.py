from abc import abstractmethod

from services.flight.domain.entity import Airport
from services.flight.domain.value_object import AirportCode
from services.shared.domain import Repository


class AirportRepository(Repository[Airport, AirportCode]):
    """空港レポジトリ"""

    @abstractmethod
    def save(self, airport: Airport) -> None:
        """新規作成をステージする（空港コード重複は commit 時に競合）"""
        raise NotImplementedError

    @abstractmethod
    def update(self, airport: Airport) -> None:
        """既存の空港の上書きをステージする（存在しなければ commit 時に NotFound）"""
        raise NotImplementedError

    @abstractmethod
    def delete(self, airport: Airport) -> None:
        """削除をステージする"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, code: AirportCode) -> Airport | None:
        """空港コードで検索"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self, city: str | None = None) -> list[Airport]:
        """一覧（都市で絞り込み可能）"""
        raise NotImplementedError
