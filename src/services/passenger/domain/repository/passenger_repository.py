from abc import abstractmethod

from services.passenger.domain.entity import Passenger
from services.passenger.domain.value_object import Email, PassengerId, PassportNumber
from services.shared.domain import Repository


class PassengerRepository(Repository[Passenger, PassengerId]):
    """乗客レポジトリ"""

    @abstractmethod
    def save(self, passenger: Passenger) -> None:
        """新規作成をステージする（メール・旅券番号の重複は commit 時に競合）"""
        raise NotImplementedError

    @abstractmethod
    def update(self, passenger: Passenger, previous: Passenger) -> None:
        """更新をステージする

        メールアドレス・旅券番号が変わった場合はロック用アイテムを付け替える。
        previous から変更されていた場合は commit 時に OptimisticLockException となる。
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, passenger: Passenger) -> None:
        """乗客とロック用アイテムの削除をステージする"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, passenger_id: PassengerId) -> Passenger | None:
        raise NotImplementedError

    @abstractmethod
    def find_by_email(self, email: Email) -> Passenger | None:
        raise NotImplementedError

    @abstractmethod
    def find_by_passport_number(
        self, passport_number: PassportNumber
    ) -> Passenger | None:
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Passenger]:
        raise NotImplementedError
