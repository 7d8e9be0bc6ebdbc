from __future__ import annotations

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """Unit of Work 基底クラス

    - Repository の書き込みはステージされ、commit で一括（all-or-nothing）永続化される
    - commit せずに with ブロックを抜けた場合、ステージされた書き込みは破棄される
    - 読み込みはステージに関係なく即時に行われる
    """

    def __enter__(self) -> UnitOfWork:
        self.rollback()
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.rollback()

    @abstractmethod
    def commit(self) -> None:
        """ステージされた書き込みを1トランザクションで永続化する"""
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """ステージされた書き込みを破棄する"""
        raise NotImplementedError
