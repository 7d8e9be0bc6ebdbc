from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone


@dataclass(frozen=True)
class IsoDateTime:
    """日時(ISO 8601形式)

    タイムゾーンを持たない日時として扱う。オフセット付きの入力は UTC に換算して保持する。
    """

    value: datetime

    @classmethod
    def from_string(cls, s: str) -> IsoDateTime:
        """ISO 8601 形式の文字列から生成"""
        try:
            dt = datetime.fromisoformat(s.replace("Z", "+00:00"))
        except ValueError as e:
            raise ValueError(f"Invalid ISO 8601 datetime: {s}") from e
        if dt.tzinfo is not None:
            dt = dt.astimezone(timezone.utc)
        return cls(value=dt.replace(tzinfo=None))

    @classmethod
    def now(cls) -> IsoDateTime:
        return cls(value=datetime.now().replace(microsecond=0))

    @classmethod
    def at(cls, day: date, hour: int, minute: int = 0) -> IsoDateTime:
        """指定日の指定時刻"""
        return cls(value=datetime(day.year, day.month, day.day, hour, minute))

    def __str__(self) -> str:
        return self.value.isoformat()

    def plus(self, delta: timedelta) -> IsoDateTime:
        return IsoDateTime(value=self.value + delta)

    def is_before(self, other: IsoDateTime) -> bool:
        """他の日時より前かどうか"""
        return self.value < other.value

    def is_after(self, other: IsoDateTime) -> bool:
        """他の日時より後かどうか"""
        return self.value > other.value
