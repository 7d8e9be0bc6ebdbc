from __future__ import annotations

from services.flight.domain.value_object import AirportCode
from services.shared.domain import AggregateRoot


class Airport(AggregateRoot[AirportCode]):
    """空港（空港コードで一意）"""

    def __init__(
        self,
        code: AirportCode,
        name: str,
        city: str,
        country: str,
    ) -> None:
        super().__init__(code)
        self._name, self._city, self._country = _validated(name, city, country)

    @property
    def code(self) -> AirportCode:
        return self.id

    @property
    def name(self) -> str:
        return self._name

    @property
    def city(self) -> str:
        return self._city

    @property
    def country(self) -> str:
        return self._country

    def update_details(self, name: str, city: str, country: str) -> None:
        """名称・都市・国を更新する（空港コードは変更できない）"""
        self._name, self._city, self._country = _validated(name, city, country)

    @classmethod
    def placeholder(cls, code: AirportCode) -> Airport:
        """外部フライト取り込み時に作成する仮の空港"""
        return cls(code=code, name=f"Airport {code}", city="-", country="-")


def _validated(name: str, city: str, country: str) -> tuple[str, str, str]:
    for field, value in (("name", name), ("city", city), ("country", country)):
        if not value or not value.strip():
            raise ValueError(f"Airport {field} is required")
    return name.strip(), city.strip(), country.strip()
