from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class RequestModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SearchUnifiedQuery(RequestModel):
    """統合検索のクエリパラメータ（?includeExternal=false で内部のみ）"""

    include_external: bool = True


class ExternalFlightsQuery(RequestModel):
    """外部フライト一覧のクエリパラメータ

    origin と destination は両方指定した場合のみ路線検索になる。
    """

    origin: str | None = None
    destination: str | None = None

    @model_validator(mode="after")
    def require_both_route_ends(self):
        if (self.origin is None) != (self.destination is None):
            raise ValueError("Provide both origin and destination")
        return self
