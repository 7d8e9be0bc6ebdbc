from enum import Enum


class FlightSource(str, Enum):
    """検索結果の取得元"""

    INTERNAL = "internal"
    EXTERNAL = "external"
