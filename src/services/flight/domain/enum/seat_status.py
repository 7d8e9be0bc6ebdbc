from enum import Enum


class SeatStatus(str, Enum):
    """座席ステータス"""

    AVAILABLE = "AVAILABLE"
    RESERVED = "RESERVED"
    OCCUPIED = "OCCUPIED"
    BLOCKED = "BLOCKED"
