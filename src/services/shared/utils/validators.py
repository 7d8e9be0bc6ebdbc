from decimal import Decimal


def to_decimal(v: object) -> Decimal:
    """任意の値を Decimal に変換する

    Pydantic の field_validator (mode="before") から呼び出すことを想定。
    すでに Decimal の場合はそのまま返し、それ以外は str 経由で変換する。
    """
    if isinstance(v, Decimal):
        return v
    return Decimal(str(v))


def normalize_code(v: object) -> object:
    """空港コード・便名などの前後空白を除去して大文字化する"""
    if isinstance(v, str):
        return v.strip().upper()
    return v
