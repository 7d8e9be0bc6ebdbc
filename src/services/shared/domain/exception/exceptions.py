from __future__ import annotations


class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    @classmethod
    def of(
        cls, resource: str, key: object, field: str = "id"
    ) -> ResourceNotFoundException:
        return cls(f"{resource} not found with {field}: {key}")


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class InvalidBookingException(BusinessRuleViolationException):
    """予約・在庫に関する業務ルール違反（状態遷移・座席不整合など）"""

    pass


class SeatUnavailableException(DomainException):
    """座席が存在するが予約可能な状態ではない場合"""

    def __init__(self, seat_number: object) -> None:
        super().__init__(f"Seat {seat_number} is not available")
        self.seat_number = str(seat_number)


class PaymentFailedException(DomainException):
    """決済ゲートウェイが決済を拒否した場合"""

    pass


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    @classmethod
    def of(
        cls, resource: str, field: str, value: object
    ) -> DuplicateResourceException:
        return cls(f"{resource} already exists with {field}: {value}")


class OptimisticLockException(DomainException):
    """楽観ロックの競合エラー（ステータスが期待値と異なる場合）"""

    pass


class UnauthenticatedException(DomainException):
    """認証情報が無い場合"""

    pass


class ForbiddenException(DomainException):
    """呼び出し元のロールが不足している場合"""

    pass
