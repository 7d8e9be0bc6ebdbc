import functools
from collections.abc import Callable

from aws_lambda_powertools import Logger
from pydantic import ValidationError

from services.shared.domain.exception import (
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    ForbiddenException,
    OptimisticLockException,
    PaymentFailedException,
    ResourceNotFoundException,
    SeatUnavailableException,
    UnauthenticatedException,
)
from services.shared.utils.http_response import error

logger = Logger(child=True)

# 上から順に isinstance で判定する
_STATUS_CODES: tuple[tuple[type[DomainException], int], ...] = (
    (ResourceNotFoundException, 404),
    (DuplicateResourceException, 409),
    (SeatUnavailableException, 409),
    (OptimisticLockException, 409),
    (PaymentFailedException, 402),
    (UnauthenticatedException, 401),
    (ForbiddenException, 403),
    (BusinessRuleViolationException, 400),
)


def status_code_for(exc: DomainException) -> int:
    """ドメイン例外に対応する HTTP ステータスコード"""
    for exc_type, status_code in _STATUS_CODES:
        if isinstance(exc, exc_type):
            return status_code
    return 400


def handle_api_errors(handler: Callable) -> Callable:
    """ハンドラーで発生した例外を構造化されたエラーレスポンスに変換する

    想定外の例外はスタックトレースをログに残し、呼び出し元には汎用メッセージのみ返す。
    """

    @functools.wraps(handler)
    def wrapper(event, context):
        try:
            return handler(event, context)
        except ValidationError as e:
            details = [
                {
                    "field": ".".join(str(loc) for loc in err["loc"]),
                    "message": err["msg"],
                }
                for err in e.errors(include_url=False)
            ]
            logger.info("Request validation failed", extra={"errors": details})
            return error(400, "Validation failed", details)
        except DomainException as e:
            status_code = status_code_for(e)
            logger.info(
                "Request rejected",
                extra={"status_code": status_code, "error": type(e).__name__},
            )
            return error(status_code, str(e))
        except ValueError as e:
            logger.info("Invalid request value", extra={"error": str(e)})
            return error(400, str(e))
        except Exception:
            logger.exception("Unexpected error")
            return error(500, "Internal server error")

    return wrapper
