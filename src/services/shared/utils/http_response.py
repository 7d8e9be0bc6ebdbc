import json
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class SuccessResponse(BaseModel, Generic[T]):
    """成功レスポンスモデル"""

    success: bool = True
    message: str = "OK"
    data: T


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    success: bool = False
    message: str
    errors: list | None = None


def api_response(status_code: int, body: dict) -> dict:
    """API Gateway Lambda Proxy Integration のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }


def ok(data: Any, message: str = "OK", status_code: int = 200) -> dict:
    """レスポンスモデル（またはそのリスト）を成功レスポンスに包む"""
    body = SuccessResponse(message=message, data=data).model_dump(mode="json")
    return api_response(status_code, body)


def error(status_code: int, message: str, errors: list | None = None) -> dict:
    body = ErrorResponse(message=message, errors=errors).model_dump(exclude_none=True)
    return api_response(status_code, body)
