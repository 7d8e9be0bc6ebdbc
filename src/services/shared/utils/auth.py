from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent

from services.shared.domain.exception import (
    ForbiddenException,
    UnauthenticatedException,
)


class Role(str, Enum):
    """呼び出し元のロール"""

    USER = "USER"
    ADMIN = "ADMIN"

    def grants(self, required: Role) -> bool:
        """ADMIN は USER の操作も行える"""
        return self == required or self == Role.ADMIN


@dataclass(frozen=True)
class Principal:
    """Lambda Authorizer が認証した呼び出し元"""

    username: str
    role: Role

    @classmethod
    def from_event(cls, event: APIGatewayProxyEvent) -> Principal | None:
        """Authorizer のコンテキスト（requestContext.authorizer）から生成する"""
        request_context = event.raw_event.get("requestContext") or {}
        authorizer = request_context.get("authorizer") or {}

        username = authorizer.get("username") or authorizer.get("principalId")
        role = authorizer.get("role")
        if not username or not role:
            return None
        try:
            return cls(username=username, role=Role(str(role).upper()))
        except ValueError:
            return None


def require_principal(event: APIGatewayProxyEvent) -> Principal:
    """認証済みの呼び出し元を返す"""
    principal = Principal.from_event(event)
    if principal is None:
        raise UnauthenticatedException("Authentication required")
    return principal


def require_role(event: APIGatewayProxyEvent, role: Role) -> Principal:
    """指定ロールを持つ呼び出し元を返す"""
    principal = require_principal(event)
    if not principal.role.grants(role):
        raise ForbiddenException(f"Role {role.value} is required")
    return principal
