import os
from dataclasses import dataclass

import boto3
from aws_lambda_powertools import Logger
from boto3.dynamodb.types import TypeSerializer
from botocore.exceptions import ClientError

from services.shared.domain import DomainException, UnitOfWork

logger = Logger(child=True)

# 値をシリアライズする必要があるパラメータ
_SERIALIZED_PARAMS = ("Item", "Key", "ExpressionAttributeValues")

# ステージされたドメイン例外に変換する取り消し理由（優先順）
_CONFLICT_REASONS = ("ConditionalCheckFailed", "TransactionConflict")


@dataclass(frozen=True)
class StagedWrite:
    """TransactWriteItems の1要素と、条件不成立時に送出するドメイン例外"""

    operation: str
    params: dict
    on_conflict: DomainException


class DynamoDBUnitOfWork(UnitOfWork):
    """TransactWriteItems を使用した UnitOfWork の具象実装

    Repository は Python ネイティブ型のまま書き込みをステージし、
    commit 時に TypeSerializer で DynamoDB の型表現へ変換する。
    """

    def __init__(self, table_name: str | None = None, client=None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.client = client or boto3.client("dynamodb")
        self._serializer = TypeSerializer()
        self._staged: list[StagedWrite] = []

    @property
    def staged(self) -> tuple[StagedWrite, ...]:
        return tuple(self._staged)

    def stage_put(
        self,
        item: dict,
        on_conflict: DomainException,
        condition: str | None = "attribute_not_exists(PK)",
        values: dict | None = None,
    ) -> None:
        """アイテムの書き込みをステージする（既定では既存アイテムがあれば競合）"""
        params: dict = {"Item": item}
        if condition is not None:
            params["ConditionExpression"] = condition
        if values:
            params["ExpressionAttributeValues"] = values
        self._staged.append(StagedWrite("Put", params, on_conflict))

    def stage_update(
        self,
        key: dict,
        update_expression: str,
        on_conflict: DomainException,
        condition: str | None = None,
        names: dict | None = None,
        values: dict | None = None,
    ) -> None:
        """アイテムの更新をステージする"""
        params: dict = {"Key": key, "UpdateExpression": update_expression}
        if condition is not None:
            params["ConditionExpression"] = condition
        if names:
            params["ExpressionAttributeNames"] = names
        if values:
            params["ExpressionAttributeValues"] = values
        self._staged.append(StagedWrite("Update", params, on_conflict))

    def stage_delete(
        self,
        key: dict,
        on_conflict: DomainException,
        condition: str | None = "attribute_exists(PK)",
        values: dict | None = None,
    ) -> None:
        """アイテムの削除をステージする（既定ではアイテムが無ければ競合）"""
        params: dict = {"Key": key}
        if condition is not None:
            params["ConditionExpression"] = condition
        if values:
            params["ExpressionAttributeValues"] = values
        self._staged.append(StagedWrite("Delete", params, on_conflict))

    def commit(self) -> None:
        if not self._staged:
            return

        staged = self._staged.copy()
        self._staged.clear()

        try:
            self.client.transact_write_items(
                TransactItems=[self._to_transact_item(write) for write in staged]
            )
        except ClientError as e:
            code = e.response["Error"]["Code"]
            if code == "TransactionInProgressException":
                # 同じアイテムへの別トランザクションが進行中
                logger.info("Transaction in progress", extra={"size": len(staged)})
                raise staged[0].on_conflict from e
            if code != "TransactionCanceledException":
                raise
            reasons = [
                reason.get("Code")
                for reason in e.response.get("CancellationReasons", [])
            ]
            # 条件不成立を優先し、なければ同時書き込みによる競合を変換する
            for cause in _CONFLICT_REASONS:
                for write, reason in zip(staged, reasons):
                    if reason == cause:
                        logger.info(
                            "Transaction cancelled",
                            extra={
                                "cause": cause,
                                "operation": write.operation,
                                "reason": str(write.on_conflict),
                            },
                        )
                        raise write.on_conflict from e
            raise

    def rollback(self) -> None:
        self._staged.clear()

    def _to_transact_item(self, write: StagedWrite) -> dict:
        body: dict = {"TableName": self.table_name}
        for name, value in write.params.items():
            if name in _SERIALIZED_PARAMS:
                body[name] = {
                    k: self._serializer.serialize(v) for k, v in value.items()
                }
            else:
                body[name] = value
        return {write.operation: body}
