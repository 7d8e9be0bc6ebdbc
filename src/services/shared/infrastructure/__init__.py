from .dynamodb_query import query_all as query_all
from .dynamodb_unit_of_work import DynamoDBUnitOfWork as DynamoDBUnitOfWork
from .dynamodb_unit_of_work import StagedWrite as StagedWrite
