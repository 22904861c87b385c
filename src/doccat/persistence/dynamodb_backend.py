"""DynamoDB backend implementing ISessionStore with optional Redis caching."""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any

import boto3
from botocore.exceptions import ClientError

from doccat.core.exceptions import PersistenceError
from doccat.core.logging import get_logger
from doccat.models.workflow import WorkflowSession

LOGGER = get_logger(__name__)

SESSIONS_TABLE = "doccat-workflow-sessions"

# written once, kept on every later upsert of the same key
_IMMUTABLE_FIELDS = ("id", "created_at")


def _from_dynamo(value: Any) -> Any:
    """Convert DynamoDB Decimals back to int/float, recursively."""
    if isinstance(value, Decimal):
        return int(value) if value == int(value) else float(value)
    if isinstance(value, dict):
        return {k: _from_dynamo(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_from_dynamo(v) for v in value]
    return value


def session_key(document_id: str, user_id: str) -> dict[str, str]:
    return {"PK": f"DOC#{document_id}", "SK": f"USER#{user_id}"}


def cache_key(document_id: str, user_id: str) -> str:
    return f"session:{document_id}:{user_id}"


class DynamoDBSessionStore:
    """Production ISessionStore backed by DynamoDB + optional Redis cache.

    Sessions live under PK=DOC#{document_id}, SK=USER#{user_id}. ``upsert``
    is a single UpdateItem, so concurrent writers for the same key resolve
    last-write-wins while ``id`` and ``created_at`` keep their first value.
    """

    def __init__(self, table_suffix: str = "", region: str = "us-east-1",
                 endpoint_url: str | None = None, cache: Any = None,
                 cache_ttl: int = 3600, resource: Any = None) -> None:
        self._table_suffix = table_suffix
        self._region = region
        self._endpoint_url = endpoint_url
        self._cache = cache
        self._cache_ttl = cache_ttl
        if resource is not None:
            self._ddb = resource
            return
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._ddb = boto3.resource("dynamodb", **kwargs)

    def _table(self):
        return self._ddb.Table(f"{SESSIONS_TABLE}{self._table_suffix}")

    @staticmethod
    def _to_session(item: dict[str, Any]) -> WorkflowSession:
        data = _from_dynamo(item)
        data.pop("PK", None)
        data.pop("SK", None)
        return WorkflowSession.model_validate(data)

    # ---- ISessionStore methods ----

    def upsert(self, session: WorkflowSession) -> WorkflowSession:
        fields = session.model_dump(mode="json")
        names: dict[str, str] = {}
        values: dict[str, Any] = {}
        assignments: list[str] = []
        for i, (name, value) in enumerate(fields.items()):
            names[f"#f{i}"] = name
            values[f":v{i}"] = value
            if name in _IMMUTABLE_FIELDS:
                assignments.append(f"#f{i} = if_not_exists(#f{i}, :v{i})")
            else:
                assignments.append(f"#f{i} = :v{i}")

        try:
            resp = self._table().update_item(
                Key=session_key(session.document_id, session.user_id),
                UpdateExpression="SET " + ", ".join(assignments),
                ExpressionAttributeNames=names,
                ExpressionAttributeValues=values,
                ReturnValues="ALL_NEW",
            )
        except ClientError as exc:
            LOGGER.error("DynamoDB upsert failed for document=%s user=%s: %s",
                         session.document_id, session.user_id, exc)
            raise PersistenceError(
                f"DynamoDB upsert failed for document_id={session.document_id!r}: {exc}"
            ) from exc

        stored = self._to_session(resp["Attributes"])

        if self._cache is not None:
            self._cache.setex(
                cache_key(stored.document_id, stored.user_id),
                self._cache_ttl,
                stored.model_dump_json(),
            )
        return stored

    def get(self, document_id: str, user_id: str) -> WorkflowSession | None:
        key = cache_key(document_id, user_id)

        # Check cache first
        if self._cache is not None:
            cached = self._cache.get(key)
            if cached is not None:
                return WorkflowSession.model_validate(json.loads(cached))

        try:
            resp = self._table().get_item(Key=session_key(document_id, user_id))
        except ClientError as exc:
            raise PersistenceError(
                f"DynamoDB read failed for document_id={document_id!r}: {exc}"
            ) from exc

        item = resp.get("Item")
        if item is None:
            return None
        session = self._to_session(item)

        if self._cache is not None:
            self._cache.setex(key, self._cache_ttl, session.model_dump_json())
        return session
