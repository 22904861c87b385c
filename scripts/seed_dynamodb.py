"""Create the doccat DynamoDB tables and optionally seed demo workflow drafts.

Usage:
    python scripts/seed_dynamodb.py --endpoint-url http://localhost:4566 --demo-user user_alice
"""

from __future__ import annotations

import argparse
from typing import Any

import boto3

from doccat.catalog.reference_data import DOCUMENTS
from doccat.models.document import DocumentStatus
from doccat.models.workflow import WorkflowSession
from doccat.persistence.dynamodb_backend import DynamoDBSessionStore

TABLE_DEFINITIONS: list[dict[str, Any]] = [
    {"name": "doccat-workflow-sessions"},
]


def create_tables(ddb: Any, suffix: str = "") -> None:
    """Create all doccat tables. Skips tables that already exist."""
    client = ddb.meta.client
    existing = client.list_tables().get("TableNames", [])

    for defn in TABLE_DEFINITIONS:
        table_name = f"{defn['name']}{suffix}"
        if table_name in existing:
            print(f"  Table {table_name} already exists, skipping")
            continue
        client.create_table(
            TableName=table_name,
            KeySchema=[
                {"AttributeName": "PK", "KeyType": "HASH"},
                {"AttributeName": "SK", "KeyType": "RANGE"},
            ],
            AttributeDefinitions=[
                {"AttributeName": "PK", "AttributeType": "S"},
                {"AttributeName": "SK", "AttributeType": "S"},
            ],
            BillingMode="PAY_PER_REQUEST",
        )
        print(f"  Created table {table_name}")


def seed_demo_sessions(ddb: Any, user_id: str, suffix: str = "") -> int:
    """Write one step-A draft per pending reference document for ``user_id``.

    Goes through DynamoDBSessionStore so the rows match what the API writes.
    Returns the number of drafts written.
    """
    store = DynamoDBSessionStore(table_suffix=suffix, resource=ddb)

    count = 0
    for document in DOCUMENTS:
        if document.status != DocumentStatus.PENDING:
            continue
        store.upsert(WorkflowSession(document_id=document.id, user_id=user_id))
        count += 1
    print(f"  Seeded {count} draft sessions for {user_id}")
    return count


def main() -> None:
    parser = argparse.ArgumentParser(description="Create and seed DynamoDB tables for doccat")
    parser.add_argument("--endpoint-url", default=None, help="DynamoDB endpoint (e.g. http://localhost:4566)")
    parser.add_argument("--table-suffix", default="", help="Table name suffix (e.g. -dev)")
    parser.add_argument("--region", default="us-east-1", help="AWS region")
    parser.add_argument("--demo-user", default=None, help="Seed draft sessions for this user id")
    args = parser.parse_args()

    kwargs: dict[str, Any] = {"region_name": args.region}
    if args.endpoint_url:
        kwargs["endpoint_url"] = args.endpoint_url

    ddb = boto3.resource("dynamodb", **kwargs)

    print("Creating tables...")
    create_tables(ddb, suffix=args.table_suffix)

    if args.demo_user:
        print("Seeding demo drafts...")
        seed_demo_sessions(ddb, args.demo_user, suffix=args.table_suffix)

    print("Done!")


if __name__ == "__main__":
    main()
