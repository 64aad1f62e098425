"""MongoDB client helpers for the optional monthly sink."""

from __future__ import annotations

from typing import Any

import certifi
from pymongo import MongoClient
from pymongo.collection import Collection

from fund_monthly.config import Settings


def get_client(uri: str) -> MongoClient:
    """Return a TLS MongoClient for `uri` using the certifi CA bundle."""
    return MongoClient(
        uri,
        tls=True,
        tlsCAFile=certifi.where(),
        serverSelectionTimeoutMS=30000,
        socketTimeoutMS=30000,
        connectTimeoutMS=30000,
    )


def get_monthly_collection(
    client: MongoClient[dict[str, Any]],
    settings: Settings,
) -> Collection[dict[str, Any]]:
    """Return the configured collection for monthly documents.

    Args:
        client: PyMongo MongoClient.
        settings: Settings naming the database and collection.
    """
    return client[settings.mongo_db][settings.mongo_collection]
