# config_client.py
import asyncio
import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import httpx
import streamlit as st

from config import DOCUMENT_TYPES
from logging_utils import get_logger
from settings import CONFIG_ENDPOINT, FETCH_TIMEOUT_SECONDS, REQUEST_PARAMS
from utils import safe_json_loads

logger = get_logger("config_client")

Document = Dict[str, Any]


class ConfigFetchError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class ConfigAggregate:
    """The four configuration documents; ``None`` means pending or failed."""

    t2i: Optional[Document] = None
    i2v: Optional[Document] = None
    t2v: Optional[Document] = None
    vendor: Optional[Document] = None
    loaded: bool = False

    def missing(self) -> List[str]:
        return [name for name in DOCUMENT_TYPES if getattr(self, name) is None]


def get_config_endpoint() -> str:
    """
    Resolve the configuration endpoint from environment, Streamlit secrets,
    or the built-in default.
    """
    env_endpoint = os.getenv("URL_BUILDER_CONFIG_ENDPOINT")
    if env_endpoint:
        return env_endpoint

    try:
        if hasattr(st, "secrets") and "CONFIG_ENDPOINT" in st.secrets:
            return st.secrets["CONFIG_ENDPOINT"]
    except Exception:
        # st.secrets raises when no secrets.toml exists
        pass

    return CONFIG_ENDPOINT


def make_client() -> httpx.AsyncClient:
    # no timeout unless one is configured
    return httpx.AsyncClient(timeout=FETCH_TIMEOUT_SECONDS)


async def _get_document(
    client: httpx.AsyncClient, endpoint: str, doc_type: str
) -> Document:
    params = {"type": doc_type, **REQUEST_PARAMS}
    resp = await client.get(endpoint, params=params)
    if resp.status_code >= 400:
        raise ConfigFetchError(
            f"Config request '{doc_type}' failed with {resp.status_code}",
            resp.status_code,
        )
    payload = safe_json_loads(resp.text)
    if not isinstance(payload, dict):
        raise ConfigFetchError(
            f"Config request '{doc_type}' returned {type(payload).__name__}, expected object"
        )
    return payload


async def _fetch_document(
    client: httpx.AsyncClient, endpoint: str, name: str, doc_type: str
) -> Optional[Document]:
    """Fetch one document; any failure is logged and reported as ``None``."""
    try:
        return await _get_document(client, endpoint, doc_type)
    except Exception as exc:
        logger.warning(
            "config_fetch_failed",
            document=name,
            doc_type=doc_type,
            error_type=type(exc).__name__,
            error=str(exc),
        )
        return None


async def fetch_config_aggregate(
    endpoint: Optional[str] = None,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> ConfigAggregate:
    """
    Fetch the four configuration documents concurrently.

    Returns only after every request has settled; each document fails
    independently of the others.
    """
    endpoint = endpoint or get_config_endpoint()
    owns_client = client is None
    if client is None:
        client = make_client()

    try:
        names = list(DOCUMENT_TYPES)
        results = await asyncio.gather(
            *(
                _fetch_document(client, endpoint, name, DOCUMENT_TYPES[name])
                for name in names
            )
        )
    finally:
        if owns_client:
            await client.aclose()

    aggregate = ConfigAggregate(**dict(zip(names, results)), loaded=True)
    logger.info("config_loaded", endpoint=endpoint, missing=aggregate.missing())
    return aggregate


def load_config_aggregate(endpoint: Optional[str] = None) -> ConfigAggregate:
    """Blocking wrapper for the Streamlit script thread."""
    return asyncio.run(fetch_config_aggregate(endpoint))
