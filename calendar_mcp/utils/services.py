"""
Service Caching Module

This module provides cached Calendar service instances so that repeated tool
calls for the same user do not rebuild the API client every time.
"""

import threading
from collections import OrderedDict
from typing import Optional
from googleapiclient.discovery import build, Resource
from google.oauth2.credentials import Credentials

from calendar_mcp.utils.logger import get_logger

logger = get_logger(__name__)

# Several users may be served by one process, so services are cached per token
MAX_CACHED_SERVICES = 32

# Thread lock for cache access
_cache_lock = threading.Lock()

# Cached service instances keyed by credentials hash
_calendar_services: "OrderedDict[int, Resource]" = OrderedDict()


def _get_credentials_hash(credentials: Credentials) -> int:
    """
    Get a hash of the credentials token for cache invalidation.

    Args:
        credentials: The Google OAuth credentials.

    Returns:
        int: A hash of the credentials token.
    """
    return hash((credentials.token, credentials.refresh_token))


def get_calendar_service(credentials: Credentials) -> Resource:
    """
    Get a cached Calendar API service instance.

    The service is cached per access token and reused across calls. When the
    cache is full the least recently used service is dropped.

    Args:
        credentials: The Google OAuth credentials.

    Returns:
        Resource: The Calendar API service instance.
    """
    with _cache_lock:
        cred_hash = _get_credentials_hash(credentials)
        service: Optional[Resource] = _calendar_services.get(cred_hash)
        if service is None:
            logger.debug("Creating new Calendar service instance")
            service = build("calendar", "v3", credentials=credentials, cache_discovery=False)
            _calendar_services[cred_hash] = service
            while len(_calendar_services) > MAX_CACHED_SERVICES:
                _calendar_services.popitem(last=False)
        else:
            _calendar_services.move_to_end(cred_hash)

        return service


def clear_service_cache() -> None:
    """
    Clear all cached service instances.

    This should be called when stored tokens are replaced or removed.
    """
    with _cache_lock:
        _calendar_services.clear()
        logger.debug("Cleared service cache")
