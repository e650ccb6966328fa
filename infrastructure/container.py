"""
Dependency Injection Container
================================

Builds and caches the infrastructure adapters used by one storefront process.
The container is created and owned by the composition root (the storefront
context middleware); there is no module-level instance.

Usage:
    container = ServiceContainer()

    data = container.data()
    auth = container.auth()      # fresh instance per request context
    storage = container.storage()
"""

import logging
import threading
from typing import Optional, Set

from .auth import AuthFactory, AuthServiceInterface, MockUserDirectory
from .chat import ChatFactory, ChatProviderInterface
from .data import DataFactory, DataServiceInterface
from .storage import StorageFactory, StorageInterface

logger = logging.getLogger(__name__)


class InFlightRegistry:
    """
    Thread-safe set of keys with an operation in progress.

    ``acquire`` returns False when the key is already held.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._keys: Set[str] = set()

    def acquire(self, key: str) -> bool:
        with self._lock:
            if key in self._keys:
                return False
            self._keys.add(key)
            return True

    def release(self, key: str) -> None:
        with self._lock:
            self._keys.discard(key)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._keys


class ServiceContainer:
    """
    Service container for infrastructure dependencies.

    Implements lazy initialization and caching of the stateless adapters (data,
    storage, chat). Auth services carry per-session listeners, so ``auth()``
    returns a new instance on every call; mock instances share one account
    directory so tokens survive across requests.
    """

    def __init__(self, backends: Optional[dict] = None):
        """
        Args:
            backends: Optional overrides of settings.INFRASTRUCTURE
                      (AUTH_BACKEND, DATA_BACKEND, STORAGE_BACKEND, CHAT_BACKEND)
        """
        self._backends = dict(backends or {})
        self._data: Optional[DataServiceInterface] = None
        self._storage: Optional[StorageInterface] = None
        self._chat: Optional[ChatProviderInterface] = None
        self._user_directory: Optional[MockUserDirectory] = None
        self.checkouts_in_flight = InFlightRegistry()
        logger.info("Service container initialized")

    def _backend(self, key: str) -> Optional[str]:
        return self._backends.get(key)

    def user_directory(self) -> MockUserDirectory:
        """Account registry backing the mock auth service."""
        if self._user_directory is None:
            self._user_directory = MockUserDirectory()
        return self._user_directory

    def auth(self) -> AuthServiceInterface:
        """
        Get a new auth service instance.

        Returns:
            AuthServiceInterface implementation (not cached)
        """
        return AuthFactory.create(self._backend("AUTH_BACKEND"), directory=self.user_directory())

    def data(self) -> DataServiceInterface:
        """
        Get row storage instance.

        Returns:
            DataServiceInterface implementation (cached)
        """
        if self._data is None:
            self._data = DataFactory.create(self._backend("DATA_BACKEND"))
            logger.debug(f"Created data service: {type(self._data).__name__}")
        return self._data

    def storage(self) -> StorageInterface:
        """
        Get object storage instance.

        Returns:
            StorageInterface implementation (cached)
        """
        if self._storage is None:
            self._storage = StorageFactory.create(self._backend("STORAGE_BACKEND"))
            logger.debug(f"Created storage service: {type(self._storage).__name__}")
        return self._storage

    def chat(self) -> ChatProviderInterface:
        """
        Get chat provider instance.

        Returns:
            ChatProviderInterface implementation (cached)
        """
        if self._chat is None:
            self._chat = ChatFactory.create(self._backend("CHAT_BACKEND"))
            logger.debug(f"Created chat provider: {type(self._chat).__name__}")
        return self._chat

    def reset(self):
        """
        Reset all cached service instances.

        Useful for testing or when switching between environments.
        """
        self._data = None
        self._storage = None
        self._chat = None
        self._user_directory = None
        self.checkouts_in_flight = InFlightRegistry()
        logger.info("Service container reset")

    def configure_for_testing(self):
        """Switch every adapter to its in-memory mock."""
        self._backends = {
            "AUTH_BACKEND": "mock",
            "DATA_BACKEND": "mock",
            "STORAGE_BACKEND": "mock",
            "CHAT_BACKEND": "mock",
        }
        self.reset()
        logger.info("Service container configured for testing")
