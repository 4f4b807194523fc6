"""
HashStoreInterface - Abstract interface for remote hash operations.

This module provides the HashStoreInterface abstract base class that allows
commands to work with any hash store implementation (Redis, Mock).
"""

from abc import ABC, abstractmethod
from typing import Dict


class HashStoreInterface(ABC):
    """
    Abstract interface for the remote hash holding one application's
    environment.

    An instance is bound to a single hash key. Implementations:
    - RedisHashStore (production, one connection per operation)
    - MockHashStore (testing without a server)

    Attributes:
        url: Address of the store
        key: Name of the hash
    """

    def __init__(self, url: str, key: str):
        self.url = url
        self.key = key

    @abstractmethod
    def read_all(self) -> Dict[str, str]:
        """
        Read every field of the hash.

        Returns:
            Point-in-time copy of the hash (empty if the key does not exist)

        Raises:
            StoreConnectionError: If the store is unreachable
            ProtocolError: If the reply is malformed or the key is not a hash
        """
        pass

    @abstractmethod
    def read_one(self, field: str) -> str:
        """
        Read a single field.

        Args:
            field: Field name

        Returns:
            The stored value, which may be the empty string

        Raises:
            NotFoundError: If the field does not exist
        """
        pass

    @abstractmethod
    def write_one(self, field: str, value: str) -> bool:
        """
        Write a single field, creating the hash if needed.

        Args:
            field: Field name
            value: Value to store

        Returns:
            True if the field did not exist before
        """
        pass

    @abstractmethod
    def delete_field(self, field: str, *fields: str) -> int:
        """
        Remove one or more fields.

        Args:
            field: Field name
            *fields: Additional field names removed in the same request

        Returns:
            Number of fields removed (0 if none existed)
        """
        pass

    @abstractmethod
    def delete_key(self) -> int:
        """
        Remove the whole hash.

        Returns:
            Number of keys removed (0 if the hash did not exist)
        """
        pass

    def __repr__(self):
        return f"{type(self).__name__}(url={self.url!r}, key={self.key!r})"
