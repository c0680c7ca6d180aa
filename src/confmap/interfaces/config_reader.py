"""Config Reader Interface

This interface defines the read side of a configuration store. Components
that only need lookups should depend on IConfigReader rather than on a
concrete store, so a loaded store (or a test double) can be injected.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional


class IConfigReader(ABC):
    """Interface for typed configuration lookups"""

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Return the raw JSON value stored under a top-level key."""
        pass

    @abstractmethod
    def get_string(self, key: str) -> Optional[str]:
        """Return the value if it is a JSON string."""
        pass

    @abstractmethod
    def get_int64(self, key: str) -> Optional[int]:
        """Return the value if it is a JSON integer in the signed 64-bit range."""
        pass

    @abstractmethod
    def get_bool(self, key: str) -> Optional[bool]:
        """Return the value if it is a JSON boolean."""
        pass

    @abstractmethod
    def get_string_array(self, key: str) -> Optional[List[str]]:
        """Return the value if it is a JSON array made only of strings."""
        pass
