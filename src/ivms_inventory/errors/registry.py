"""Error code and category registry for the inventory service."""

import threading
from typing import Any


class ErrorRegistry:
    """Singleton registry for all error codes and categories."""

    _instance = None
    _lock = threading.RLock()

    def __new__(cls) -> "ErrorRegistry":
        with cls._lock:
            if cls._instance is None:
                instance = super().__new__(cls)
                instance._categories = {}
                instance._codes = {}
                cls._instance = instance
            return cls._instance

    def get_category(self, name: str) -> Any:
        """Get or create a category.

        Args:
            name: The category name

        Returns:
            The ErrorCategory
        """
        with self._lock:
            if name not in self._categories:
                from ivms_inventory.errors.base import ErrorCategory

                self._categories[name] = ErrorCategory(name)
            return self._categories[name]

    def get_code(self, code: str, category_name: str) -> Any:
        """Get or create an error code within a category.

        Args:
            code: The error code
            category_name: The category name

        Returns:
            The ErrorCode
        """
        with self._lock:
            if code not in self._codes:
                from ivms_inventory.errors.base import ErrorCode

                self._codes[code] = ErrorCode(code, self.get_category(category_name))
            return self._codes[code]


# Single instance shared by every error module
registry = ErrorRegistry()
