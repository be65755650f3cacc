"""Failures reported by the stockroom registry.

Field-level problems are reported with protean's ``ValidationError``; the
types below cover the remaining failure kinds.
"""

from protean.exceptions import InvalidOperationError, ObjectNotFoundError


class DuplicateItemNumberError(InvalidOperationError):
    """An item with this item number is already registered."""

    def __init__(self, item_number):
        self.item_number = item_number
        self.message = f"The item number {item_number} is already in use"
        super().__init__(self.message)

    def __str__(self):
        return self.message


class ItemNotFoundError(ObjectNotFoundError):
    """No item is registered under this item number."""

    def __init__(self, item_number):
        self.item_number = item_number
        self.message = f"No items in this registry with this item number: {item_number}"
        super().__init__(self.message)

    def __str__(self):
        return self.message


class InvalidStockStateError(InvalidOperationError):
    """The operation would leave an item in an impossible state."""

    def __init__(self, reason):
        self.reason = reason
        super().__init__(reason)

    def __str__(self):
        return self.reason


class InvalidArgumentError(ValueError):
    """An argument to a registry call is out of range."""

    def __init__(self, reason):
        self.reason = reason
        super().__init__(reason)
