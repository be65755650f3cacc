"""Registry — the in-memory keyed store of Items.

The registry exclusively owns the Items it stores. Every accessor hands out
clones, so callers can never mutate registry state through a returned
object; mutations go through the registry's own operations, which validate
first and only then write.

Access to the underlying map is serialised with a re-entrant lock, so a
registry can be shared between threads of a host application.
"""

import threading

from stockroom.domain import logger
from stockroom.exceptions import (
    DuplicateItemNumberError,
    InvalidArgumentError,
    InvalidStockStateError,
    ItemNotFoundError,
)
from stockroom.item.item import Item, render_items_table
from stockroom.registry.seed import seed_registry

EMPTY_TABLE = "[Empty]"


class Registry:
    """Item store keyed by item number."""

    DEFAULT_DECIMAL_PLACES = 2

    def __init__(self):
        self._items: dict[str, Item] = {}
        self._lock = threading.RLock()

    def __len__(self):
        with self._lock:
            return len(self._items)

    def __contains__(self, item_number):
        return self.item_number_taken(item_number)

    def __str__(self):
        return self.render_table(self.DEFAULT_DECIMAL_PLACES)

    # -------------------------------------------------------------------
    # Registration and removal
    # -------------------------------------------------------------------
    def register_new_item(
        self,
        item_number,
        description,
        amount_in_storage,
        price,
        category,
        brand,
        weight,
        width,
        length,
        color,
        price_discount=0.0,
    ):
        """Register a new item type under an unused item number."""
        with self._lock:
            if item_number in self._items:
                raise DuplicateItemNumberError(item_number)

            item = Item.create(
                item_number=item_number,
                description=description,
                amount_in_storage=amount_in_storage,
                price=price,
                category=category,
                brand=brand,
                weight=weight,
                width=width,
                length=length,
                color=color,
                price_discount=price_discount,
            )
            self._items[item_number] = item

        logger.debug("item_registered", item_number=item_number, amount_in_storage=amount_in_storage)

    def fill_with_sample_data(self):
        """Populate the registry with the fixed sample records."""
        seed_registry(self)

    def delete_item_entry(self, item_number):
        """Remove an item. Returns True if an entry was removed."""
        with self._lock:
            removed = self._items.pop(item_number, None) is not None

        if removed:
            logger.debug("item_deleted", item_number=item_number)
        return removed

    # -------------------------------------------------------------------
    # Stock quantity
    # -------------------------------------------------------------------
    def change_amount_in_storage(self, item_number, delta):
        """Add ``delta`` (positive or negative) to the stored amount."""
        with self._lock:
            item = self._get_item_ref(item_number)
            previous = item.amount_in_storage
            new_amount = previous + delta
            if new_amount < 0:
                raise InvalidStockStateError(
                    f"Cannot withdraw {-delta} units of {item_number}: only {previous} in storage"
                )
            item.set_amount_in_storage(new_amount)

        logger.debug(
            "stock_changed",
            item_number=item_number,
            previous_amount=previous,
            new_amount=new_amount,
        )

    def increase_amount_in_storage(self, item_number, amount):
        if amount < 0:
            raise InvalidArgumentError("Amount must be a positive value")
        self.change_amount_in_storage(item_number, amount)

    def decrease_amount_in_storage(self, item_number, amount):
        if amount < 0:
            raise InvalidArgumentError("Amount must be a positive value")
        self.change_amount_in_storage(item_number, -amount)

    # -------------------------------------------------------------------
    # Item attributes
    # -------------------------------------------------------------------
    def set_item_price(self, item_number, price):
        with self._lock:
            self._get_item_ref(item_number).set_price(price)
        logger.debug("item_price_changed", item_number=item_number, price=price)

    def set_item_discount(self, item_number, percent_off):
        with self._lock:
            self._get_item_ref(item_number).set_discount(percent_off)
        logger.debug("item_discount_changed", item_number=item_number, price_discount=percent_off)

    def set_item_description(self, item_number, description):
        with self._lock:
            self._get_item_ref(item_number).set_description(description)
        logger.debug("item_description_changed", item_number=item_number)

    # -------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------
    def get_item(self, item_number):
        """Return a copy of the item stored under ``item_number``."""
        with self._lock:
            return self._get_item_ref(item_number).clone()

    def get_items(self, item_numbers):
        """Return copies of the requested items, in the order requested."""
        with self._lock:
            return [self._get_item_ref(item_number).clone() for item_number in item_numbers]

    def get_all(self):
        with self._lock:
            return [item.clone() for item in self._items.values()]

    def item_number_taken(self, item_number):
        with self._lock:
            return item_number in self._items

    # -------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------
    def search_by_item_number(self, term):
        """Item numbers containing ``term``, ignoring case."""
        needle = term.lower()
        with self._lock:
            return [key for key in self._items if needle in key.lower()]

    def search_by_description(self, term):
        """Item numbers of items whose description contains ``term``, ignoring case."""
        needle = term.lower()
        with self._lock:
            return [key for key, item in self._items.items() if needle in item.description.lower()]

    # -------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------
    def render_table(self, decimal_places):
        """Render every stored item as an aligned table, or ``[Empty]``."""
        if decimal_places < 0:
            raise InvalidArgumentError("decimal_places must not be negative")

        with self._lock:
            table = render_items_table(list(self._items.values()), decimal_places)
        return table if table is not None else EMPTY_TABLE

    # -------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------
    def _get_item_ref(self, item_number):
        try:
            return self._items[item_number]
        except KeyError:
            raise ItemNotFoundError(item_number) from None
