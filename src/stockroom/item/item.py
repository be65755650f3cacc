"""Item aggregate — one stocked item type and the quantity held of it.

An Item represents a number of identical physical goods, identified by a
unique item number. Besides the amount in storage it carries the commercial
attributes (price, discount) and the physical ones (weight, dimensions,
colour) of a single unit.

Prices are whole amounts in the minor currency unit. The discount is a
percentage in [0, 100] and never alters the stored price; it only affects
``price_after_discount()``.
"""

from decimal import Decimal
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Float, Integer, String, Text

from stockroom.domain import stockroom
from stockroom.exceptions import InvalidArgumentError


class Category(Enum):
    DOORS = "Doors"
    WINDOWS = "Windows"
    FLOORS = "Floors"
    WOOD = "Wood"
    TABLES = "Tables"
    CHAIRS = "Chairs"


TEXT_FIELDS = ("item_number", "description", "brand", "color")
COUNT_FIELDS = ("amount_in_storage", "price")
MEASURE_FIELDS = ("weight", "width", "length")

# Attribute order used for construction, cloning and table columns.
ITEM_FIELDS = (
    "item_number",
    "description",
    "amount_in_storage",
    "price",
    "price_discount",
    "category",
    "brand",
    "weight",
    "width",
    "length",
    "color",
)

# (template, alignment) per table column, in ITEM_FIELDS order
ROW_LAYOUT = (
    ("{} - ", ">"),
    ("{} : [", "<"),
    ("{} units| ", ">"),
    ("{} kr| ", ">"),
    ("{} % off| ", ">"),
    ("{}| ", ">"),
    ("{}| ", ">"),
    ("{} kg| ", ">"),
    ("w={}m| ", ">"),
    ("l={}m| ", ">"),
    ("{}]", ">"),
)


def _is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@stockroom.aggregate
class Item:
    """A quantity of identical goods stocked under one item number."""

    item_number = Text(identifier=True, required=True)
    description = Text(required=True)
    amount_in_storage = Integer(required=True, min_value=0)
    price = Integer(required=True, min_value=0)
    price_discount = Float(default=0.0, min_value=0.0, max_value=100.0)
    category = String(required=True, choices=Category)
    brand = Text(required=True)
    weight = Float(required=True, min_value=0.0)
    width = Float(required=True, min_value=0.0)
    length = Float(required=True, min_value=0.0)
    color = Text(required=True)

    @invariant.post
    def text_fields_must_not_be_blank(self):
        errors = {}
        for name in TEXT_FIELDS:
            value = getattr(self, name)
            if value is not None and not value.strip():
                errors[name] = [f"{name} cannot be blank"]
        if errors:
            raise ValidationError(errors)

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def create(
        cls,
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
        """Validate the full attribute set and build a new Item.

        Every offending field is reported in a single ``ValidationError``,
        keyed by field name.
        """
        values = {
            "item_number": item_number,
            "description": description,
            "amount_in_storage": amount_in_storage,
            "price": price,
            "price_discount": price_discount,
            "category": category.value if isinstance(category, Category) else category,
            "brand": brand,
            "weight": weight,
            "width": width,
            "length": length,
            "color": color,
        }

        errors = {}
        for name, value in values.items():
            try:
                cls.validate_field(name, value)
            except ValidationError as exc:
                errors.update(exc.messages)
        if errors:
            raise ValidationError(errors)

        return cls(**values)

    # -------------------------------------------------------------------
    # Field rules
    # -------------------------------------------------------------------
    @classmethod
    def validate_field(cls, name, value):
        """Check a single attribute value against its rule.

        This is the same rule construction and the setters apply, so form
        front-ends can use it for live validation before submitting.
        """
        if name in TEXT_FIELDS:
            if not isinstance(value, str) or not value.strip():
                raise ValidationError({name: [f"{name} cannot be empty"]})
        elif name in COUNT_FIELDS:
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValidationError({name: [f"{name} must be a whole number"]})
            if value < 0:
                raise ValidationError({name: [f"{name} cannot be negative"]})
        elif name in MEASURE_FIELDS:
            if not _is_number(value):
                raise ValidationError({name: [f"{name} must be a number"]})
            if value < 0:
                raise ValidationError({name: [f"{name} cannot be negative"]})
        elif name == "price_discount":
            if not _is_number(value):
                raise ValidationError({name: ["Discount must be a number"]})
            if value < 0 or value > 100:
                raise ValidationError({name: ["Discount must be between 0 and 100 percent"]})
        elif name == "category":
            try:
                Category(value.value if isinstance(value, Category) else value)
            except ValueError:
                raise ValidationError({name: [f"Unknown category: {value}"]}) from None
        else:
            raise ValidationError({name: ["Unknown item attribute"]})

    # -------------------------------------------------------------------
    # Mutators
    # -------------------------------------------------------------------
    def set_description(self, description):
        self.validate_field("description", description)
        self.description = description

    def set_amount_in_storage(self, amount_in_storage):
        self.validate_field("amount_in_storage", amount_in_storage)
        self.amount_in_storage = amount_in_storage

    def set_price(self, price):
        self.validate_field("price", price)
        self.price = price

    def set_discount(self, discount):
        """Set the discount, in percent. A discount of 0 disables it."""
        self.validate_field("price_discount", discount)
        self.price_discount = discount

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    @property
    def category_kind(self):
        """The item's category as a ``Category`` member.

        ``category`` holds the stored value; read categories through this.
        """
        return Category(self.category)

    def price_after_discount(self):
        """Price reduced by the discount, truncated to a whole amount."""
        remaining = Decimal(100) - Decimal(str(self.price_discount))
        return int(self.price * remaining / 100)

    def clone(self):
        """Return an independent copy of this item, discount included."""
        return type(self)(**{name: getattr(self, name) for name in ITEM_FIELDS})

    # -------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------
    def field_strings(self, decimal_places):
        """Every attribute as a bare string, in table column order."""
        return [
            self.item_number,
            self.description,
            str(self.amount_in_storage),
            str(self.price),
            f"{self.price_discount:.{decimal_places}f}",
            self.category_kind.value,
            self.brand,
            f"{self.weight:.{decimal_places}f}",
            f"{self.width:.{decimal_places}f}",
            f"{self.length:.{decimal_places}f}",
            self.color,
        ]

    def render_row(self, column_widths, decimal_places):
        """Render this item as one table row padded to ``column_widths``."""
        if decimal_places < 0:
            raise InvalidArgumentError("decimal_places must not be negative")
        if len(column_widths) != len(ROW_LAYOUT):
            raise InvalidArgumentError(f"Expected {len(ROW_LAYOUT)} column widths, got {len(column_widths)}")

        cells = self.field_strings(decimal_places)
        return "".join(
            template.format(f"{cell:{align}{width}}")
            for (template, align), cell, width in zip(ROW_LAYOUT, cells, column_widths)
        )

    def render_full(self, decimal_places=2):
        """Render this item as a single-row table."""
        return render_items_table([self], decimal_places)

    def render_short(self):
        return f"{self.description}   [{self.item_number}]"

    def __str__(self):
        return self.render_short()


def render_items_table(items, decimal_places):
    """Render ``items`` as rows with aligned columns.

    Each column is padded to the widest value found in that column across
    all rows. Returns None when ``items`` is empty.
    """
    if decimal_places < 0:
        raise InvalidArgumentError("decimal_places must not be negative")
    if not items:
        return None

    widths = [0] * len(ROW_LAYOUT)
    for item in items:
        for column, cell in enumerate(item.field_strings(decimal_places)):
            widths[column] = max(widths[column], len(cell))

    return "\n".join(item.render_row(widths, decimal_places) for item in items)
