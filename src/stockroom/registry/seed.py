"""Sample records for populating a fresh registry."""

from stockroom.domain import logger
from stockroom.item.item import Category

SAMPLE_ITEMS = [
    ("HA56Y3", "Mahogany door, 240cm", 34, 541, Category.DOORS, "Bendell", 14.35, 1.02, 2.40, "Brown"),
    ("WE2785", "Small circular window", 58, 784, Category.WINDOWS, "Dynamik", 3.56, 0.5, 0.5, "Chrome"),
    ("G15BF8", "Bathroom tiles, 22-pack", 4, 1061, Category.FLOORS, "Bendell", 3.94, 0.098, 0.198, "Grey"),
    ("19FT65", "Mahogany door, 240cm", 96, 1207, Category.DOORS, "Ikea", 16.77, 1.02, 2.40, "Brown"),
    ("QW05ER", "Lawn chair in birch", 11, 1745, Category.WOOD, "Bendell", 9.9, 1.12, 2.0, "Brown"),
    ("FJ8I7T", "Designer door carved from willow", 18, 3508, Category.DOORS, "Heidal", 16.7, 1.02, 2.0, "Dark brown"),
    ("FW312V", "Birch floor planks, 10-pack", 179, 430, Category.WOOD, "Ikea", 7.4, 0.2, 1.0, "Beige"),
    ("5MN6L9", "Large window, 3x5 meters", 89, 4570, Category.WINDOWS, "Bendell", 16.7, 3.16, 5.16, "White"),
    ("P2YI2L", "Epoxy office desk in dark wood", 29, 9899, Category.TABLES, "Heidal", 16.7, 2.63, 1.38, "Dark brown"),
    ("P2YI2T", "Charger X4 Sofa", 35, 6045, Category.CHAIRS, "Bendell", 45.1, 2.52, 1.12, "Black"),
    ("BW9S24", "Maple planks, 2x4 inches", 526, 56, Category.WOOD, "Dynamik", 4.7, 0.1016, 1.0, "Brown"),
    ("BW3S24", "Birch planks, 2x4 inches", 474, 38, Category.WOOD, "Dynamik", 3.1, 0.1016, 1.0, "Beige"),
    ("BW4S24", "Oak planks, 2x4 inches", 533, 45, Category.WOOD, "Dynamik", 3.8, 0.1016, 1.0, "Brown"),
]


def seed_registry(registry):
    """Register every sample record in ``registry``.

    Fails with ``DuplicateItemNumberError`` if one of the sample item
    numbers is already taken.
    """
    for record in SAMPLE_ITEMS:
        registry.register_new_item(*record)

    logger.debug("registry_seeded", items=len(SAMPLE_ITEMS))
