"""Stockroom bounded context — warehouse item registry.

Keeps an in-memory register of stocked item types, each identified by a
unique item number, with quantity and pricing operations over them.
"""

from protean.domain import Domain

from stockroom.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging(log_dir="logs")

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
stockroom = Domain(name="stockroom")
