"""Printing bounded context: shops, students and print orders.

Students place print orders with shops; shopkeepers publish price catalogs,
toggle their availability and move each order to a terminal status.
"""

from protean.domain import Domain

from printing.utils.logging import configure_logging, get_logger

configure_logging(log_dir="logs", log_file_prefix="printz")

logger = get_logger(__name__)

# Domain Composition Root
printing = Domain(name="printing")
