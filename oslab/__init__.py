"""Operating-system lab simulations: scheduling, paging, allocation, disk seeks, deadlock avoidance and batch machines."""

__version__ = "0.1.0"