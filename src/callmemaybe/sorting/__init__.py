"""Sorting – categories, comparators and the sort-and-limit pipeline."""
from callmemaybe.sorting.categories import Category
from callmemaybe.sorting.comparators import get_comparator
from callmemaybe.sorting.pipeline import SortableModel, sort_and_limit

__all__ = ["Category", "SortableModel", "get_comparator", "sort_and_limit"]
