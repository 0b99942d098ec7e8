"""Testing – builders and Hypothesis strategies for contact records."""
from callmemaybe.testing.builders import Builder, PersonBuilder
from callmemaybe.testing.strategies import person_strategy, query_value_strategy

__all__ = ["Builder", "PersonBuilder", "person_strategy", "query_value_strategy"]
