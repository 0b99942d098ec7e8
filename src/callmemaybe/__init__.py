"""
callmemaybe – Contact query and filter engine.

Import path convention::

    from callmemaybe.kernel.errors import ValidationError
    from callmemaybe.model import ContactModel, Person
    from callmemaybe.query import CombinationMode, FieldTag, build_query
    from callmemaybe.logic.commands import FilterCommand, FindAnyCommand
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
