"""Model – contact records, the displayed list and the model facade."""
from callmemaybe.model.displayed import DisplayedList, ensure_count
from callmemaybe.model.manager import ContactModel
from callmemaybe.model.person import Gender, Person, PersonComparator, PersonPredicate

__all__ = [
    "ContactModel",
    "DisplayedList",
    "Gender",
    "Person",
    "PersonComparator",
    "PersonPredicate",
    "ensure_count",
]
