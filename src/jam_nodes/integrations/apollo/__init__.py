from .search_contacts import (
    Contact,
    SearchContactsInput,
    SearchContactsOutput,
    search_contacts_node,
)

__all__ = [
    "Contact",
    "SearchContactsInput",
    "SearchContactsOutput",
    "search_contacts_node",
]
