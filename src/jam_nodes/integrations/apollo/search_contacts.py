"""
Search Contacts Node

Searches for contacts with Apollo and enriches them to reveal emails.
Requires ``context.services.apollo``.

Process:
1. Search Apollo for contacts matching the criteria
2. Enrich each contact to reveal its email address
3. Return only contacts with an email
"""

import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from ...core.execution import error_message
from ...core.services import ServiceNotConfiguredError
from ...core.types import (
    NodeCategory,
    NodeExecutionContext,
    NodeExecutionResult,
    define_node,
)

logger = logging.getLogger(__name__)

MAX_CONTACTS = 100

# Input keys forwarded to the Apollo search
_SEARCH_FIELDS = (
    "person_titles",
    "person_locations",
    "organization_locations",
    "employee_ranges",
    "keywords",
    "include_similar_titles",
    "person_seniorities",
    "technologies",
    "industry_tag_ids",
    "departments",
)


class SearchContactsInput(BaseModel):
    person_titles: Optional[List[str]] = None
    person_locations: Optional[List[str]] = None
    organization_locations: Optional[List[str]] = None
    employee_ranges: Optional[List[str]] = None  # e.g. "1-10", "11-50"
    keywords: Optional[str] = None
    limit: int = 10
    include_similar_titles: Optional[bool] = None
    person_seniorities: Optional[List[str]] = None
    technologies: Optional[List[str]] = None
    industry_tag_ids: Optional[List[str]] = None
    departments: Optional[List[str]] = None


class Contact(BaseModel):
    id: str
    name: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: str
    title: Optional[str] = None
    company: str
    linkedin_url: Optional[str] = None
    location: Optional[str] = None


class SearchContactsOutput(BaseModel):
    contacts: List[Contact]
    total_found: int


def _to_contact(enriched: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": enriched["id"],
        "name": enriched.get("name", ""),
        "first_name": enriched.get("first_name"),
        "last_name": enriched.get("last_name"),
        "email": enriched["email"],
        "title": enriched.get("title"),
        "company": enriched.get("company") or "Unknown",
        "linkedin_url": enriched.get("linkedin_url") or None,
        "location": enriched.get("location") or None,
    }


async def _execute(input: Dict[str, Any], context: NodeExecutionContext) -> NodeExecutionResult:
    try:
        apollo = context.services.require("apollo")

        criteria = {k: input.get(k) for k in _SEARCH_FIELDS if input.get(k) is not None}
        criteria["limit"] = min(input.get("limit") or 10, MAX_CONTACTS)

        results = await apollo.search_contacts(criteria)
        if not results:
            return NodeExecutionResult.ok({"contacts": [], "total_found": 0})

        contacts = []
        for found in results:
            contact_id = found.get("id")
            if not contact_id:
                continue
            try:
                enriched = await apollo.enrich_contact(contact_id)
            except Exception as e:
                logger.warning(f"[search_contacts] Skipping {contact_id}: {e}")
                continue
            if enriched.get("email"):
                contacts.append(_to_contact(enriched))

        if context.services.has("notifications") and contacts:
            await context.services.notifications.send(
                user_id=context.user_id,
                title="Contacts Found",
                message=f"Found {len(contacts)} contacts with email",
                data={"total_found": len(results), "with_email": len(contacts)},
            )

        return NodeExecutionResult.ok({"contacts": contacts, "total_found": len(results)})

    except ServiceNotConfiguredError as e:
        return NodeExecutionResult.fail(str(e))
    except Exception as e:
        logger.exception(f"[search_contacts] Error: {e}")
        return NodeExecutionResult.fail(error_message(e))


search_contacts_node = define_node(
    type="search_contacts",
    name="Search Contacts",
    description="Search for contacts using Apollo.io People Search API",
    category=NodeCategory.INTEGRATION,
    input_shape=SearchContactsInput,
    output_shape=SearchContactsOutput,
    executor=_execute,
    capabilities={
        "supports_enrichment": True,
        "supports_bulk_actions": True,
        "supports_rerun": True,
    },
    estimated_duration=5,
)
