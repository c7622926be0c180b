"""FluentCRM tools: contacts, lists, tags and campaigns (``fluent-crm/v2``)."""

from __future__ import annotations

from ..models.fluent import (
    CreateCampaignInput,
    CreateContactInput,
    CreateSegmentInput,
    IdInput,
    ListCampaignsInput,
    ListContactsInput,
    SearchPageInput,
    SendCampaignInput,
    UpdateContactInput,
    UpdateSegmentInput,
)
from ..registry import DESTRUCTIVE, READ_ONLY, WRITE, ToolDescriptor
from .common import rest_tool

NAMESPACE = "fluent-crm/v2"


def _crud(resource: str, singular: str, list_model, create_model, update_model):
    """Descriptors and handlers for one FluentCRM collection."""
    route = f"{NAMESPACE}/{resource}"
    tools = [
        ToolDescriptor(
            name=f"fcrm_list_{resource}",
            description=f"List FluentCRM {resource} with pagination and search.",
            input_model=list_model,
            error_context=f"listing {resource}",
            annotations=READ_ONLY,
        ),
        ToolDescriptor(
            name=f"fcrm_get_{singular}",
            description=f"Get a FluentCRM {singular} by ID.",
            input_model=IdInput,
            error_context=f"getting {singular}",
            annotations=READ_ONLY,
        ),
        ToolDescriptor(
            name=f"fcrm_create_{singular}",
            description=f"Create a FluentCRM {singular}.",
            input_model=create_model,
            error_context=f"creating {singular}",
            annotations=WRITE,
        ),
        ToolDescriptor(
            name=f"fcrm_update_{singular}",
            description=f"Update a FluentCRM {singular}.",
            input_model=update_model,
            error_context=f"updating {singular}",
            annotations=WRITE,
        ),
        ToolDescriptor(
            name=f"fcrm_delete_{singular}",
            description=f"Delete a FluentCRM {singular}.",
            input_model=IdInput,
            error_context=f"deleting {singular}",
            annotations=DESTRUCTIVE,
        ),
    ]
    handlers = {
        f"fcrm_list_{resource}": rest_tool("GET", route),
        f"fcrm_get_{singular}": rest_tool("GET", f"{route}/{{id}}"),
        f"fcrm_create_{singular}": rest_tool("POST", route),
        f"fcrm_update_{singular}": rest_tool("PUT", f"{route}/{{id}}"),
        f"fcrm_delete_{singular}": rest_tool("DELETE", f"{route}/{{id}}"),
    }
    return tools, handlers


_contacts = _crud("contacts", "contact", ListContactsInput, CreateContactInput, UpdateContactInput)
_lists = _crud("lists", "list", SearchPageInput, CreateSegmentInput, UpdateSegmentInput)
_tags = _crud("tags", "tag", SearchPageInput, CreateSegmentInput, UpdateSegmentInput)

TOOLS = [
    *_contacts[0],
    *_lists[0],
    *_tags[0],
    ToolDescriptor(
        name="fcrm_list_campaigns",
        description="List FluentCRM email campaigns.",
        input_model=ListCampaignsInput,
        error_context="listing campaigns",
        annotations=READ_ONLY,
    ),
    ToolDescriptor(
        name="fcrm_get_campaign",
        description="Get a FluentCRM campaign by ID.",
        input_model=IdInput,
        error_context="getting campaign",
        annotations=READ_ONLY,
    ),
    ToolDescriptor(
        name="fcrm_create_campaign",
        description="Create a FluentCRM email campaign.",
        input_model=CreateCampaignInput,
        error_context="creating campaign",
        annotations=WRITE,
    ),
    ToolDescriptor(
        name="fcrm_send_campaign",
        description="Send a FluentCRM campaign, optionally to specific contacts only.",
        input_model=SendCampaignInput,
        error_context="sending campaign",
        annotations=WRITE,
    ),
]

HANDLERS = {
    **_contacts[1],
    **_lists[1],
    **_tags[1],
    "fcrm_list_campaigns": rest_tool("GET", f"{NAMESPACE}/campaigns"),
    "fcrm_get_campaign": rest_tool("GET", f"{NAMESPACE}/campaigns/{{id}}"),
    "fcrm_create_campaign": rest_tool("POST", f"{NAMESPACE}/campaigns"),
    "fcrm_send_campaign": rest_tool("POST", f"{NAMESPACE}/campaigns/{{id}}/send"),
}
