from constructionwire_mcp.infrastructure.tools.constructionwire.catalog.schema_builders import (
    integer,
    pagination,
    string,
    tool,
)

_NOTE_ID = {"noteId": integer("Note ID")}

NOTES_TOOLS = [
    tool("notes_list", "List the current user's notes.", "GET", "/2.0/notes", pagination()),
    tool("notes_get", "Get a note by ID.", "GET", "/2.0/notes/{noteId}", _NOTE_ID, ["noteId"]),
    tool(
        "notes_create",
        "Create a note, optionally attached to a report, company or person.",
        "POST",
        "/2.0/notes",
        {
            "Title": string("Note title"),
            "Body": string("Note body"),
            "ReportId": integer("Report to attach the note to"),
            "CompanyId": integer("Company to attach the note to"),
            "NameId": integer("Person to attach the note to"),
        },
        ["Title"],
    ),
    tool(
        "notes_update",
        "Update a note's title or body.",
        "PATCH",
        "/2.0/notes/{noteId}",
        {**_NOTE_ID, "Title": string("New title"), "Body": string("New body")},
        ["noteId"],
    ),
    tool("notes_delete", "Delete a note.", "DELETE", "/2.0/notes/{noteId}", _NOTE_ID, ["noteId"]),
]
