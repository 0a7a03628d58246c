from constructionwire_mcp.infrastructure.tools.constructionwire.catalog.schema_builders import (
    follow_tools,
    integer,
    integer_list,
    pagination,
    sorting,
    string,
    string_list,
    tool,
)

_REPORT_ID = {"reportId": integer("Construction project report ID")}
_QUESTION_ID = {**_REPORT_ID, "questionId": integer("Question ID")}

_REPORT_FILTERS = {
    **pagination(),
    **sorting(),
    "ReportId": integer_list("Filter by report IDs"),
    "ReportType": integer_list("Filter by report type IDs"),
    "City": string("Project city"),
    "State": string_list("Project state abbreviations, e.g. CA"),
    "PostalCode": string("Project postal code"),
    "County": string_list("Project counties"),
    "Region": string_list("Project regions"),
    "Country": string_list("Project countries"),
    "ProjectStage": integer_list("Project stage IDs"),
    "ProjectType": integer_list("Project type IDs"),
    "BuildingUse": integer_list("Building use IDs"),
    "Keyword": string("Full-text keyword search"),
    "PublishedUpdatedDateMin": string("Earliest published/updated date (YYYY-MM-DD)"),
    "PublishedUpdatedDateMax": string("Latest published/updated date (YYYY-MM-DD)"),
    "PublishedUpdatedDateByDayCount": integer("Only reports published/updated in the last N days"),
    "UpdatedDateMin": string("Earliest updated date (YYYY-MM-DD)"),
    "UpdatedDateMax": string("Latest updated date (YYYY-MM-DD)"),
}

REPORTS_TOOLS = [
    tool("reports_list", "Search construction project reports.", "GET", "/2.0/reports", _REPORT_FILTERS),
    tool("reports_get", "Get a construction project report by ID.", "GET", "/2.0/reports/{reportId}", _REPORT_ID, ["reportId"]),
    tool("reports_facets", "Get facet counts for a report search.", "GET", "/2.0/reports/facets", _REPORT_FILTERS),
    tool("reports_files", "List files attached to a report.", "GET", "/2.0/reports/{reportId}/files", _REPORT_ID, ["reportId"]),
    tool(
        "reports_file",
        "Get one file attached to a report.",
        "GET",
        "/2.0/reports/{reportId}/files/{fileId}",
        {**_REPORT_ID, "fileId": integer("File ID")},
        ["reportId", "fileId"],
    ),
    tool("reports_notes", "List notes on a report.", "GET", "/2.0/reports/{reportId}/notes", _REPORT_ID, ["reportId"]),
    tool(
        "reports_note",
        "Get one note on a report.",
        "GET",
        "/2.0/reports/{reportId}/notes/{noteId}",
        {**_REPORT_ID, "noteId": integer("Note ID")},
        ["reportId", "noteId"],
    ),
    tool("reports_questions", "List questions asked about a report.", "GET", "/2.0/reports/{reportId}/questions", _REPORT_ID, ["reportId"]),
    tool(
        "reports_add_question",
        "Ask the research team a question about a report.",
        "POST",
        "/2.0/reports/{reportId}/questions",
        {**_REPORT_ID, "Question": string("Question text")},
        ["reportId", "Question"],
    ),
    tool(
        "reports_question",
        "Get one question asked about a report.",
        "GET",
        "/2.0/reports/{reportId}/questions/{questionId}",
        _QUESTION_ID,
        ["reportId", "questionId"],
    ),
    tool(
        "reports_answers",
        "List answers to a report question.",
        "GET",
        "/2.0/reports/{reportId}/questions/{questionId}/answers",
        _QUESTION_ID,
        ["reportId", "questionId"],
    ),
    tool(
        "reports_answer",
        "Get one answer to a report question.",
        "GET",
        "/2.0/reports/{reportId}/questions/{questionId}/answers/{answerId}",
        {**_QUESTION_ID, "answerId": integer("Answer ID")},
        ["reportId", "questionId", "answerId"],
    ),
    tool("reports_tasks", "List tasks linked to a report.", "GET", "/2.0/reports/{reportId}/tasks", _REPORT_ID, ["reportId"]),
    tool(
        "reports_task",
        "Get one task linked to a report.",
        "GET",
        "/2.0/reports/{reportId}/tasks/{taskId}",
        {**_REPORT_ID, "taskId": integer("Task ID")},
        ["reportId", "taskId"],
    ),
    tool(
        "reports_companies",
        "List companies involved in a report.",
        "GET",
        "/2.0/reports/{reportId}/companies",
        {**_REPORT_ID, **pagination()},
        ["reportId"],
    ),
    tool(
        "reports_people",
        "List people involved in a report.",
        "GET",
        "/2.0/reports/{reportId}/people",
        {**_REPORT_ID, **pagination()},
        ["reportId"],
    ),
    *follow_tools("reports", "report"),
]
