from constructionwire_mcp.infrastructure.tools.constructionwire.catalog.schema_builders import (
    integer,
    pagination,
    string,
    tool,
)

_TASK_ID = {"taskId": integer("Task ID")}

TASKS_TOOLS = [
    tool("tasks_list", "List the current user's tasks.", "GET", "/2.0/tasks", pagination()),
    tool("tasks_get", "Get a task by ID.", "GET", "/2.0/tasks/{taskId}", _TASK_ID, ["taskId"]),
    tool(
        "tasks_create",
        "Create a task, optionally linked to a report, company or person.",
        "POST",
        "/2.0/tasks",
        {
            "Title": string("Task title"),
            "Description": string("Task description"),
            "DueDate": string("Due date (YYYY-MM-DD)"),
            "ReportId": integer("Report to link the task to"),
            "CompanyId": integer("Company to link the task to"),
            "NameId": integer("Person to link the task to"),
        },
        ["Title"],
    ),
    tool(
        "tasks_update",
        "Update a task.",
        "PATCH",
        "/2.0/tasks/{taskId}",
        {
            **_TASK_ID,
            "Title": string("New title"),
            "Description": string("New description"),
            "DueDate": string("New due date (YYYY-MM-DD)"),
            "Status": string("New status"),
        },
        ["taskId"],
    ),
    tool("tasks_delete", "Delete a task.", "DELETE", "/2.0/tasks/{taskId}", _TASK_ID, ["taskId"]),
]
