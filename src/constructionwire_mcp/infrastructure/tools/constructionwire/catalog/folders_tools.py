from constructionwire_mcp.infrastructure.tools.constructionwire.catalog.schema_builders import (
    integer,
    pagination,
    string,
    tool,
)

_FOLDER_ID = {"folderId": integer("Folder ID")}
_ITEM = {
    "ItemType": string("Type of item stored in the folder", enum=["Report", "Company", "Person"]),
    "ItemId": integer("ID of the report, company or person"),
}

FOLDERS_TOOLS = [
    tool("folders_list", "List the current user's folders.", "GET", "/2.0/folders", pagination()),
    tool("folders_get", "Get a folder by ID.", "GET", "/2.0/folders/{folderId}", _FOLDER_ID, ["folderId"]),
    tool(
        "folders_create",
        "Create a folder.",
        "POST",
        "/2.0/folders",
        {"Name": string("Folder name"), "Description": string("Folder description")},
        ["Name"],
    ),
    tool(
        "folders_update",
        "Rename a folder or change its description.",
        "PATCH",
        "/2.0/folders/{folderId}",
        {**_FOLDER_ID, "Name": string("New folder name"), "Description": string("New folder description")},
        ["folderId"],
    ),
    tool("folders_delete", "Delete a folder.", "DELETE", "/2.0/folders/{folderId}", _FOLDER_ID, ["folderId"]),
    tool(
        "folders_items",
        "List the items saved in a folder.",
        "GET",
        "/2.0/folders/{folderId}/items",
        {**_FOLDER_ID, **pagination()},
        ["folderId"],
    ),
    tool(
        "folders_add_item",
        "Save a report, company or person to a folder.",
        "POST",
        "/2.0/folders/{folderId}/items",
        {**_FOLDER_ID, **_ITEM},
        ["folderId", "ItemType", "ItemId"],
    ),
    tool(
        "folders_remove_item",
        "Remove an item from a folder.",
        "DELETE",
        "/2.0/folders/{folderId}/items",
        {**_FOLDER_ID, **_ITEM},
        ["folderId", "ItemType", "ItemId"],
    ),
]
