from pathlib import Path
from typing import Any
from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from ..constants.permissions import list_permissions, permission_string
from ..schemas import (
    PermissionAssignment,
    SubuserAssignment,
    SubuserPermission,
    SystemPermissions,
    ValidatedPermissions,
)
from ..validation import is_wildcard, validate_permissions

router = APIRouter()

template_dir = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(template_dir))
templates.env.globals["permission_string"] = permission_string
templates.env.globals["is_wildcard"] = is_wildcard


@router.get("", response_model=SystemPermissions)
async def system_permissions() -> SystemPermissions:
    return SystemPermissions.from_registry()


@router.get("/form", response_class=HTMLResponse)
async def permissions_form(request: Request) -> HTMLResponse:
    granted = set(request.query_params.getlist("granted"))
    return templates.TemplateResponse(
        request,
        "permissions.html",
        {
            "categories": list_permissions(),
            "granted": granted,
        },
    )


@router.post("/validate", response_model=ValidatedPermissions)
async def validate_assignment(payload: PermissionAssignment) -> ValidatedPermissions:
    return ValidatedPermissions(permissions=validate_permissions(payload.permissions))


@router.post("/assignments")
async def subuser_assignments(payload: SubuserAssignment) -> dict[str, Any]:
    permissions = validate_permissions(payload.permissions)
    return {
        "object": "list",
        "data": [
            SubuserPermission(subuser_id=payload.subuser_id, permission=permission).to_api()
            for permission in permissions
        ],
    }
