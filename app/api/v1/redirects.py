from fastapi import Request
from fastapi.responses import RedirectResponse


def redirect_to(request: Request, name: str, **path_params) -> RedirectResponse:
    # 303 so a DELETE/POST/PUT is followed by a plain GET
    return RedirectResponse(request.app.url_path_for(name, **path_params), status_code=303)
