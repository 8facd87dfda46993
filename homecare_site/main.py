"""FastAPI app: GET /, POST /intake, GET /health, GET /version."""
from datetime import datetime, timezone

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse

from homecare_site.config import site_config
from homecare_site.providers.form_relay import FormRelayProvider
from homecare_site.schemas import (
    ErrorState,
    HealthResponse,
    IntakeFields,
    VersionResponse,
)
from homecare_site.services.intake import IntakeSession
from homecare_site.services.page import render_page
from homecare_site.utils.logging_config import logger, setup_logging

setup_logging()

app = FastAPI(
    title="Home Care Agency Site",
    description="Marketing page and client intake relay for a home-care agency",
    version="1.0.0",
)

form_relay = FormRelayProvider(site_config.relay_endpoint)


def _utc_iso() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def _wants_json(request: Request) -> bool:
    return "application/json" in request.headers.get("accept", "")


@app.get("/", response_class=HTMLResponse)
async def home() -> HTMLResponse:
    """Render the page with an idle, empty intake form."""
    return HTMLResponse(render_page(site_config))


@app.post("/intake")
async def submit_intake(
    request: Request,
    name: str = Form(..., min_length=1),
    phone: str = Form(..., min_length=1),
    email: str = Form(""),
    message: str = Form(""),
):
    """
    Relay one intake request. Browsers get the re-rendered page; clients
    sending Accept: application/json get the terminal submission state.
    """
    if not name.strip() or not phone.strip():
        raise HTTPException(status_code=400, detail="missing_required_fields")
    session = IntakeSession(
        form_relay,
        site_config.intake_subject,
        IntakeFields(name=name, phone=phone, email=email, message=message),
    )
    state = await session.submit()
    logger.info("Intake request settled phase=%s", state.phase)

    if _wants_json(request):
        status_code = 502 if isinstance(state, ErrorState) else 200
        return JSONResponse(status_code=status_code, content=state.model_dump())
    return HTMLResponse(render_page(site_config, state, session.fields))


@app.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Return status and timestamp."""
    return HealthResponse(status="ok", timestamp=_utc_iso())


@app.get("/version", response_model=VersionResponse)
async def version() -> VersionResponse:
    """Return version."""
    return VersionResponse(version="1.0.0")


@app.exception_handler(HTTPException)
async def http_exception_handler(request: object, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail, "status_code": exc.status_code},
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("homecare_site.main:app", host="0.0.0.0", port=8080, reload=True)
