"""Weather Dashboard: FastAPI adapter serving the projected view + controls."""

from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.responses import FileResponse, HTMLResponse
from pydantic import BaseModel

from weatherdash.app.session import DashboardSession
from weatherdash.ingest.geolocation import FixedPosition
from weatherdash.reporting.formatters import view_to_dict

DASHBOARD_HTML = Path(__file__).parent / "static" / "dashboard.html"


class LocateRequest(BaseModel):
    """Browser geolocation result; missing coordinates mean it was refused."""
    latitude: float | None = None
    longitude: float | None = None
    supported: bool = True


class SearchRequest(BaseModel):
    query: str


def create_app(session: DashboardSession) -> FastAPI:
    app = FastAPI(title="Weather Dashboard", version="0.1.0")

    # ── Data endpoints ──────────────────────────────────────────────

    @app.get("/api/view")
    def get_view():
        """Current view: a status line or a full render."""
        return view_to_dict(session.view())

    @app.get("/api/health")
    def get_health():
        state = session.state
        return {
            "loaded": state.payload is not None,
            "location": state.payload.location_name if state.payload else None,
            "status": state.status,
            "latest_request": state.latest_request,
        }

    # ── Fetch endpoints ─────────────────────────────────────────────

    @app.post("/api/locate")
    def locate(req: LocateRequest):
        provider = FixedPosition(req.latitude, req.longitude, supported=req.supported)
        session.locate(provider)
        return view_to_dict(session.view())

    @app.post("/api/search")
    def search(req: SearchRequest):
        session.search(req.query)
        return view_to_dict(session.view())

    # ── Selection endpoints ─────────────────────────────────────────

    @app.post("/api/select/day/{index}")
    def select_day(index: int):
        try:
            session.select_day(index)
        except IndexError as e:
            raise HTTPException(404, str(e))
        except LookupError as e:
            raise HTTPException(409, str(e))
        return view_to_dict(session.view())

    @app.post("/api/select/now")
    def select_now():
        try:
            session.select_current()
        except LookupError as e:
            raise HTTPException(409, str(e))
        return view_to_dict(session.view())

    # ── Serve dashboard ─────────────────────────────────────────────

    @app.get("/")
    def serve_dashboard():
        if DASHBOARD_HTML.exists():
            return FileResponse(DASHBOARD_HTML, media_type="text/html")
        return HTMLResponse("<h1>Dashboard not found</h1>", status_code=404)

    return app
