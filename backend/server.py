from fastapi import FastAPI, APIRouter, HTTPException
from dotenv import load_dotenv
from starlette.middleware.cors import CORSMiddleware
import logging
from pathlib import Path
from pydantic import BaseModel, field_validator
from typing import Any, Dict, Optional

from config import load_settings
from dashboard.service import DashboardService
from dashboard.state import DashboardSession
from dashboard.view import build_dashboard_view

ROOT_DIR = Path(__file__).parent
load_dotenv(ROOT_DIR / '.env')

settings = load_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Create the main app without a prefix
app = FastAPI(title="Stock Sentiment Dashboard")

# CORS for the browser dashboard
app.add_middleware(
    CORSMiddleware,
    allow_credentials=True,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Create a router with the /api prefix
api_router = APIRouter(prefix="/api")

# ============ MODELS ============

class DashboardRequest(BaseModel):
    ticker: str

    @field_validator("ticker")
    @classmethod
    def ticker_not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Ticker symbol is required")
        return v

# ============ DASHBOARD SESSION ============

_dashboard_session: Optional[DashboardSession] = None


def get_dashboard_session() -> DashboardSession:
    """Get or create the global DashboardSession"""
    global _dashboard_session
    if _dashboard_session is None:
        service = DashboardService.from_settings(settings)
        _dashboard_session = DashboardSession(service)
    return _dashboard_session

# ============ API ENDPOINTS ============

@api_router.get("/")
async def root():
    return {"message": "Stock Sentiment Dashboard API", "version": "1.0.0"}


@api_router.get("/health")
async def health() -> Dict[str, Any]:
    return {
        "status": "ok",
        "polygon_configured": settings.polygon_configured,
        "sentiment_configured": settings.sentiment_configured,
    }


@api_router.get("/dashboard")
async def get_dashboard():
    """Current dashboard state (last completed submission)"""
    return build_dashboard_view(get_dashboard_session().current)


@api_router.post("/dashboard")
async def submit_ticker(request: DashboardRequest):
    """Fetch company data, score its news and select the most significant article"""
    try:
        result = await get_dashboard_session().submit(request.ticker)
    except Exception as e:
        logger.error(f"Dashboard submission failed for {request.ticker}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    if result.error:
        raise HTTPException(status_code=502, detail=result.error)

    return build_dashboard_view(result)


@api_router.delete("/dashboard")
async def clear_dashboard():
    """Clear the dashboard; pending submissions will not be published"""
    session = get_dashboard_session()
    session.reset()
    return build_dashboard_view(session.current)


# Include the router in the main app (must be after all endpoint definitions)
app.include_router(api_router)
