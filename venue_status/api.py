"""
FastAPI application for venue status.
Provides read-only endpoints the status badge polls.
"""

import logging
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from .models import ParseError, UnknownVenueError
from .schemas import HealthResponse, StatusResponse, VenueResponse
from .service import VenueStatusService


logger = logging.getLogger(__name__)


def create_app(service: Optional[VenueStatusService] = None) -> FastAPI:
    """Create and configure FastAPI application."""
    app = FastAPI(
        title="Venue Status",
        description="Open / closing soon / closed status from daily opening hours",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc"
    )
    app.state.service = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ],
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    def get_service() -> VenueStatusService:
        """Dependency to get service instance."""
        if app.state.service is None:
            app.state.service = VenueStatusService()
            logger.info("Venue Status API service initialized")
        return app.state.service

    @app.get("/health", response_model=HealthResponse)
    async def health_check(svc: VenueStatusService = Depends(get_service)):
        """Health check endpoint."""
        return HealthResponse(**svc.health_check())

    @app.get("/venues", response_model=List[VenueResponse])
    async def list_venues(svc: VenueStatusService = Depends(get_service)):
        """List configured venues and their hours."""
        return [VenueResponse(name=v.name, hours=v.hours) for v in svc.venues()]

    @app.get("/venues/{name}/status", response_model=StatusResponse)
    async def venue_status(name: str, svc: VenueStatusService = Depends(get_service)):
        """Current status of a configured venue."""
        try:
            venue = svc.get_venue(name)
        except UnknownVenueError:
            raise HTTPException(status_code=404, detail=f"Unknown venue {name}")
        return svc.status_response(venue.hours, venue=venue.name)

    @app.get("/status", response_model=StatusResponse)
    async def adhoc_status(
        hours: str = Query(..., description="Opening hours as 'HH:MM - HH:MM'"),
        svc: VenueStatusService = Depends(get_service)
    ):
        """Evaluate an arbitrary hours string at the current time."""
        try:
            return svc.status_response(hours)
        except ParseError as e:
            logger.warning(f"Rejected hours {hours!r}: {e}")
            raise HTTPException(status_code=422, detail=str(e))

    return app


# Create the app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
