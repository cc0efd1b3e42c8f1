import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings
from .routes import router

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Time Travel Tic Tac Toe",
    description="API backend for a two-player Tic Tac Toe game that can be rewound to any earlier move.",
    version="0.1.0",
    openapi_tags=[
        {"name": "Game", "description": "Game creation, moves, time travel and listing endpoints."},
    ]
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Main API router for all core endpoints
app.include_router(router)

@app.get("/", tags=["General"])
def health_check():
    """Health Check endpoint for backend"""
    return {"message": "Healthy"}
