import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Routers
from routers.generate import router as generate_router
from routers.levels import router as levels_router
from routers.page import router as page_router

logger = logging.getLogger("qa-generator")
logging.basicConfig(level=logging.INFO)

_DEFAULT_ORIGINS = "http://localhost:3000,http://127.0.0.1:3000"
CORS_ORIGINS = [
    o.strip() for o in os.getenv("CORS_ORIGINS", _DEFAULT_ORIGINS).split(",") if o.strip()
]

app = FastAPI(title="QA Generator")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health_root():
    return {"ok": True}


app.include_router(page_router)  # /
app.include_router(levels_router)  # /levels
app.include_router(generate_router)  # /generate, /copy

logger.info("QA Generator ready; CORS origins: %s", CORS_ORIGINS)
