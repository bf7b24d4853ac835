import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

# ✅ Import All API Routes
from app.api.routes import jobs, health
from app.core import config
from app.core.logging_config import setup_logging


setup_logging(config.LOG_LEVEL, config.LOG_FILE)
logger = logging.getLogger(__name__)


# ============================================
# ✅ STARTUP: LOAD MATCHING CRITERIA
# ============================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    # A missing or invalid MATCHER_CONFIG_PATH aborts startup
    matching = jobs.get_matching_config()
    logger.info(
        f"Matching criteria ready: targets={len(matching.targets)}, min_score={matching.min_score}"
    )
    yield


# ============================================
# ✅ FASTAPI APP INIT
# ============================================

app = FastAPI(title="Job Matcher", lifespan=lifespan)

# ✅ CORS: any origin and method, same as a default cors() setup
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================
# ✅ REGISTER ALL ROUTERS
# ============================================

app.include_router(jobs.router)
app.include_router(health.router)


# ============================================
# ✅ ROOT ENDPOINT
# ============================================

@app.get("/", response_class=PlainTextResponse)
def root():
    return "Job matcher backend is running"


def run():
    logger.info(f"Server listening on port {config.PORT}")
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
