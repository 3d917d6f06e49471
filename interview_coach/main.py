import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi import _rate_limit_exceeded_handler
import sentry_sdk

from interview_coach.api.v1.answers import router as answers_router
from interview_coach.api.v1.health import router as health_router
from interview_coach.api.v1.resume import router as resume_router
from interview_coach.core.config import settings
from interview_coach.core.cors import cors_options
from interview_coach.core.lifespan import lifespan
from interview_coach.core.rate_limit import limiter

logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s %(message)s")
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn, traces_sample_rate=0.0)

app = FastAPI(
    title="Interview Coach Scoring API",
    description="Deterministic resume and interview-answer scoring.",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(CORSMiddleware, **cors_options())
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

app.include_router(health_router, prefix="/v1", tags=["Health"])
app.include_router(resume_router, prefix="/v1", tags=["Resume"])
app.include_router(answers_router, prefix="/v1", tags=["Answers"])
