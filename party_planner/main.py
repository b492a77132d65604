from contextlib import asynccontextmanager

import sentry_sdk
from fastapi import FastAPI
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.starlette import StarletteIntegration

from party_planner.bootstrap import BootstrapSequencer
from party_planner.config.logging import setup_logging
from party_planner.config.settings import settings
from party_planner.pages.router import router as pages_router
from party_planner.planner import build_planner
from party_planner.routers.healthz.router import router as healthz_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    planner = build_planner(settings)
    sequencer = BootstrapSequencer(planner)
    app.state.planner = planner
    app.state.sequencer = sequencer
    await sequencer.run()
    yield


if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.ENVIRONMENT,
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        profiles_sample_rate=settings.SENTRY_PROFILES_SAMPLE_RATE,
        integrations=[
            StarletteIntegration(transaction_style="endpoint"),
            FastApiIntegration(transaction_style="endpoint"),
        ],
        send_default_pii=False,
    )

app = FastAPI(
    title="Party Planner",
    description="Party list, guest lists and party details synced from the party API",
    version="0.1.0",
    lifespan=lifespan,
)

# Include routers
app.include_router(healthz_router, prefix="/healthz", tags=["Healthz"])
app.include_router(pages_router, tags=["Pages"])
