from fastapi import FastAPI
from .settings import settings
from .routers import sessions
from .utils.log import configure_logging

configure_logging(settings.LOG_LEVEL)

app = FastAPI(title=settings.APP_NAME)

app.include_router(sessions.router, tags=["Payment Sessions"])

@app.get("/health", tags=["Ops"])
async def health():
    return {"status": "ok", "env": settings.APP_ENV}
