from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from signup_api.logging_config import configure_logging
from signup_api.routers.signup import router as signup_router
from signup_api.settings import get_settings

configure_logging(get_settings().log_level)

APP_VERSION = "1.0.0"

app = FastAPI(title="Sign-up API", version=APP_VERSION)
app.include_router(signup_router)


@app.get("/healthz")
def healthz():
    return JSONResponse({"ok": True, "service": "signup-api", "version": APP_VERSION})
