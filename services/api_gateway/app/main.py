"""API gateway for the LinkedIn Prompt Studio.

This service exposes a small REST interface to the Streamlit UI:
- GET /options: choices for the form widgets
- POST /compose: validate a form submission and build the prompt pair
- POST /suggest_topics: relay an Ask AI query to the suggestion webhook

Composition runs in-process; the only outbound call is the webhook.
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.settings import Settings
from shared.tracing import install_fastapi_tracing

from .routers import prompts, suggestions

app = FastAPI(title="Prompt Studio API", version="0.1.0")
install_fastapi_tracing(app, service_name="api-gateway")


# Health/root endpoints
@app.get("/")
def _root():
    return {"status": "ok", "service": "api-gateway"}


@app.get("/health")
def _health():
    return {"status": "ok"}


# -------- CORS (allow Streamlit origin) --------
s = Settings()
origin_env = s.streamlit_app_origin or ""
# Support comma-separated list if multiple origins are provided
origins = [o.strip().rstrip("/") for o in origin_env.split(",") if o.strip()]

if not origins:
    origins = ["http://localhost:8501"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
# ----------------------------------------------


# Routers
app.include_router(prompts.router, prefix="", tags=["prompts"])
app.include_router(suggestions.router, prefix="", tags=["suggestions"])


@app.on_event("startup")
async def _log_config() -> None:
    webhook = "configured" if (s.ask_ai_webhook_url or "").strip() else "missing"
    print(f"[api-gateway] Ask AI webhook: {webhook}; CORS origins: {origins}")
