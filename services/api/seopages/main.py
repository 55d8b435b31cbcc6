# services/api/seopages/main.py

from fastapi import FastAPI
from .logging_mw import RequestLoggingMiddleware, configure_logging

from .routes_pages import router as pages_router
from .routes_public import router as public_router
from .routes_admin_auth import router as admin_auth_router

app = FastAPI(title="SEO Pages API", version="1.0.0")

configure_logging()
app.add_middleware(RequestLoggingMiddleware)

app.include_router(admin_auth_router)
app.include_router(pages_router)   # GET/POST /seo/pages/{slug}
app.include_router(public_router)  # GET /public/pages/{slug}

@app.get("/health")
def health():
    return {"ok": True}
