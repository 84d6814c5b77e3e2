"""
Middlewares transverses de l’application.
- register_basic_middlewares: CORS (origines depuis CORS_ORIGINS).
- register_security_middleware: en-têtes de sécurité sur toutes les réponses JSON.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fixmanufacture.config import CORS_ORIGINS

def register_basic_middlewares(app: FastAPI) -> None:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials="*" not in CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

def register_security_middleware(app: FastAPI) -> None:
    @app.middleware("http")
    async def security_headers(request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        return response
