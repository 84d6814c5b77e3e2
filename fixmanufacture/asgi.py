"""
ASGI entrypoint: expose `app` for process managers / deployments.

- En production, un process manager (ex: gunicorn/uvicorn-workers) importe `fixmanufacture.asgi:app`.
- Toute la configuration est centralisée dans fixmanufacture.app.create_app().
"""

from fixmanufacture.app import create_app

app = create_app()

if __name__ == "__main__":
    import os
    import uvicorn
    uvicorn.run(
        "fixmanufacture.asgi:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "4000")),
        reload=True,
    )
