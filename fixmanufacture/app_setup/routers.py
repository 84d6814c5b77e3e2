"""
Registre central des routers.
- Catalogue: parts, reviews
- Commandes et paiements: orders, payments
- Utilisateurs/rôles: users
- Health: /, /health
"""
from fastapi import FastAPI
from fixmanufacture.health.router import router as health_router
from fixmanufacture.orders.views import router as orders_router
from fixmanufacture.parts.views import router as parts_router
from fixmanufacture.payments.views import router as payments_router
from fixmanufacture.reviews.views import router as reviews_router
from fixmanufacture.users.views import router as users_router

def register_routers(app: FastAPI) -> None:
    app.include_router(parts_router)
    app.include_router(reviews_router)
    app.include_router(orders_router)
    app.include_router(users_router)
    app.include_router(payments_router)
    app.include_router(health_router)
