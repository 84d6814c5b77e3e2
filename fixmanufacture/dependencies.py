"""
Accès aux composants construits par create_app() et rangés sur app.state.
Utilisés via Depends() dans les routers; surchargeables dans les tests (dependency_overrides).
"""
from fastapi import Request

from fixmanufacture.auth.roles import RoleResolver
from fixmanufacture.auth.tokens import TokenService
from fixmanufacture.orders.service import OrderReconciler
from fixmanufacture.parts.repository import PartsRepository
from fixmanufacture.reviews.repository import ReviewsRepository
from fixmanufacture.users.repository import UsersRepository


def get_parts(request: Request) -> PartsRepository:
    return request.app.state.parts


def get_reviews(request: Request) -> ReviewsRepository:
    return request.app.state.reviews


def get_users(request: Request) -> UsersRepository:
    return request.app.state.users


def get_tokens(request: Request) -> TokenService:
    return request.app.state.tokens


def get_roles(request: Request) -> RoleResolver:
    return request.app.state.roles


def get_reconciler(request: Request) -> OrderReconciler:
    return request.app.state.reconciler
