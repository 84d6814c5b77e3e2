# module fixmanufacture.app
from typing import Optional
from fastapi import FastAPI

from fixmanufacture.app_setup.exception_handlers import register_exception_handlers
from fixmanufacture.app_setup.lifespan import lifespan
from fixmanufacture.app_setup.middlewares import register_basic_middlewares, register_security_middleware
from fixmanufacture.app_setup.routers import register_routers
from fixmanufacture.auth.guards import AccessGuard
from fixmanufacture.auth.roles import RoleResolver
from fixmanufacture.auth.tokens import TokenService
from fixmanufacture.config import ACCESS_TOKEN_SECRET, ORDER_DELETE_POLICY, SUPABASE_KEY, SUPABASE_URL
from fixmanufacture.infra.store import DocumentStore
from fixmanufacture.orders.repository import OrdersRepository
from fixmanufacture.orders.service import OrderDeletePolicy, OrderReconciler
from fixmanufacture.parts.repository import PartsRepository
from fixmanufacture.payments.repository import PaymentsRepository
from fixmanufacture.reviews.repository import ReviewsRepository
from fixmanufacture.users.repository import UsersRepository


def wire_components(app: FastAPI, store, token_secret: str, delete_policy: OrderDeletePolicy) -> None:
    """
    Construit les composants et les range sur app.state.
    Le store est le seul état partagé; tous les composants le reçoivent explicitement.
    """
    state = app.state
    state.store = store
    state.parts = PartsRepository(store)
    state.reviews = ReviewsRepository(store)
    state.users = UsersRepository(store)
    state.tokens = TokenService(token_secret)
    state.roles = RoleResolver(state.users)
    state.guard = AccessGuard(state.tokens, state.roles)
    state.reconciler = OrderReconciler(OrdersRepository(store), PaymentsRepository(store), delete_policy)


def create_app(
    store: Optional[DocumentStore] = None,
    token_secret: str = ACCESS_TOKEN_SECRET,
    delete_policy: Optional[OrderDeletePolicy] = None,
) -> FastAPI:
    """
    Crée et configure l’instance FastAPI de l’application.
    Étapes:
      1) wire_components: store, jetons, rôles, guard, repositories, réconciliateur.
      2) register_basic_middlewares: CORS.
      3) register_security_middleware: en-têtes de sécurité.
      4) register_exception_handlers: {"message": ...} pour 401/403/409/422/500 métier.
      5) register_routers: parts, reviews, orders, users, payments, health.
    Le lifespan ouvre/ferme le store (init()/close()) autour du service.
    """
    app = FastAPI(title="Fix Manufacture API", lifespan=lifespan)
    wire_components(
        app,
        store if store is not None else DocumentStore(SUPABASE_URL, SUPABASE_KEY),
        token_secret,
        delete_policy or OrderDeletePolicy.parse(ORDER_DELETE_POLICY),
    )
    register_basic_middlewares(app)
    register_security_middleware(app)
    register_exception_handlers(app)
    register_routers(app)
    return app
