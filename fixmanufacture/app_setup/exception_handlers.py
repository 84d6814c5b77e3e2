"""
Gestionnaires d’exceptions.
- HTTPException (dont 401/403 des guards): corps JSON {"message": ...} avec le même statut.
- Validation des corps/paramètres: 422 {"message": "Invalid request", "errors": [...]}.
- Erreurs métier des commandes: 409 (déjà payée, transactionId déjà utilisé, suppression bloquée).
- PaymentReconciliationError: 500 avec orderId/paymentId pour tracer le paiement orphelin.
Les autres exceptions (erreurs du store) ne sont pas interceptées ici: 500 générique de Starlette.
"""
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from fixmanufacture.errors import (
    OrderAlreadyPaid,
    PaidOrderDeletionBlocked,
    PaymentReconciliationError,
    TransactionAlreadyUsed,
)

def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"message": str(exc.detail)}, headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=422, content={"message": "Invalid request", "errors": jsonable_encoder(exc.errors())})

    @app.exception_handler(OrderAlreadyPaid)
    async def order_already_paid(request: Request, exc: OrderAlreadyPaid):
        return JSONResponse(status_code=409, content={"message": "Order already paid"})

    @app.exception_handler(TransactionAlreadyUsed)
    async def transaction_already_used(request: Request, exc: TransactionAlreadyUsed):
        return JSONResponse(status_code=409, content={"message": "Transaction already used"})

    @app.exception_handler(PaidOrderDeletionBlocked)
    async def paid_order_deletion_blocked(request: Request, exc: PaidOrderDeletionBlocked):
        return JSONResponse(status_code=409, content={"message": "Paid orders cannot be deleted"})

    @app.exception_handler(PaymentReconciliationError)
    async def reconciliation_error(request: Request, exc: PaymentReconciliationError):
        return JSONResponse(
            status_code=500,
            content={
                "message": "Payment recorded but order not updated",
                "orderId": exc.order_id,
                "paymentId": exc.payment_id,
            },
        )
