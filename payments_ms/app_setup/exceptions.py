"""
Gestionnaires d'exceptions.
- HTTPException: JSON FastAPI standard {"detail": ...}.
- stripe.StripeError (création de session): déjà loggée par le service, convertie ici
  en réponse JSON avec le statut HTTP renvoyé par Stripe (502 si Stripe n'en fournit pas).
"""
import stripe
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from starlette.status import HTTP_502_BAD_GATEWAY

def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(HTTPException)
    async def http_error(request: Request, exc: HTTPException):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail}, headers=exc.headers)

    @app.exception_handler(stripe.StripeError)
    async def stripe_error(request: Request, exc: stripe.StripeError):
        status_code = exc.http_status or HTTP_502_BAD_GATEWAY
        detail = exc.user_message or str(exc) or exc.__class__.__name__
        return JSONResponse(status_code=status_code, content={"detail": detail})
