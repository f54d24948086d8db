"""
Factory d'application pour les entrypoints (ex: payments_ms.asgi).
Ordonne les étapes d'initialisation de manière lisible et testable.
"""
from typing import Optional

from fastapi import FastAPI

from payments_ms.payments.service import PaymentsService, build_payments_service
from .lifespan import lifespan
from .logs import configure_logging
from .middlewares import register_basic_middlewares, register_security_middleware
from .exceptions import register_exception_handlers
from .routers import register_routers

def create_app(service: Optional[PaymentsService] = None) -> FastAPI:
    """
    Construit l'app FastAPI avec le lifespan et enregistre:
      - le PaymentsService (construit depuis la config si non fourni) dans app.state
      - middlewares de base et de sécurité
      - gestionnaires d'exceptions
      - tous les routers (payments, health)
    Lève PaymentsConfigError si STRIPE_SECRET est absent: l'app ne démarre pas.
    """
    configure_logging()
    if service is None:
        service = build_payments_service()

    app = FastAPI(title="Payments MS", lifespan=lifespan)
    app.state.payments_service = service
    register_basic_middlewares(app)
    register_security_middleware(app)
    register_exception_handlers(app)
    register_routers(app)
    return app
