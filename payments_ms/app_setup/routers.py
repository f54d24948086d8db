"""
Registre central des routers.
- API: payments (create-payment-session, success, cancel, webhook)
- Health: health_router
"""
from fastapi import FastAPI
from payments_ms.payments import views as payments_views
from payments_ms.health.router import router as health_router

ROUTERS = (
    payments_views.router,
    health_router,
)

def register_routers(app: FastAPI) -> None:
    """Enregistre chaque router de la table ROUTERS (préfixes disjoints)."""
    for router in ROUTERS:
        app.include_router(router)
