import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from payments_ms.utils.rate_limit import optional_rate_limit
from payments_ms.payments.schemas import PaymentSessionRequest, RedirectAck
from payments_ms.payments.service import PaymentsService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/payments", tags=["Payments"])

def get_payments_service(request: Request) -> PaymentsService:
    """Service construit par create_app() et stocké dans app.state."""
    return request.app.state.payments_service

# module payments_ms.payments.views
@router.post("/create-payment-session", dependencies=[Depends(optional_rate_limit(times=10, seconds=60))])
async def create_payment_session(
    payload: PaymentSessionRequest,
    service: PaymentsService = Depends(get_payments_service),
) -> Dict[str, Any]:
    """
    Crée une session Checkout Stripe pour le panier reçu.
    - Entrée JSON: { "currency": "usd", "items": [ {"name", "price", "quantity"} ], "orderId": "..." }
    - Sécurité: rate limit (10 req / 60s)
    - Retour: la session Stripe telle quelle (id, url, ...)
    - Erreurs: 422 si payload invalide; erreur Stripe propagée (voir app_setup.exceptions)
    """
    return await service.create_payment_session(payload)

@router.get("/success", response_model=RedirectAck)
def success():
    return {"ok": True, "message": "Payments successfully"}

@router.get("/cancel", response_model=RedirectAck)
def cancel():
    return {"ok": False, "message": "Payments canceled"}

@router.post("/webhook", include_in_schema=False)
async def webhook_stripe(request: Request, service: PaymentsService = Depends(get_payments_service)):
    """
    Webhook Stripe: valide la signature puis logge la transition de la commande.
    - Le body brut est transmis tel quel à la vérification (pas de parsing JSON ici)
    - Réponses texte: 200 "Webhook called with signature <sig>" ou 400 "Webhook Error: <raison>"
    """
    payload = await request.body()
    sig_header = request.headers.get("stripe-signature")
    result = service.handle_webhook(payload, sig_header)
    return PlainTextResponse(result.body, status_code=result.status_code)
