"""
Cas d'usage 'payments': orchestre builder, client Stripe et dispatch des events.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from payments_ms import config

from . import builder
from . import events
from . import stripe_client
from .schemas import PaymentSessionRequest

logger = logging.getLogger(__name__)


class PaymentsConfigError(RuntimeError):
    """Configuration Stripe incomplète: le service refuse de s'initialiser."""


@dataclass(frozen=True)
class WebhookResult:
    status_code: int
    body: str


class PaymentsService:
    """
    Service de paiements construit une fois au démarrage puis partagé (lecture seule).
    - secret_key: clé secrète Stripe (obligatoire)
    - endpoint_secret: secret de signature du webhook
    - success_url / cancel_url: redirections transmises à Stripe Checkout
    - client: StripeClient injecté (tests), sinon construit depuis secret_key
    """

    def __init__(
        self,
        *,
        secret_key: str,
        endpoint_secret: str,
        success_url: str,
        cancel_url: str,
        client: Optional[Any] = None,
    ):
        if not secret_key:
            raise PaymentsConfigError("STRIPE_SECRET is not defined in environment variables")
        self.endpoint_secret = endpoint_secret or ""
        self.success_url = success_url
        self.cancel_url = cancel_url
        self.client = client if client is not None else stripe_client.make_client(secret_key)

        logger.info("PaymentsService initialized")
        logger.debug("Stripe Secret: %s", "Loaded" if secret_key else "Not loaded")

    async def create_payment_session(self, request: PaymentSessionRequest) -> Dict[str, Any]:
        """
        Crée la session Checkout pour le panier et renvoie la réponse Stripe telle quelle.
        Toute erreur Stripe est loggée puis propagée (pas de retry).
        """
        params = builder.build_session_params(
            request,
            success_url=self.success_url,
            cancel_url=self.cancel_url,
        )
        try:
            session = await stripe_client.create_session(self.client, params)
        except Exception:
            logger.exception("Error creating payment session order_id=%s", request.order_id)
            raise
        return stripe_client.session_to_dict(session)

    def handle_webhook(self, payload: bytes, signature: Optional[str]) -> WebhookResult:
        """
        Vérifie la signature du webhook puis dispatche sur le type d'event.
        - 400 "Webhook Error: <raison>" si la vérification échoue (jamais d'exception)
        - 200 "Webhook called with signature <sig>" sinon, quel que soit le type
        """
        sig = signature or ""
        try:
            event = stripe_client.parse_event(self.client, payload, sig, self.endpoint_secret)
        except stripe_client.WEBHOOK_ERRORS as e:
            logger.info("payments.webhook rejected: %s", e)
            return WebhookResult(400, f"Webhook Error: {e}")

        events.dispatch_event(event)
        return WebhookResult(200, f"Webhook called with signature {sig}")


def build_payments_service(client: Optional[Any] = None) -> PaymentsService:
    """Construit le service à partir de payments_ms.config (lu au démarrage)."""
    return PaymentsService(
        secret_key=config.STRIPE_SECRET,
        endpoint_secret=config.STRIPE_ENDPOINT_SECRET,
        success_url=config.STRIPE_SUCCESS_URL,
        cancel_url=config.STRIPE_CANCEL_URL,
        client=client,
    )
