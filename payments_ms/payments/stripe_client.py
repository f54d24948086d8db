"""
Adaptateur Stripe: construit le client Stripe et centralise les appels SDK.
Le client est créé une seule fois (au démarrage) puis injecté, pas de stripe.api_key global.
"""
import stripe
from typing import Any, Dict

from starlette.concurrency import run_in_threadpool

# Erreurs de vérification renvoyées par construct_event:
# - ValueError: payload illisible (JSON invalide)
# - SignatureVerificationError: en-tête Stripe-Signature absent/incorrect
# - TypeError/AttributeError: JSON valide mais pas un objet (liste, nombre...)
WEBHOOK_ERRORS = (ValueError, TypeError, AttributeError, stripe.SignatureVerificationError)

# module payments_ms.payments.stripe_client
def make_client(secret_key: str) -> stripe.StripeClient:
    """Instancie un StripeClient pour la clé secrète fournie."""
    return stripe.StripeClient(secret_key)

async def create_session(client: stripe.StripeClient, params: Dict[str, Any]) -> stripe.checkout.Session:
    """
    Crée une session Stripe Checkout.
    - params: dict complet (line_items, mode, success_url, cancel_url, payment_intent_data)
    - L'appel HTTP du SDK est bloquant: exécuté dans le threadpool Starlette.
    Retour: la session Stripe (ex: {"id": "cs_test_...", "url": "https://..."})
    """
    return await run_in_threadpool(client.checkout.sessions.create, params=params)

def parse_event(client: stripe.StripeClient, payload: bytes, sig_header: str, secret: str) -> stripe.Event:
    """
    Valide la signature et construit l'event Stripe.
    - payload: body brut, tel que reçu (aucun re-parsing/re-sérialisation)
    Lève une des WEBHOOK_ERRORS si la vérification échoue ou si le body n'est pas un event.
    """
    event = client.construct_event(payload, sig_header, secret)
    if getattr(event, "object", None) != "event":
        raise ValueError("Invalid payload: not a Stripe event object")
    return event

def session_to_dict(session: Any) -> Dict[str, Any]:
    # stripe retourne un StripeObject; on renvoie sa forme JSON telle quelle
    if hasattr(session, "to_dict"):
        return session.to_dict()
    return dict(session)
