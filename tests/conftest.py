import os

# Configuration de test posée avant tout import de payments_ms.config
os.environ.setdefault("STRIPE_SECRET", "sk_test_dummy")
os.environ.setdefault("STRIPE_ENDPOINT_SECRET", "whsec_test_secret")
os.environ.setdefault("STRIPE_SUCCESS_URL", "https://shop.example.test/payments/success")
os.environ.setdefault("STRIPE_CANCEL_URL", "https://shop.example.test/payments/cancel")
os.environ.setdefault("DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS", "1")

import hashlib
import hmac
import json
import time
from types import SimpleNamespace
from typing import Any, Dict, Generator, List, Optional

import pytest
import stripe
from fastapi.testclient import TestClient

from payments_ms.app_setup.factory import create_app
from payments_ms.payments.service import PaymentsService

WEBHOOK_SECRET = "whsec_test_secret"
SUCCESS_URL = "https://shop.example.test/payments/success"
CANCEL_URL = "https://shop.example.test/payments/cancel"

# Marquage automatique selon le dossier
def pytest_collection_modifyitems(config, items):
    for item in items:
        nodeid = item.nodeid.replace("\\", "/")
        if "/tests/unit/" in nodeid or nodeid.startswith("tests/unit/"):
            item.add_marker(pytest.mark.unit)
        elif "/tests/integration/" in nodeid or nodeid.startswith("tests/integration/"):
            item.add_marker(pytest.mark.integration)


class FakeSessions:
    """Remplace client.checkout.sessions: enregistre les params, renvoie une session figée."""

    def __init__(self):
        self.calls: List[Dict[str, Any]] = []
        self.response: Dict[str, Any] = {
            "id": "cs_test_123",
            "object": "checkout.session",
            "url": "https://checkout.stripe.test/cs_test_123",
        }
        self.error: Optional[Exception] = None

    def create(self, params=None, options=None):
        self.calls.append(params)
        if self.error is not None:
            raise self.error
        return self.response


class FakeStripeClient:
    """
    Client Stripe de test.
    - checkout.sessions: faux (pas d'appel réseau)
    - construct_event: vraie vérification de signature du SDK Stripe
    """

    def __init__(self):
        self.checkout = SimpleNamespace(sessions=FakeSessions())
        self._real = stripe.StripeClient("sk_test_dummy")

    def construct_event(self, payload, sig_header, secret):
        return self._real.construct_event(payload, sig_header, secret)


def sign_payload(payload: bytes, secret: str = WEBHOOK_SECRET, timestamp: Optional[int] = None) -> str:
    """Construit un en-tête Stripe-Signature valide (t=...,v1=HMAC-SHA256)."""
    ts = int(timestamp if timestamp is not None else time.time())
    signed = f"{ts}.{payload.decode('utf-8')}".encode("utf-8")
    v1 = hmac.new(secret.encode("utf-8"), signed, hashlib.sha256).hexdigest()
    return f"t={ts},v1={v1}"


def make_event_payload(event_type: str, data_object: Optional[Dict[str, Any]] = None) -> bytes:
    event = {
        "id": "evt_test_1",
        "object": "event",
        "type": event_type,
        "data": {"object": data_object or {"id": "ch_test_1", "object": "charge", "metadata": {}}},
    }
    return json.dumps(event).encode("utf-8")


@pytest.fixture
def stripe_fake() -> FakeStripeClient:
    return FakeStripeClient()

@pytest.fixture
def payments_service(stripe_fake) -> PaymentsService:
    return PaymentsService(
        secret_key="sk_test_dummy",
        endpoint_secret=WEBHOOK_SECRET,
        success_url=SUCCESS_URL,
        cancel_url=CANCEL_URL,
        client=stripe_fake,
    )

@pytest.fixture
def app(payments_service):
    return create_app(service=payments_service)

@pytest.fixture()
def client(app) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c

@pytest.fixture
def sign():
    return sign_payload

@pytest.fixture
def event_payload():
    return make_event_payload
