import stripe


def test_create_payment_session_returns_provider_session(client, stripe_fake):
    body = {"currency": "usd", "items": [{"name": "A", "price": 10.00, "quantity": 2}], "orderId": "ord1"}
    resp = client.post("/payments/create-payment-session", json=body)

    assert resp.status_code == 200
    assert resp.json() == stripe_fake.checkout.sessions.response

    params = stripe_fake.checkout.sessions.calls[0]
    assert len(params["line_items"]) == 1
    assert params["line_items"][0]["price_data"]["unit_amount"] == 1000
    assert params["line_items"][0]["quantity"] == 2
    assert params["payment_intent_data"]["metadata"]["orderId"] == "ord1"


def test_create_payment_session_rounding_boundary(client, stripe_fake):
    body = {"currency": "usd", "items": [{"name": "A", "price": 19.995, "quantity": 1}], "orderId": "ord2"}
    assert client.post("/payments/create-payment-session", json=body).status_code == 200
    assert stripe_fake.checkout.sessions.calls[0]["line_items"][0]["price_data"]["unit_amount"] == 2000


def test_create_payment_session_invalid_body_is_rejected(client, stripe_fake):
    resp = client.post("/payments/create-payment-session", json={"currency": "usd", "items": [], "orderId": "x"})
    assert resp.status_code == 422
    assert stripe_fake.checkout.sessions.calls == []


def test_create_payment_session_propagates_stripe_error(client, stripe_fake):
    stripe_fake.checkout.sessions.error = stripe.InvalidRequestError("No such price", param="line_items", http_status=400)
    body = {"currency": "usd", "items": [{"name": "A", "price": 1, "quantity": 1}], "orderId": "ord1"}

    resp = client.post("/payments/create-payment-session", json=body)
    assert resp.status_code == 400
    assert resp.json() == {"detail": "No such price"}


def test_create_payment_session_connection_error_is_502(client, stripe_fake):
    stripe_fake.checkout.sessions.error = stripe.APIConnectionError("Network down")
    body = {"currency": "usd", "items": [{"name": "A", "price": 1, "quantity": 1}], "orderId": "ord1"}

    resp = client.post("/payments/create-payment-session", json=body)
    assert resp.status_code == 502


def test_success_and_cancel_are_static(client):
    assert client.get("/payments/success").json() == {"ok": True, "message": "Payments successfully"}
    assert client.get("/payments/success?session_id=cs_1&foo=bar").json() == {"ok": True, "message": "Payments successfully"}
    assert client.get("/payments/cancel").json() == {"ok": False, "message": "Payments canceled"}
    assert client.get("/payments/cancel?reason=x").json() == {"ok": False, "message": "Payments canceled"}


def test_health(client):
    assert client.get("/health").json() == {"ok": True}
    assert client.get("/health/rate-limit").json()["enabled"] is False
