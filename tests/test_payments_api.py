"""Simulated payment flow"""

import asyncio

from fastapi import HTTPException

from qleanme.domain.payments import service as payments
from qleanme.domain.payments.service import PaymentService


class TestPaymentIntent:
    def test_creates_intent(self, client, user_headers, make_order):
        order = make_order(price=105)
        response = client.post(f"/orders/{order.id}/payment-intent", headers=user_headers)
        assert response.status_code == 200
        assert response.json() == {
            "order_id": order.id,
            "client_secret": "mock_payment_intent_secret",
            "amount": 105.0,
            "currency": "USD",
        }
        status = client.get(f"/orders/{order.id}", headers=user_headers).json()["status"]
        assert status == "awaiting_payment"

    def test_refuses_while_processing(self, client, user_headers, make_order):
        order = make_order(status="awaiting_payment")
        response = client.post(f"/orders/{order.id}/payment-intent", headers=user_headers)
        assert response.status_code == 409
        assert response.json()["detail"] == "Payment is already being processed"

    def test_refuses_when_paid(self, client, user_headers, make_order):
        order = make_order(status="confirmed")
        response = client.post(f"/orders/{order.id}/payment-intent", headers=user_headers)
        assert response.status_code == 409

    def test_retry_after_failure(self, client, user_headers, make_order):
        order = make_order(status="payment_failed")
        response = client.post(f"/orders/{order.id}/payment-intent", headers=user_headers)
        assert response.status_code == 200

    def test_unknown_order(self, client, user_headers):
        response = client.post("/orders/does-not-exist/payment-intent", headers=user_headers)
        assert response.status_code == 404


class TestPaymentResult:
    def test_confirm(self, client, user_headers, make_order):
        order = make_order(status="awaiting_payment")
        response = client.post(f"/orders/{order.id}/payment/confirm", headers=user_headers)
        assert response.json() == {"order_id": order.id, "status": "confirmed"}

    def test_fail_with_reason(self, client, user_headers, make_order):
        order = make_order(status="awaiting_payment")
        response = client.post(
            f"/orders/{order.id}/payment/fail", json={"reason": "Card declined"}, headers=user_headers
        )
        assert response.json()["status"] == "payment_failed"

    def test_fail_without_body(self, client, user_headers, make_order):
        order = make_order(status="awaiting_payment")
        response = client.post(f"/orders/{order.id}/payment/fail", headers=user_headers)
        assert response.status_code == 200

    def test_confirm_needs_intent(self, client, user_headers, make_order):
        order = make_order()
        response = client.post(f"/orders/{order.id}/payment/confirm", headers=user_headers)
        assert response.status_code == 409


class TestConcurrentIntents:
    def test_only_one_intent_wins(self, db_session, user, make_order, monkeypatch):
        monkeypatch.setattr(payments.config, "PAYMENT_SIMULATION_DELAY_SECONDS", 0.05)
        order = make_order(price=80)
        service = PaymentService(db_session)

        async def both():
            return await asyncio.gather(
                service.create_payment_intent(user, order.id),
                service.create_payment_intent(user, order.id),
                return_exceptions=True,
            )

        results = asyncio.run(both())
        intents = [r for r in results if isinstance(r, dict)]
        refused = [r for r in results if isinstance(r, HTTPException)]
        assert len(intents) == 1
        assert len(refused) == 1
        assert refused[0].status_code == 409
        assert refused[0].detail == "Payment is already being processed"

    def test_status_set_before_delay(self, db_session, user, make_order, monkeypatch):
        order = make_order()
        seen = []

        async def record_status(seconds):
            db_session.refresh(order)
            seen.append(order.status)

        monkeypatch.setattr(payments.asyncio, "sleep", record_status)
        asyncio.run(PaymentService(db_session).create_payment_intent(user, order.id))
        assert seen == ["awaiting_payment"]
