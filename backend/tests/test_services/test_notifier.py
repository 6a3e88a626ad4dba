"""Tests for the Resend notifier (HTTP replaced by httpx.MockTransport)."""

import json
from datetime import datetime, timezone
from decimal import Decimal

import httpx
import pytest

from boloflix.config import Settings
from boloflix.schemas.subscription import SubscriptionResponse
from boloflix.services.notifier import (
    CUSTOMER_SUBJECT,
    OPERATOR_SUBJECT,
    Notifier,
    render_customer_email,
    render_operator_email,
)


def _subscription(**overrides) -> SubscriptionResponse:
    data = {
        "id": 7,
        "created_at": datetime(2026, 10, 1, 9, 30, tzinfo=timezone.utc),
        "customer_name": "Ana <3",
        "customer_email": "ana@test.com",
        "plan_title": "Bolo Apaixonado",
        "plan_price": Decimal("120.00"),
        "flavor_preference": "Cenoura com chocolate",
        "delivery_day": "Sexta-feira",
        "delivery_time": "Tarde",
    }
    data.update(overrides)
    return SubscriptionResponse(**data)


class TestRendering:
    """HTML bodies."""

    def test_operator_email_lists_order(self):
        html = render_operator_email(_subscription())
        assert "Bolo Apaixonado" in html
        assert "R$ 120.00" in html
        assert "Sexta-feira, Tarde" in html
        assert "Cenoura com chocolate" in html

    def test_values_are_escaped(self):
        html = render_customer_email(_subscription())
        assert "Ana &lt;3" in html
        assert "Ana <3" not in html

    def test_missing_preference_shows_dash(self):
        html = render_operator_email(_subscription(flavor_preference=None))
        assert "<strong>Preferência:</strong> —" in html


class TestSend:
    """Notifier.send never raises."""

    @pytest.mark.asyncio
    async def test_posts_to_resend(self, test_settings: Settings):
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json={"id": "email-1"})

        notifier = Notifier(test_settings, transport=httpx.MockTransport(handler))
        assert await notifier.send("ana@test.com", "Oi", "<p>Oi</p>") is True

        request = captured[0]
        assert str(request.url) == test_settings.resend_api_url
        assert request.headers["Authorization"] == "Bearer re_test_key"
        payload = json.loads(request.content)
        assert payload == {
            "from": test_settings.email_from,
            "to": ["ana@test.com"],
            "subject": "Oi",
            "html": "<p>Oi</p>",
        }

    @pytest.mark.asyncio
    async def test_http_error_status_returns_false(self, test_settings: Settings):
        transport = httpx.MockTransport(lambda request: httpx.Response(422, json={"message": "invalid"}))
        notifier = Notifier(test_settings, transport=transport)
        assert await notifier.send("ana@test.com", "Oi", "<p>Oi</p>") is False

    @pytest.mark.asyncio
    async def test_connection_error_returns_false(self, test_settings: Settings):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("no route to host", request=request)

        notifier = Notifier(test_settings, transport=httpx.MockTransport(handler))
        assert await notifier.send("ana@test.com", "Oi", "<p>Oi</p>") is False

    @pytest.mark.asyncio
    async def test_unexpected_error_returns_false(self, test_settings: Settings):
        def handler(request: httpx.Request) -> httpx.Response:
            raise RuntimeError("transport blew up")

        notifier = Notifier(test_settings, transport=httpx.MockTransport(handler))
        assert await notifier.send("ana@test.com", "Oi", "<p>Oi</p>") is False

    @pytest.mark.asyncio
    async def test_malformed_resend_url_returns_false(self, test_settings: Settings):
        test_settings.resend_api_url = "http://[bad-host/emails"
        notifier = Notifier(test_settings, transport=httpx.MockTransport(lambda request: httpx.Response(200)))
        assert await notifier.send("ana@test.com", "Oi", "<p>Oi</p>") is False

    @pytest.mark.asyncio
    async def test_disabled_without_api_key(self, test_settings: Settings):
        test_settings.resend_api_key = ""
        calls: list[httpx.Request] = []
        transport = httpx.MockTransport(lambda request: calls.append(request) or httpx.Response(200))

        notifier = Notifier(test_settings, transport=transport)

        assert notifier.enabled is False
        assert await notifier.send("ana@test.com", "Oi", "<p>Oi</p>") is False
        assert calls == []


class TestNotifyNewSubscription:
    """Operator and customer emails are independent."""

    @pytest.mark.asyncio
    async def test_customer_email_sent_even_if_operator_fails(self, test_settings: Settings):
        sent: list[tuple[str, str]] = []

        def handler(request: httpx.Request) -> httpx.Response:
            payload = json.loads(request.content)
            sent.append((payload["to"][0], payload["subject"]))
            if payload["to"][0] == test_settings.notification_email:
                return httpx.Response(500)
            return httpx.Response(200, json={"id": "ok"})

        notifier = Notifier(test_settings, transport=httpx.MockTransport(handler))
        await notifier.notify_new_subscription(_subscription())

        assert sent == [
            (test_settings.notification_email, OPERATOR_SUBJECT),
            ("ana@test.com", CUSTOMER_SUBJECT),
        ]

    @pytest.mark.asyncio
    async def test_skips_operator_when_not_configured(self, test_settings: Settings):
        test_settings.notification_email = ""
        recipients: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            recipients.append(json.loads(request.content)["to"][0])
            return httpx.Response(200, json={"id": "ok"})

        notifier = Notifier(test_settings, transport=httpx.MockTransport(handler))
        await notifier.notify_new_subscription(_subscription())

        assert recipients == ["ana@test.com"]

    @pytest.mark.asyncio
    async def test_customer_email_sent_after_unexpected_operator_error(self, test_settings: Settings):
        recipients: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            recipient = json.loads(request.content)["to"][0]
            recipients.append(recipient)
            if recipient == test_settings.notification_email:
                raise RuntimeError("transport blew up")
            return httpx.Response(200, json={"id": "ok"})

        notifier = Notifier(test_settings, transport=httpx.MockTransport(handler))
        await notifier.notify_new_subscription(_subscription())

        assert recipients == [test_settings.notification_email, "ana@test.com"]
