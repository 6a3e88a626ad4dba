"""Transactional email via the Resend HTTP API.

Delivery is best effort: ``Notifier.send`` never raises. Callers schedule it
after the response-determining work is done, so an email outage can only
ever produce a log line.
"""

import logging
from html import escape

import httpx

from boloflix.config import Settings
from boloflix.schemas.subscription import SubscriptionResponse

logger = logging.getLogger(__name__)

OPERATOR_SUBJECT = "🎉 Novo Pedido na BoloFlix!"
CUSTOMER_SUBJECT = "Bem-vindo(a) à família BoloFlix! 🎂"


def _display(value: object) -> str:
    return escape(str(value)) if value not in (None, "") else "—"


def render_operator_email(subscription: SubscriptionResponse) -> str:
    """HTML summary of a new order for the shop owner."""
    return (
        "<h1>Novo Pedido Recebido!</h1>"
        "<p>Um novo cliente assinou a BoloFlix. Aqui estão os detalhes:</p>"
        "<ul>"
        f"<li><strong>Nome:</strong> {_display(subscription.customer_name)}</li>"
        f"<li><strong>Email:</strong> {_display(subscription.customer_email)}</li>"
        f"<li><strong>Plano:</strong> {_display(subscription.plan_title)} (R$ {_display(subscription.plan_price)})</li>"
        f"<li><strong>Preferência:</strong> {_display(subscription.flavor_preference)}</li>"
        f"<li><strong>Entrega:</strong> {_display(subscription.delivery_day)}, {_display(subscription.delivery_time)}</li>"
        "</ul>"
    )


def render_customer_email(subscription: SubscriptionResponse) -> str:
    """HTML order confirmation for the customer."""
    return (
        f"<h1>Olá, {_display(subscription.customer_name)}!</h1>"
        "<p>Sua assinatura foi confirmada. Que alegria ter você com a gente!</p>"
        "<ul>"
        f"<li><strong>Plano:</strong> {_display(subscription.plan_title)} (R$ {_display(subscription.plan_price)}/mês)</li>"
        f"<li><strong>Entrega:</strong> {_display(subscription.delivery_day)}, {_display(subscription.delivery_time)}</li>"
        "</ul>"
        "<p>Com carinho,<br>Cozinha BoloFlix</p>"
    )


class Notifier:
    """Sends HTML emails through Resend using the given settings.

    Args:
        settings: Application settings (API key, sender, operator address).
        transport: Optional httpx transport, used by tests to stand in for
            the Resend API.
    """

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._settings = settings
        self._transport = transport

    @property
    def enabled(self) -> bool:
        return bool(self._settings.resend_api_key)

    async def send(self, recipient: str, subject: str, html_body: str) -> bool:
        """Deliver one email. Returns True on a 2xx from Resend.

        Failures are logged and reported as False, never raised.
        """
        if not self.enabled:
            logger.warning("RESEND_API_KEY not set; skipping email to %s", recipient)
            return False

        payload = {
            "from": self._settings.email_from,
            "to": [recipient],
            "subject": subject,
            "html": html_body,
        }
        headers = {"Authorization": f"Bearer {self._settings.resend_api_key}"}

        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=self._settings.email_timeout_seconds,
            ) as client:
                response = await client.post(self._settings.resend_api_url, json=payload, headers=headers)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Resend rejected email to %s: %s %s",
                recipient,
                exc.response.status_code,
                exc.response.text,
            )
            return False
        except httpx.HTTPError:
            logger.exception("Failed to send email to %s", recipient)
            return False
        except Exception:
            logger.exception("Unexpected error sending email to %s", recipient)
            return False

        logger.info("Email '%s' sent to %s", subject, recipient)
        return True

    async def notify_new_subscription(self, subscription: SubscriptionResponse) -> None:
        """Tell the operator about a new order and welcome the customer.

        The two sends are independent; one failing does not skip the other.
        """
        operator = self._settings.notification_email
        if operator:
            await self.send(operator, OPERATOR_SUBJECT, render_operator_email(subscription))
        else:
            logger.warning("NOTIFICATION_EMAIL not set; operator not notified of subscription %s", subscription.id)

        if subscription.customer_email:
            await self.send(subscription.customer_email, CUSTOMER_SUBJECT, render_customer_email(subscription))
