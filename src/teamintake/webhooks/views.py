"""Payment processor webhook views."""

import logging

from django.http import JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from teamintake.configuration import intake_config
from teamintake.webhooks.dispatcher import EventDispatcher
from teamintake.webhooks.events import construct_event
from teamintake.webhooks.exceptions import MalformedEventError, WebhookVerificationError

logger = logging.getLogger(__name__)


@method_decorator(csrf_exempt, name="dispatch")
class StripeWebhookView(View):
    """
    Receive signed Stripe events.

    Returns:
    - 200 OK once the event is verified, whether it was handled or ignored
    - 400 Bad Request if the signature or the payload is invalid, nothing is done

    Downstream integration failures are logged by the dispatcher and still answer
    200: Stripe would otherwise send the event again.
    """

    http_method_names = ["post"]
    signature_header = "HTTP_STRIPE_SIGNATURE"

    def post(self, request, *args, **kwargs):
        """Verify and dispatch the event."""
        secret = intake_config.stripe_webhook_secret
        if not secret:
            logger.error("Stripe webhook: no signing secret configured, rejecting event")
            return self.error_response("Webhook is not configured")

        try:
            event = construct_event(request.body, request.META.get(self.signature_header, ""), secret)
        except WebhookVerificationError as err:
            logger.error("Stripe webhook: invalid signature: %s", err)
            return self.error_response("Invalid signature")
        except MalformedEventError as err:
            logger.error("Stripe webhook: invalid payload: %s", err)
            return self.error_response("Invalid payload")

        EventDispatcher().dispatch(event)
        return JsonResponse({"received": True})

    def error_response(self, message):
        """Create a 400 response without any detail about the failure."""
        return JsonResponse({"received": False, "error": message}, status=400)
