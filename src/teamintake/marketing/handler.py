"""Marketing backend handler."""

from teamintake.handler import BackendHandler
from teamintake.marketing.exceptions import MarketingInvalidBackendError


class MarketingHandler(BackendHandler):
    """Marketing handler managing the backend instantiation."""

    setting_name = "INTAKE_MARKETING"
    default_backend = "teamintake.marketing.backends.mailchimp.MailchimpBackend"
    invalid_backend_error = MarketingInvalidBackendError
