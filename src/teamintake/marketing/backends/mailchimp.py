"""Mailchimp marketing list integration."""

import logging

import requests

from teamintake.configuration.config import IntakeConfig
from teamintake.marketing.backends import ContactData, subscriber_hash
from teamintake.results import ErrorKind, Result, error_kind_for_exception, error_kind_for_status

from .base import BaseBackend

logger = logging.getLogger(__name__)

DEFAULT_TAGS = frozenset({"Website Contact Form", "Newteam FC"})


class MailchimpBackend(BaseBackend):
    """
    Mailchimp marketing list integration.

    Handles:
    - Subscribing contacts to the audience with merge fields (FNAME, LNAME, ...)
    - Tag based segmentation, tags being added to existing members
    """

    member_exists_title = "Member Exists"

    def __init__(self, config, api_key: str | None = None, list_id: str | None = None, timeout: int = 10):
        """Configure the Mailchimp backend, credentials default to the intake configuration."""
        self._api_key = api_key or config.mailchimp_api_key
        self.list_id = list_id or config.mailchimp_list_id
        self.timeout = timeout

    @property
    def data_center(self):
        """Return the data center, API keys end with "-usXX"."""
        if not self._api_key or "-" not in self._api_key:
            return None
        return self._api_key.rsplit("-", 1)[1]

    def _members_url(self, list_id):
        return f"https://{self.data_center}.api.mailchimp.com/3.0/lists/{list_id}/members"

    def _post(self, url, payload, timeout):
        return requests.post(
            url,
            json=payload,
            auth=("anystring", self._api_key),
            timeout=timeout or self.timeout,
        )

    def upsert_contact(self, contact_data: ContactData, timeout: int = None) -> Result:
        """
        Subscribe a contact to the list, or update its tags if it is already a member.

        Args:
            contact_data: Contact information, tags and merge fields
            timeout: API request timeout in seconds

        Returns:
            Result: Mailchimp API response on success

        """
        list_id = contact_data.list_id or self.list_id
        missing = IntakeConfig.missing_message({"mailchimp_api_key": self._api_key, "mailchimp_list_id": list_id})
        if missing:
            return Result.failure(ErrorKind.CONFIGURATION, missing)
        if not self.data_center:
            return Result.failure(ErrorKind.CONFIGURATION, "MAILCHIMP_API_KEY has no data center suffix")

        tags = sorted(contact_data.tags or DEFAULT_TAGS)
        payload = {
            "email_address": contact_data.email,
            "status": "subscribed",
            "merge_fields": {
                "FNAME": contact_data.first_name,
                "LNAME": contact_data.last_name,
                **contact_data.merge_fields,
            },
            "tags": tags,
        }

        try:
            response = self._post(self._members_url(list_id), payload, timeout)
        except requests.RequestException as err:
            logger.error("Mailchimp API error: %s", err)
            return Result.failure(error_kind_for_exception(err), "Failed to connect to Mailchimp")

        if response.status_code in (requests.codes.ok, requests.codes.created):
            return Result.success(self._json(response), f"Successfully subscribed with tags: {', '.join(tags)}")

        body = self._json(response)
        if response.status_code == requests.codes.bad_request and body.get("title") == self.member_exists_title:
            return self.update_tags(contact_data.email, tags, list_id, timeout)

        logger.error("Mailchimp API response: %s", body)
        return Result.failure(error_kind_for_status(response.status_code), body.get("detail", "Failed to subscribe"))

    def update_tags(self, email, tags, list_id, timeout=None) -> Result:
        """Activate tags on an existing member, tags already set are preserved."""
        url = f"{self._members_url(list_id)}/{subscriber_hash(email)}/tags"
        payload = {"tags": [{"name": tag, "status": "active"} for tag in tags]}

        try:
            response = self._post(url, payload, timeout)
        except requests.RequestException as err:
            logger.error("Mailchimp tag update error: %s", err)
            return Result.failure(error_kind_for_exception(err), "Failed to connect to Mailchimp")

        if response.status_code != requests.codes.no_content:
            logger.error("Mailchimp tag update response: %s", self._json(response))
            return Result.failure(error_kind_for_status(response.status_code), "Failed to update tags")

        return Result.success({}, "Email already subscribed, tags updated")

    @staticmethod
    def _json(response):
        try:
            return response.json()
        except ValueError:
            return {}
