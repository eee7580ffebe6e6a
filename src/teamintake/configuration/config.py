"""Runtime configuration of the intake integrations."""

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class IntakeConfig:
    """
    Credentials and addresses used by the integrations.

    Built once from a `CredentialChain` and handed to the backends, notifiers and
    views needing it. Each field is looked up under its uppercased name prefixed
    with `INTAKE_`, except credentials that keep their vendor name (see `NAMES`).
    """

    stripe_webhook_secret: str | None = None
    airtable_api_key: str | None = None
    airtable_base_id: str | None = None
    airtable_season_table_id: str | None = None
    airtable_tryout_table_id: str | None = None
    mailchimp_api_key: str | None = None
    mailchimp_list_id: str | None = None
    admin_email: str = "info@newteamfc.com"
    team_email: str = "goal@newteamfc.com"
    from_email: str = "Newteam F.C. <noreply@newteamfc.com>"
    notice_from_email: str | None = None
    season_label: str = "Spring 2026"

    NAMES = {
        "stripe_webhook_secret": "STRIPE_WEBHOOK_SECRET",
        "airtable_api_key": "AIRTABLE_API_KEY",
        "airtable_base_id": "AIRTABLE_BASE_ID",
        "airtable_season_table_id": "AIRTABLE_SEASON_TABLE_ID",
        "airtable_tryout_table_id": "AIRTABLE_TRYOUT_TABLE_ID",
        "mailchimp_api_key": "MAILCHIMP_API_KEY",
        "mailchimp_list_id": "MAILCHIMP_LIST_ID",
    }

    @classmethod
    def credential_name(cls, field_name):
        """Return the name a field is looked up under."""
        return cls.NAMES.get(field_name, f"INTAKE_{field_name.upper()}")

    @classmethod
    def resolve(cls, chain):
        """Resolve every field through the credential chain."""
        values = {}
        for config_field in fields(cls):
            value = chain.resolve(cls.credential_name(config_field.name))
            if value is not None:
                values[config_field.name] = value
        return cls(**values)

    @classmethod
    def missing(cls, values):
        """Return the lookup names of the fields in `values` having no value."""
        return [cls.credential_name(name) for name, value in values.items() if not value]

    @classmethod
    def missing_message(cls, values):
        """Describe the missing credentials, empty when nothing is missing."""
        missing = cls.missing(values)
        return f"Missing credentials: {', '.join(missing)}" if missing else ""
