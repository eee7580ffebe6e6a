"""Registration and lead capture forms."""

from django import forms

PLAYER_TYPES = ("full_season", "guest")


class IntakeForm(forms.Form):
    """Form reporting all its errors as one message."""

    def error_message(self):
        """Return the validation errors joined in a single message."""
        return ", ".join(message for errors in self.errors.values() for message in errors)


class LeadSignupForm(IntakeForm):
    """Free guide signup."""

    email = forms.EmailField(
        error_messages={
            "required": "Please enter a valid email address.",
            "invalid": "Please enter a valid email address.",
        }
    )
    first_name = forms.CharField(required=False, max_length=150)
    last_name = forms.CharField(required=False, max_length=150)
    traffic_source = forms.CharField(required=False, max_length=255)

    def clean_traffic_source(self):
        """Track unknown acquisition channels explicitly."""
        return self.cleaned_data["traffic_source"] or "Unknown"


class TryoutRegistrationForm(IntakeForm):
    """Tryout registration, submitted once the tryout fee is paid."""

    first_name = forms.CharField(max_length=150, error_messages={"required": "First name is required"})
    last_name = forms.CharField(max_length=150, error_messages={"required": "Last name is required"})
    email = forms.EmailField(
        error_messages={"required": "Valid email is required", "invalid": "Valid email is required"}
    )
    phone = forms.CharField(required=False, max_length=50)
    date_of_birth = forms.CharField(required=False, max_length=50)
    position = forms.CharField(required=False, max_length=50)
    experience = forms.CharField(required=False, max_length=50)
    tryout_date = forms.CharField(required=False, max_length=50)
    payment_intent_id = forms.CharField(max_length=255, error_messages={"required": "Payment verification failed"})


class SeasonRegistrationForm(IntakeForm):
    """Season registration, submitted once paid in full or the subscription is active."""

    first_name = forms.CharField(max_length=150, error_messages={"required": "First name is required"})
    last_name = forms.CharField(max_length=150, error_messages={"required": "Last name is required"})
    email = forms.EmailField(
        error_messages={"required": "Valid email is required", "invalid": "Valid email is required"}
    )
    age = forms.IntegerField(required=False, min_value=0)
    position = forms.CharField(required=False, max_length=100)
    tracksuit_size = forms.CharField(required=False, max_length=20)
    practice_jersey_size = forms.CharField(required=False, max_length=20)
    shorts_size = forms.CharField(required=False, max_length=20)
    socks_size = forms.CharField(required=False, max_length=20)
    player_type = forms.CharField(required=False, max_length=20)
    payment_amount = forms.FloatField(required=False, min_value=0)
    payment_frequency = forms.CharField(required=False, max_length=20)
    name_personalization = forms.CharField(required=False, max_length=5)
    subscription_id = forms.CharField(required=False, max_length=255)
    payment_intent_id = forms.CharField(required=False, max_length=255)
    customer_id = forms.CharField(required=False, max_length=255)

    def clean_age(self):
        """Missing age is recorded as 0."""
        return self.cleaned_data["age"] or 0

    def clean_payment_amount(self):
        """Missing amount is recorded as 0."""
        return self.cleaned_data["payment_amount"] or 0

    def clean_player_type(self):
        """Unknown player types are full season players."""
        player_type = self.cleaned_data["player_type"]
        return player_type if player_type in PLAYER_TYPES else "full_season"

    def clean_payment_frequency(self):
        """Anything but a full payment is a monthly subscription."""
        return self.cleaned_data["payment_frequency"] or "monthly"

    def clean_name_personalization(self):
        """The form posts "1" when personalization is selected."""
        return self.cleaned_data["name_personalization"] == "1"

    def clean(self):
        """Require the payment linking the registration to the processor."""
        cleaned_data = super().clean()
        if not cleaned_data.get("payment_intent_id") and not cleaned_data.get("subscription_id"):
            raise forms.ValidationError("Payment verification failed")
        return cleaned_data
