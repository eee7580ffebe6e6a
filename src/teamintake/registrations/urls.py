"""Registration and lead capture URLs."""

from django.urls import path

from .views import LeadSignupView, SeasonRegistrationView, TryoutRegistrationView

urlpatterns = [
    path("lead-signup/", LeadSignupView.as_view(), name="lead_signup"),
    path("tryout-registration/", TryoutRegistrationView.as_view(), name="tryout_registration"),
    path("season-registration/", SeasonRegistrationView.as_view(), name="season_registration"),
]
