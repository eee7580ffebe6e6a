"""Django settings for test project."""

from pathlib import Path

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = "django-insecure-test-key-for-development-only"  # noqa: S105

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = True

ALLOWED_HOSTS = ["*"]

# Application definition
INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "teamintake",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "test_project.urls"

CSRF_FAILURE_VIEW = "teamintake.registrations.views.csrf_failure"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
            ],
        },
    },
]

# Database
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

# Internationalization
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# Default primary key field type
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"

# Logging Configuration
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{levelname} {asctime} {module} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "INFO",
    },
}


# Test variables
#  - Credentials, no secrets directory is mounted in tests
INTAKE_SECRETS_DIR = BASE_DIR / "tests" / "no-secrets"

STRIPE_WEBHOOK_SECRET = "whsec_test_secret"  # noqa: S105
AIRTABLE_API_KEY = "airtable-test-key"
AIRTABLE_BASE_ID = "appTestBase"
AIRTABLE_SEASON_TABLE_ID = "tblSeason"
AIRTABLE_TRYOUT_TABLE_ID = "tblTryout"
MAILCHIMP_API_KEY = "mailchimp-test-key-us13"
MAILCHIMP_LIST_ID = "list123"

#  - Backends
INTAKE_RECORDS = {
    "BACKEND": "teamintake.records.backends.locmem.LocmemBackend",
}
INTAKE_MARKETING = {
    "BACKEND": "teamintake.marketing.backends.locmem.LocmemBackend",
}
