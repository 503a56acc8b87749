"""icu-encode — rewrite go-i18n message files into ICU MessageFormat."""

APP_NAME = "icu-encode"

__version__ = "0.1.0"
