"""Static metadata describing Quiz Author."""

APP_NAME = "Quiz Author"
APP_VERSION = "0.1"
