import os

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name, default):
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


class Config:
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///locavote.db")
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-only-change-me")

    # Shared secret for the results endpoints; empty disables them.
    RESULTS_VIEW_KEY = os.getenv("RESULTS_VIEW_KEY", "")

    EVENT_SCOPING = _env_flag("EVENT_SCOPING", True)

    # "none" sums raw points, "multiply" scales the sum by the location weight.
    RESULTS_WEIGHTING = os.getenv("RESULTS_WEIGHTING", "none").strip().lower()
    COMMENT_SEPARATOR = os.getenv("COMMENT_SEPARATOR", " | ")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
