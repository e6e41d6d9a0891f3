"""Runtime settings, read from the environment once at startup."""

import logging
import os

from pydantic import BaseModel

from .truthy import is_true

PACKAGE_LOGGER = "swagger2_validator"
LOG_FORMAT = "[%(name)s] %(levelname)s %(message)s"


class ValidatorSettings(BaseModel):
    """Switches for the parameter validator.

    debug: log every parameter validation at DEBUG level (SWAGGER2_DEBUG)
    coerce_scalars: turn numeric/boolean looking strings of non-body
        parameters into numbers/booleans before validation (SWAGGER2_COERCE)
    """

    debug: bool = False
    coerce_scalars: bool = True

    @classmethod
    def from_env(cls, environ=None) -> "ValidatorSettings":
        environ = os.environ if environ is None else environ
        settings = {"debug": is_true(environ.get("SWAGGER2_DEBUG"))}
        if "SWAGGER2_COERCE" in environ:
            settings["coerce_scalars"] = is_true(environ["SWAGGER2_COERCE"])
        return cls(**settings)


def configure_logging(settings: ValidatorSettings) -> logging.Logger:
    """Send package logs to stderr, at DEBUG when settings.debug is on."""
    log_level = logging.DEBUG if settings.debug else logging.WARNING

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(log_level)

    # Replace handlers from an earlier call instead of stacking them
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
