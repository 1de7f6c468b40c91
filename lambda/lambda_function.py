"""
Thrissur Facts Alexa Skill - Lambda Function.

This module configures and exports the Alexa skill lambda handler.
All request handlers are defined in fact_skill.handlers.
"""

import logging
import os

from ask_sdk_core.skill_builder import CustomSkillBuilder

from fact_skill import data
from fact_skill.handlers import REQUEST_HANDLERS
from fact_skill.interceptors import (
    CatchAllExceptionHandler,
    LocalizationInterceptor,
    RequestLogger,
    ResponseLogger,
)
from fact_skill.l10n import validate_bundles


def parse_log_level(value) -> int:
    """Map a level name like "debug" to its number, defaulting to INFO."""
    level = logging.getLevelName((value or "INFO").strip().upper())
    if not isinstance(level, int):
        return logging.INFO
    return level


# Log level for the skill's loggers (configurable via environment variable)
LOG_LEVEL = parse_log_level(os.environ.get("LOG_LEVEL"))

# Reject envelopes addressed to another skill when set
SKILL_ID = os.environ.get("SKILL_ID") or None

CUSTOM_USER_AGENT = "sample/basic-fact/v2"

# Configure logging
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)
logging.getLogger("fact_skill").setLevel(LOG_LEVEL)

# Fail at cold start rather than mid-request on a broken string table
validate_bundles(data.LANGUAGE_STRINGS, data.REQUIRED_KEYS, data.DEFAULT_LOCALE)


def build_skill_builder(skill_id=None) -> CustomSkillBuilder:
    """Create a skill builder with all handlers and interceptors registered."""
    sb = CustomSkillBuilder()
    sb.skill_id = skill_id
    sb.custom_user_agent = CUSTOM_USER_AGENT

    # Add request handlers (order matters - first match wins)
    for handler_class in REQUEST_HANDLERS:
        sb.add_request_handler(handler_class())

    # Add exception handler
    sb.add_exception_handler(CatchAllExceptionHandler())

    # Add interceptors (localization must run before anything reads "t")
    sb.add_global_request_interceptor(LocalizationInterceptor())
    sb.add_global_request_interceptor(RequestLogger())
    sb.add_global_response_interceptor(ResponseLogger())

    return sb


sb = build_skill_builder(SKILL_ID)

# Skill instance for invoking with model objects
skill = sb.create()

# Expose the lambda handler
lambda_handler = sb.lambda_handler()
