"""
Alert Header Utilities

Builds the ``X-{app}-alert`` / ``X-{app}-error`` / ``X-{app}-params`` headers
that tell a client UI which notification to show after a REST call.

With translation enabled the alert carries a message key
(``crownApp.delivery.created``) for the client to translate; otherwise it
carries a ready-to-display English sentence.
"""

import logging
from typing import Dict
from urllib.parse import quote_plus

from constants import HeaderNames

logger = logging.getLogger(__name__)


def create_alert(application_name: str, message: str, param: str) -> Dict[str, str]:
    """
    Build alert headers.

    Args:
        application_name: Prefix for the header names
        message: Alert message or message key
        param: Parameter for the message (form-url-encoded in the header)

    Returns:
        Header name to value mapping
    """
    return {
        HeaderNames.alert(application_name): message,
        HeaderNames.params(application_name): quote_plus(param),
    }


def create_entity_creation_alert(application_name: str, enable_translation: bool,
                                 entity_name: str, param: str) -> Dict[str, str]:
    message = (
        f"{application_name}.{entity_name}.created" if enable_translation
        else f"A new {entity_name} is created with identifier {param}"
    )
    return create_alert(application_name, message, param)


def create_entity_update_alert(application_name: str, enable_translation: bool,
                               entity_name: str, param: str) -> Dict[str, str]:
    message = (
        f"{application_name}.{entity_name}.updated" if enable_translation
        else f"A {entity_name} is updated with identifier {param}"
    )
    return create_alert(application_name, message, param)


def create_entity_deletion_alert(application_name: str, enable_translation: bool,
                                 entity_name: str, param: str) -> Dict[str, str]:
    message = (
        f"{application_name}.{entity_name}.deleted" if enable_translation
        else f"A {entity_name} is deleted with identifier {param}"
    )
    return create_alert(application_name, message, param)


def create_failure_alert(application_name: str, enable_translation: bool, entity_name: str,
                         error_key: str, default_message: str) -> Dict[str, str]:
    """
    Build failure alert headers.

    The params header carries the entity name rather than an identifier.
    """
    logger.error(f"Entity processing failed, {default_message}")
    message = f"error.{error_key}" if enable_translation else default_message
    return {
        HeaderNames.error(application_name): message,
        HeaderNames.params(application_name): entity_name,
    }
