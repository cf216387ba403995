"""Consistent error logging helpers for timeglance.

Each helper tags the message with a category prefix so the debug log can be
filtered by the layer that failed.
"""

from typing import Any, Optional

from .logger import log


def log_validation_error(field: str, value: Any, exception: Exception) -> None:
    """Log validation errors with consistent formatting.

    Args:
        field: Name of the field being validated
        value: The value that failed validation
        exception: The exception that was raised
    """
    error_type = type(exception).__name__
    log.error(f"[VALIDATION] Failed validating {field}='{value}': {error_type}: {exception}")


def log_ui_error(component: str, action: str, exception: Exception) -> None:
    """Log UI component errors with consistent formatting.

    Args:
        component: Name of the UI component (e.g., "table", "label")
        action: The action being performed (e.g., "refreshing rows")
        exception: The exception that was raised
    """
    error_type = type(exception).__name__
    log.error(f"[UI] Failed {action} on {component}: {error_type}: {exception}")


def log_error_with_context(message: str, exception: Exception, context: Optional[dict] = None) -> None:
    """Log an error with additional context information.

    Args:
        message: Main error message
        exception: The exception that was raised
        context: Optional dictionary of context information
    """
    error_type = type(exception).__name__
    base_msg = f"{message}: {error_type}: {exception}"

    if context:
        context_str = ", ".join(f"{k}={v}" for k, v in context.items())
        log.error(f"{base_msg} (Context: {context_str})")
    else:
        log.error(base_msg)
