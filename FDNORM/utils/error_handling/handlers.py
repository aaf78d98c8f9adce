"""Standardized error handling for FDNORM steps.

Provides consistent error handling, logging, and error response creation.
"""

from typing import Dict, Any, Optional, List
from dataclasses import dataclass, field
from datetime import datetime
import traceback

from FDNORM.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class ErrorContext:
    """Context information for error handling."""
    step_id: str
    phase: int
    table_name: Optional[str] = None
    attribute_names: List[str] = field(default_factory=list)
    source_line: Optional[str] = None
    additional_context: Dict[str, Any] = field(default_factory=dict)


@dataclass
class StepError(Exception):
    """Standardized error for step failures."""
    message: str
    context: ErrorContext
    original_exception: Optional[Exception] = None
    error_type: str = "step_error"

    def __str__(self) -> str:
        return f"[{self.context.step_id}] {self.message}"


@dataclass
class DDLParseError(StepError):
    """DDL text could not be turned into an attribute universe."""
    message: str = "DDL text does not contain a parenthesized column list"
    context: ErrorContext = field(default_factory=lambda: ErrorContext(step_id="1.1", phase=1))
    error_type: str = "ddl_parse_error"


@dataclass
class AttributeLimitExceededError(StepError):
    """Universe too large for exhaustive candidate-key enumeration."""
    message: str = ""
    context: ErrorContext = field(default_factory=lambda: ErrorContext(step_id="2.1", phase=2))
    error_type: str = "attribute_limit_exceeded"
    attribute_count: int = 0
    limit: int = 0

    def __post_init__(self) -> None:
        if not self.message:
            self.message = (
                f"universe has {self.attribute_count} attributes, exceeding the "
                f"enumeration limit of {self.limit}"
            )
        self.context.additional_context.setdefault("attribute_count", self.attribute_count)
        self.context.additional_context.setdefault("limit", self.limit)


@dataclass
class NoCandidateKeyError(StepError):
    """Decomposition cannot guarantee key preservation without a candidate key."""
    message: str = "no key available to complete decomposition"
    context: ErrorContext = field(default_factory=lambda: ErrorContext(step_id="3.1", phase=3))
    error_type: str = "no_candidate_key"


def log_error_with_context(
    error: Exception,
    context: ErrorContext,
    level: str = "error"
) -> None:
    """
    Log error with full context information.

    Args:
        error: The exception that occurred
        context: Error context information
        level: Log level ("error", "warning", "critical")
    """
    log_msg_parts = [
        f"Error in {context.step_id} (Phase {context.phase})"
    ]

    if context.table_name:
        log_msg_parts.append(f"Table: {context.table_name}")
    if context.attribute_names:
        log_msg_parts.append(f"Attributes: {', '.join(context.attribute_names)}")
    if context.source_line:
        log_msg_parts.append(f"Line: {context.source_line}")

    log_msg = " | ".join(log_msg_parts)

    if level == "critical":
        logger.critical(f"{log_msg}: {error}", exc_info=True)
    elif level == "warning":
        logger.warning(f"{log_msg}: {error}", exc_info=True)
    else:
        logger.error(f"{log_msg}: {error}", exc_info=True)

    if context.additional_context:
        logger.debug(f"Additional context: {context.additional_context}")


def create_error_response(
    error: Exception,
    context: ErrorContext,
) -> Dict[str, Any]:
    """
    Create standardized error response dictionary.

    Args:
        error: The exception that occurred
        context: Error context information

    Returns:
        Dictionary with error information
    """
    error_response = {
        "success": False,
        "error": {
            "type": type(error).__name__,
            "message": error.message if isinstance(error, StepError) else str(error),
            "step_id": context.step_id,
            "phase": context.phase,
            "timestamp": datetime.now().isoformat(),
        }
    }

    if isinstance(error, StepError):
        error_response["error"]["error_type"] = error.error_type
    if context.table_name:
        error_response["error"]["table_name"] = context.table_name
    if context.attribute_names:
        error_response["error"]["attribute_names"] = list(context.attribute_names)
    if context.source_line:
        error_response["error"]["source_line"] = context.source_line

    # Traceback for debugging (truncated)
    if error.__traceback__ is not None:
        tb_str = "".join(traceback.format_tb(error.__traceback__))
        error_response["error"]["traceback"] = tb_str[-500:] if len(tb_str) > 500 else tb_str

    if context.additional_context:
        error_response["error"]["additional_context"] = context.additional_context

    return error_response


def handle_step_error(
    error: Exception,
    context: Optional[ErrorContext] = None,
    log_level: str = "error",
    reraise: bool = False
) -> Optional[Dict[str, Any]]:
    """
    Handle step error with standardized logging and response creation.

    Args:
        error: The exception that occurred
        context: Error context information; a StepError's own context is used when omitted
        log_level: Log level ("error", "warning", "critical")
        reraise: If True, re-raise the exception after handling

    Returns:
        Error response dictionary

    Raises:
        StepError: If reraise=True. StepErrors are re-raised as-is, anything else is wrapped.
    """
    if context is None:
        if isinstance(error, StepError):
            context = error.context
        else:
            context = ErrorContext(step_id="unknown", phase=0)

    log_error_with_context(error, context, level=log_level)
    error_response = create_error_response(error, context)

    if reraise:
        if isinstance(error, StepError):
            raise error
        raise StepError(
            message=str(error),
            context=context,
            original_exception=error,
            error_type=type(error).__name__
        ) from error

    return error_response
