"""
Contract-violation errors and validation helpers.

Game-rule failures (not enough MP, unknown spell, a fumble) are reported as
ordinary result values by the resolvers. The helpers below are reserved for
programming errors by the caller: each one logs the violation through
catchery and raises EngineContractError.
"""

from typing import Any, Optional

from catchery import log_error


class EngineContractError(ValueError):
    """Raised when a caller breaks the contract of an engine function."""


def contract_violation(
    message: str, context: Optional[dict[str, Any]] = None
) -> EngineContractError:
    """
    Logs a contract violation and builds the matching exception.

    Args:
        message: What the caller got wrong
        context: Extra fields attached to the log record

    Returns:
        EngineContractError: The exception, ready to be raised
    """
    log_error(message, context or {})
    return EngineContractError(message)


def _reject(
    message: str,
    param_name: str,
    value: Any,
    context: Optional[dict[str, Any]],
) -> EngineContractError:
    return contract_violation(
        message,
        {
            **(context or {}),
            "param_name": param_name,
            "value": repr(value),
            "type": type(value).__name__,
        },
    )


def validate_required_object(
    obj: Any,
    param_name: str,
    required_attributes: Optional[list[str]] = None,
    context: Optional[dict[str, Any]] = None,
) -> Any:
    """
    Checks that a combatant, ability or other argument was actually passed.

    Args:
        obj: The argument to check
        param_name: Argument name used in the error message
        required_attributes: Attributes the argument must expose
        context: Extra fields attached to the log record

    Returns:
        Any: obj, unchanged

    Raises:
        EngineContractError: If obj is None or lacks an attribute
    """
    if obj is None:
        raise _reject(f"{param_name} is required but was None", param_name, obj, context)

    missing = [name for name in required_attributes or [] if not hasattr(obj, name)]
    if missing:
        raise _reject(
            f"{param_name} missing required attributes: {missing}",
            param_name,
            obj,
            {**(context or {}), "missing_attributes": missing},
        )
    return obj


def require_int(
    value: Any, param_name: str, context: Optional[dict[str, Any]] = None
) -> int:
    """
    Checks that a modifier or bonus is a plain integer.

    Booleans are rejected even though Python treats them as integers.

    Raises:
        EngineContractError: If value is not an int
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise _reject(
            f"{param_name} must be an integer, got: {value!r}", param_name, value, context
        )
    return value


def require_non_empty_string(
    value: Any, param_name: str, context: Optional[dict[str, Any]] = None
) -> str:
    """Checks that a catalog id is a non-empty string."""
    if not isinstance(value, str) or not value:
        raise _reject(
            f"{param_name} must be a non-empty string, got: {value!r}",
            param_name,
            value,
            context,
        )
    return value
