"""Exception hierarchy for inputmask.

Only construction-time problems are reported through exceptions: a template
function that returns something unusable, a malformed pattern string, or a
preset that cannot be found or loaded. The ``mask``/``unmask`` operations
themselves never raise; they degrade to ``None``.
"""

from typing import Any, Dict, List, Optional


class InputMaskError(Exception):
    """Base exception for all inputmask errors.

    Attributes:
        message: Human-readable error description
        error_code: Machine-readable error identifier
        context: Additional error context and metadata
        recovery_suggestions: List of suggested recovery actions
        component: Component where the error originated
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        recovery_suggestions: Optional[List[str]] = None,
        component: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self._default_error_code()
        self.context = context or {}
        self.recovery_suggestions = recovery_suggestions or []
        self.component = component or self._infer_component()

    def _default_error_code(self) -> str:
        """Generate default error code based on exception class name."""
        return self.__class__.__name__.upper().replace("ERROR", "_ERROR")

    def _infer_component(self) -> str:
        """Infer component name from exception class."""
        name = self.__class__.__name__.lower()
        if "template" in name:
            return "template"
        elif "pattern" in name:
            return "pattern"
        elif "preset" in name:
            return "preset"
        elif "configuration" in name:
            return "config"
        else:
            return "core"

    def add_context(self, key: str, value: Any) -> None:
        """Add additional context to the error."""
        self.context[key] = value

    def add_recovery_suggestion(self, suggestion: str) -> None:
        """Add a recovery suggestion to help users resolve the error."""
        if suggestion not in self.recovery_suggestions:
            self.recovery_suggestions.append(suggestion)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to structured dictionary for logging/reporting."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "component": self.component,
            "context": self.context,
            "recovery_suggestions": self.recovery_suggestions,
        }


class TemplateError(InputMaskError):
    """Raised when a template function returns unusable markers.

    Used when the template function does not return a sequence, or when
    ``strict_markers`` is enabled and a marker is not a string.
    """

    def __init__(
        self,
        message: str,
        marker_index: Optional[int] = None,
        actual_value: Optional[Any] = None,
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)
        if marker_index is not None:
            self.add_context("marker_index", marker_index)
        if actual_value is not None:
            self.add_context("actual_value", repr(actual_value))


class PatternError(InputMaskError):
    """Raised when a pattern string cannot be turned into a template."""

    def __init__(
        self,
        message: str,
        pattern: Optional[str] = None,
        position: Optional[int] = None,
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)
        if pattern is not None:
            self.add_context("pattern", pattern)
        if position is not None:
            self.add_context("position", position)


class PresetError(InputMaskError):
    """Raised when a preset is unknown or a preset file fails to load."""

    def __init__(
        self,
        message: str,
        preset_name: Optional[str] = None,
        preset_file: Optional[str] = None,
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)
        if preset_name:
            self.add_context("preset_name", preset_name)
        if preset_file:
            self.add_context("preset_file", preset_file)


class ConfigurationError(InputMaskError):
    """Raised when configuration is invalid or incomplete."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)
        if config_key:
            self.add_context("config_key", config_key)


def create_template_error(
    message: str,
    marker_index: int,
    actual: Any,
) -> TemplateError:
    """Create a template error for a marker of the wrong type."""
    error = TemplateError(
        message=message,
        marker_index=marker_index,
        actual_value=actual,
    )
    error.add_recovery_suggestion(
        "Return only the token and literal strings from the template function"
    )
    return error


def create_preset_error(
    message: str,
    preset_name: str,
    available: List[str],
) -> PresetError:
    """Create a preset error listing the presets that do exist."""
    error = PresetError(message=message, preset_name=preset_name)
    error.add_context("available_presets", sorted(available))
    error.add_recovery_suggestion(
        f"Use one of: {', '.join(sorted(available))}"
    )
    return error
