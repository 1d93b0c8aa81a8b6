"""
Theme Validator - diagnostic report over a theme.

Validates:
- Palette references resolve (first failure only, same as the generators)
- Palette is not empty
- Light and dark modes define the same semantic keys
- Palette colors are used by some semantic token
- Spacing/size values that the strict value grammar would reject
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from chuk_mcp_theme.errors import ParseError, PaletteReferenceError
from chuk_mcp_theme.models.theme import Theme
from chuk_mcp_theme.tokens.parser import parse_value
from chuk_mcp_theme.tokens.resolver import (
    is_palette_reference,
    palette_ref_key,
    validate_theme_palette_references,
)


class ValidationSeverity(str, Enum):
    """Severity level for validation issues."""

    ERROR = "error"  # Prevents generation
    WARNING = "warning"  # Generation possible but output may surprise
    INFO = "info"  # Informational only


@dataclass
class ValidationIssue:
    """A single validation issue."""

    severity: ValidationSeverity
    code: str
    message: str
    location: str | None = None

    def __str__(self) -> str:
        prefix = f"[{self.severity.value.upper()}]"
        location = f" at {self.location}" if self.location else ""
        return f"{prefix} {self.code}: {self.message}{location}"

    def to_dict(self) -> dict[str, str | None]:
        return {
            "severity": self.severity.value,
            "code": self.code,
            "message": self.message,
            "location": self.location,
        }


class ValidationResult:
    """Result of validating a theme."""

    def __init__(self) -> None:
        self.issues: list[ValidationIssue] = []

    def add(
        self,
        severity: ValidationSeverity,
        code: str,
        message: str,
        location: str | None = None,
    ) -> None:
        self.issues.append(ValidationIssue(severity, code, message, location))

    @property
    def is_valid(self) -> bool:
        """Return True if no errors (warnings/info are OK)."""
        return not self.errors

    @property
    def errors(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == ValidationSeverity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == ValidationSeverity.WARNING]

    def codes(self) -> list[str]:
        """Issue codes in report order."""
        return [i.code for i in self.issues]

    def __bool__(self) -> bool:
        return self.is_valid

    def __str__(self) -> str:
        if not self.issues:
            return "Validation passed: no issues found"
        return "\n".join(str(issue) for issue in self.issues)


class ThemeValidator:
    """Validates theme structure and references."""

    def validate(self, theme: Theme) -> ValidationResult:
        """
        Validate a theme.

        Args:
            theme: The theme to validate

        Returns:
            ValidationResult with any issues found
        """
        result = ValidationResult()

        self._validate_references(theme, result)
        self._validate_palette(theme, result)
        self._validate_modes(theme, result)
        self._validate_usage(theme, result)
        self._validate_grammar(theme, result)

        return result

    def _validate_references(self, theme: Theme, result: ValidationResult) -> None:
        """Run the fail-fast reference check; report its first failure."""
        try:
            validate_theme_palette_references(theme)
        except PaletteReferenceError as e:
            result.add(ValidationSeverity.ERROR, "INVALID_PALETTE_REF", str(e), e.field_name)

    def _validate_palette(self, theme: Theme, result: ValidationResult) -> None:
        if not theme.base.palette:
            result.add(
                ValidationSeverity.WARNING,
                "EMPTY_PALETTE",
                "Theme defines no palette colors",
                "base.palette",
            )

    def _validate_modes(self, theme: Theme, result: ValidationResult) -> None:
        """Light keys drive the --color-* aliases; dark keys should match them."""
        light_keys = set(theme.light.bg)
        dark_keys = set(theme.dark.bg)

        for key in theme.dark.bg:
            if key not in light_keys:
                result.add(
                    ValidationSeverity.WARNING,
                    "MODE_KEY_MISMATCH",
                    f"'{key}' is defined for dark mode only and gets no --color-{key} alias",
                    f"dark.bg.{key}",
                )
        for key in theme.light.bg:
            if key not in dark_keys:
                result.add(
                    ValidationSeverity.WARNING,
                    "MODE_KEY_MISMATCH",
                    f"'{key}' has no dark mode value and keeps its light color in .dark",
                    f"light.bg.{key}",
                )

    def _validate_usage(self, theme: Theme, result: ValidationResult) -> None:
        used: set[str] = set()
        for tokens in (theme.light.bg, theme.dark.bg, theme.base.spacing, theme.base.size):
            for value in tokens.values():
                if is_palette_reference(value):
                    used.add(palette_ref_key(value))

        for key in theme.base.palette:
            if key not in used:
                result.add(
                    ValidationSeverity.INFO,
                    "UNUSED_PALETTE_COLOR",
                    f"Palette color '{key}' is not referenced by any token",
                    f"base.palette.{key}",
                )

    def _validate_grammar(self, theme: Theme, result: ValidationResult) -> None:
        """Literal CSS lengths pass through; note values the strict grammar rejects."""
        for prefix, tokens in (("base.spacing", theme.base.spacing), ("base.size", theme.base.size)):
            for key, value in tokens.items():
                try:
                    parse_value(value)
                except ParseError as e:
                    result.add(
                        ValidationSeverity.INFO,
                        "UNPARSEABLE_VALUE",
                        f"'{value}' is emitted verbatim ({e})",
                        f"{prefix}.{key}",
                    )


def validate_theme(theme: Theme) -> ValidationResult:
    """
    Convenience function to validate a theme.

    Args:
        theme: The theme to validate

    Returns:
        ValidationResult with any issues found
    """
    return ThemeValidator().validate(theme)
