"""GrainDisplay Exception Hierarchy

Defines exceptions for settings-store failures with clear classification:
- CommandFailedError: the external tool failed (process-level failure)
- InvalidFormatError / ValueParseError: the tool answered, but not with a value
- ArgumentOverflowError: argument vector exceeded the client's fixed bound
- UnknownPresetError: caller asked for a preset that does not exist

Nothing here is retried. A failed write in the middle of a multi-key apply
leaves the earlier writes committed in the settings store.
"""

from typing import Optional, Sequence


class GrainDisplayError(RuntimeError):
    """Base class for every error raised by graindisplay."""


class CommandFailedError(GrainDisplayError):
    """Raised when the external settings tool exits non-zero or dies.

    THROW when:
    - Process exits with a non-zero status
    - Process is terminated by a signal
    - Executable cannot be spawned at all
    - Captured output exceeds the configured cap
    """

    def __init__(
        self,
        args: Sequence[str],
        message: str,
        returncode: Optional[int] = None,
        stderr: str = "",
    ):
        super().__init__(message)
        self.command = list(args)
        self.returncode = returncode
        self.stderr = stderr

    def __str__(self):
        return f"[{' '.join(self.command)}] {super().__str__()}"


class InvalidFormatError(GrainDisplayError):
    """Raised when a typed read leaves nothing after stripping the type tag."""

    def __init__(self, key: str, raw: str):
        super().__init__(f"No value in output {raw!r}")
        self.key = key
        self.raw = raw

    def __str__(self):
        return f"[{self.key}] {super().__str__()}"


class ValueParseError(GrainDisplayError, ValueError):
    """Raised when numeric text from the settings tool cannot be parsed."""

    def __init__(self, key: str, text: str, expected: str):
        super().__init__(f"Cannot parse {text!r} as {expected}")
        self.key = key
        self.text = text
        self.expected = expected

    def __str__(self):
        return f"[{self.key}] {super().__str__()}"


class ArgumentOverflowError(GrainDisplayError):
    """Raised when a command would exceed the client's argument bound."""


class UnknownPresetError(GrainDisplayError):
    """Raised when a preset name is not one of the shipped presets."""

    def __init__(self, name: str, available: Sequence[str]):
        super().__init__(name)
        self.name = name
        self.available = list(available)

    def __str__(self):
        return f"Unknown preset: {self.name} (available: {', '.join(self.available)})"
