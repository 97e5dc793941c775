"""GSettings Client - typed access to GNOME settings through the gsettings CLI

GNOME keeps Night Light and font scaling in gsettings. We shell out to the
`gsettings` tool:

    gsettings get <schema> <key>          -> "true", "uint32 3000", "double 18.0"
    gsettings set <schema> <key> <value>

Typed numbers come back prefixed with a type tag ("uint32", "double"); the tag
is stripped on read and never written.

RESPONSIBILITY:
- Render/parse values for the gsettings command line
- Compose per-key reads/writes into Night Light, interface and system operations

DOES NOT:
- Spawn processes (CommandRunner's job)
- Cache anything: every read goes to the settings store
- Roll back: a failure halfway through an apply leaves earlier writes in place
"""

import logging
import math
import re
from decimal import Decimal
from typing import List, Sequence

from ..exceptions import ArgumentOverflowError, InvalidFormatError, ValueParseError
from .runner import CommandRunner
from .types import (
    DisplayConfig,
    InterfaceConfig,
    NightLightConfig,
    SystemConfig,
)


COLOR_SCHEMA = "org.gnome.settings-daemon.plugins.color"
INTERFACE_SCHEMA = "org.gnome.desktop.interface"

NIGHT_LIGHT_ENABLED = "night-light-enabled"
NIGHT_LIGHT_TEMPERATURE = "night-light-temperature"
NIGHT_LIGHT_SCHEDULE_AUTOMATIC = "night-light-schedule-automatic"
NIGHT_LIGHT_SCHEDULE_FROM = "night-light-schedule-from"
NIGHT_LIGHT_SCHEDULE_TO = "night-light-schedule-to"
TEXT_SCALING_FACTOR = "text-scaling-factor"

# Executable + sub-command + schema + key + value, with headroom
MAX_ARGS = 8

U32_MAX = 0xFFFFFFFF

_UNSIGNED_RE = re.compile(r"[0-9]+")


def check_u32(key: str, value: int) -> int:
    """Return `value` if it fits a uint32, else raise ValueParseError."""
    if isinstance(value, bool) or not 0 <= value <= U32_MAX:
        raise ValueParseError(key, str(value), "uint32")
    return int(value)


def format_float(value: float) -> str:
    """Shortest decimal that round-trips, without a forced trailing zero.

    24.0 -> "24", 1.75 -> "1.75", 1e-05 -> "0.00001"
    """
    value = float(value)
    text = repr(value)
    if "e" in text and math.isfinite(value):
        # gsettings parses plain decimals; expand repr's exponent form
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def strip_type_tag(output: str) -> str:
    """Drop a leading type tag such as "uint32 " or "double "."""
    text = output.strip()
    if " " in text:
        text = text.split(" ", 1)[1].strip()
    return text


class GSettingsClient:
    """Reads and writes display settings through a CommandRunner.

    Usage:
        client = GSettingsClient(SystemRunner())
        config = client.read_night_light()
        client.apply_night_light(dataclasses.replace(config, temperature=2800))
    """

    def __init__(
        self,
        runner: CommandRunner,
        executable: str = "gsettings",
        color_schema: str = COLOR_SCHEMA,
        interface_schema: str = INTERFACE_SCHEMA,
    ):
        self.runner = runner
        self.executable = executable
        self.color_schema = color_schema
        self.interface_schema = interface_schema

    # =========================================================================
    # Command plumbing
    # =========================================================================

    def _run(self, args: Sequence[str]) -> bytes:
        argv: List[str] = [self.executable, *args]
        if len(argv) > MAX_ARGS:
            raise ArgumentOverflowError(
                f"{len(argv)} arguments exceed the limit of {MAX_ARGS}"
            )
        return self.runner.run(argv)

    def _get(self, schema: str, key: str) -> str:
        output = self._run(["get", schema, key])
        return output.decode("utf-8", errors="replace")

    def _set(self, schema: str, key: str, value: str) -> None:
        logging.debug(f"gsettings set {schema} {key} {value}")
        self._run(["set", schema, key, value])

    # =========================================================================
    # Typed accessors
    # =========================================================================

    def read_bool(self, schema: str, key: str) -> bool:
        """True only for a literal "true"; any other output reads as False."""
        return self._get(schema, key).strip() == "true"

    def read_u32(self, schema: str, key: str) -> int:
        text = strip_type_tag(self._get(schema, key))
        if not text:
            raise InvalidFormatError(key, text)
        if not _UNSIGNED_RE.fullmatch(text):
            raise ValueParseError(key, text, "uint32")
        value = int(text)
        if value > U32_MAX:
            raise ValueParseError(key, text, "uint32")
        return value

    def read_f64(self, schema: str, key: str) -> float:
        text = strip_type_tag(self._get(schema, key))
        if not text:
            raise InvalidFormatError(key, text)
        try:
            return float(text)
        except ValueError as e:
            raise ValueParseError(key, text, "double") from e

    def write_bool(self, schema: str, key: str, value: bool) -> None:
        self._set(schema, key, "true" if value else "false")

    def write_u32(self, schema: str, key: str, value: int) -> None:
        self._set(schema, key, str(check_u32(key, value)))

    def write_f64(self, schema: str, key: str, value: float) -> None:
        self._set(schema, key, format_float(value))

    # =========================================================================
    # Night Light
    # =========================================================================

    def read_night_light(self) -> NightLightConfig:
        schema = self.color_schema
        return NightLightConfig(
            enabled=self.read_bool(schema, NIGHT_LIGHT_ENABLED),
            temperature=self.read_u32(schema, NIGHT_LIGHT_TEMPERATURE),
            schedule_automatic=self.read_bool(schema, NIGHT_LIGHT_SCHEDULE_AUTOMATIC),
            schedule_from=self.read_f64(schema, NIGHT_LIGHT_SCHEDULE_FROM),
            schedule_to=self.read_f64(schema, NIGHT_LIGHT_SCHEDULE_TO),
        )

    def apply_night_light(self, config: NightLightConfig) -> None:
        """Write Night Light settings.

        Schedule times are written only for a manual schedule; with an
        automatic schedule the stored times are left untouched.
        """
        schema = self.color_schema
        # Validate before the first write so a bad value changes nothing
        check_u32(NIGHT_LIGHT_TEMPERATURE, config.temperature)
        self.write_bool(schema, NIGHT_LIGHT_ENABLED, config.enabled)
        self.write_u32(schema, NIGHT_LIGHT_TEMPERATURE, config.temperature)
        self.write_bool(schema, NIGHT_LIGHT_SCHEDULE_AUTOMATIC, config.schedule_automatic)

        if not config.schedule_automatic:
            self.write_f64(schema, NIGHT_LIGHT_SCHEDULE_FROM, config.schedule_from)
            self.write_f64(schema, NIGHT_LIGHT_SCHEDULE_TO, config.schedule_to)

        logging.info(
            f"Night Light applied: enabled={config.enabled} "
            f"temperature={config.temperature}K automatic={config.schedule_automatic}"
        )

    # =========================================================================
    # Display
    # =========================================================================

    def read_display(self) -> DisplayConfig:
        # Effects are not stored anywhere yet, so they always read as normal
        return DisplayConfig(night_light=self.read_night_light())

    def apply_display(self, config: DisplayConfig) -> None:
        """Apply Night Light, then the colour effects.

        Monochrome and red-green are modelled by DisplayEffects (types.py) but
        have no backend yet, so every mode stops after the Night Light write.
        """
        self.apply_night_light(config.night_light)

        effects = config.effects
        if effects.is_normal():
            return
        if effects.monochrome:
            logging.debug("Monochrome effect requested; no gamma backend, skipping")
        if effects.red_green:
            logging.debug("Red-green effect requested; no gamma backend, skipping")

    # =========================================================================
    # Interface
    # =========================================================================

    def read_interface(self) -> InterfaceConfig:
        return InterfaceConfig(
            text_scale=self.read_f64(self.interface_schema, TEXT_SCALING_FACTOR),
        )

    def apply_interface(self, config: InterfaceConfig) -> None:
        self.write_f64(self.interface_schema, TEXT_SCALING_FACTOR, config.text_scale)
        logging.info(f"Text scaling set to {config.text_scale}")

    # =========================================================================
    # System
    # =========================================================================

    def read_system(self) -> SystemConfig:
        return SystemConfig(
            display=self.read_display(),
            interface=self.read_interface(),
        )

    def apply_system(self, config: SystemConfig) -> None:
        """Display first, then interface."""
        self.apply_display(config.display)
        self.apply_interface(config.interface)
