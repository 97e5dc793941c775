#!/usr/bin/env python3
"""graindisplay command line interface

Configures Night Light interactively or from command line arguments.

Usage:
    graindisplay --interactive        # Prompt for each value
    graindisplay -f                   # Show full current configuration
    graindisplay --preset very-warm   # Apply a preset
    graindisplay --temperature 3000   # Override one value

Defaults come from ~/.config/graindisplay/config.cfg when present; flags
given on the command line win over the file.
"""

import argparse
import logging
import sys
from typing import Any, Callable, Dict, List, Optional, TextIO

from . import __version__
from .core.gsettings import U32_MAX
from .core.preferences import Preference, load_default, load_file
from .core.presets import PRESET_DESCRIPTIONS, canonical_preset_name, preset_names
from .core.settings_config import SettingsConfig
from .core.types import DisplayMode, InterfaceConfig
from .exceptions import GrainDisplayError, UnknownPresetError
from .tools import ToolRegistry, get_registry


EXAMPLES = """\
Presets:
{presets}

Examples:
  graindisplay --interactive
  graindisplay -f
  graindisplay --preset very-warm
  graindisplay --preset daylight-movie
  graindisplay --mode monochrome
  graindisplay --temperature 3000
  graindisplay --font-scale 1.25
  graindisplay --enable
"""


def build_parser() -> argparse.ArgumentParser:
    presets = "\n".join(
        f"  {name:<16} {PRESET_DESCRIPTIONS[name]}" for name in preset_names()
    )
    parser = argparse.ArgumentParser(
        prog="graindisplay",
        description="graindisplay - warm display configuration for Wayland Night Light",
        epilog=EXAMPLES.format(presets=presets),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-i", "--interactive", action="store_true",
                        help="Interactive mode (prompts for values)")
    parser.add_argument("-f", "--full", action="store_true",
                        help="Show full current configuration")

    enable = parser.add_mutually_exclusive_group()
    enable.add_argument("--enable", dest="enable", action="store_const", const=True,
                        help="Enable Night Light")
    enable.add_argument("--disable", dest="enable", action="store_const", const=False,
                        help="Disable Night Light")

    parser.add_argument("-t", "--temperature", type=_temperature, metavar="TEMP",
                        help="Set color temperature (1700-4700K)")
    parser.add_argument("-p", "--preset", metavar="PRESET",
                        help="Apply preset")
    parser.add_argument("-m", "--mode", choices=[m.value for m in DisplayMode],
                        help="Set color mode (normal, monochrome, red-green)")
    parser.add_argument("-s", "--font-scale", type=_font_scale, metavar="SCALE",
                        help="Set text scaling factor (1.0 = default)")

    config = parser.add_mutually_exclusive_group()
    config.add_argument("--config", metavar="PATH",
                        help="Read preferences from PATH instead of ~/.config/graindisplay/config.cfg")
    config.add_argument("--no-config", action="store_true",
                        help="Ignore the preferences file")

    parser.add_argument("--list-actions", action="store_true",
                        help="List the registered actions and exit")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log gsettings calls to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _temperature(text: str) -> int:
    try:
        value = int(text, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid temperature: {text!r}")
    if value < 0:
        raise argparse.ArgumentTypeError(f"temperature must not be negative: {value}")
    if value > U32_MAX:
        raise argparse.ArgumentTypeError(f"temperature out of range: {value}")
    return value


def _font_scale(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid font scale: {text!r}")
    if value <= 0:
        raise argparse.ArgumentTypeError(f"font scale must be positive: {value}")
    return value


def configure_logging(verbose: bool = False) -> None:
    settings = SettingsConfig.get()
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format=settings.log_format,
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )


def load_preferences(opts: argparse.Namespace) -> Optional[Preference]:
    if opts.no_config:
        return None
    if opts.config:
        return load_file(opts.config)
    return load_default()


def flag_preference(opts: argparse.Namespace) -> Preference:
    """Command line flags as a Preference layer."""
    preset = None
    if opts.preset is not None:
        preset = canonical_preset_name(opts.preset)
    effects = None
    if opts.mode is not None:
        effects = DisplayMode(opts.mode).to_effects()
    return Preference(
        preset=preset,
        temperature=opts.temperature,
        enable=opts.enable,
        effects=effects,
        font_scale=opts.font_scale,
    )


def build_preference(
    prefs: Optional[Preference],
    opts: argparse.Namespace,
) -> Preference:
    """The preferences file with the command line flags layered on top.

    A preset given on the command line also discards the file's enable and
    temperature, so `--preset` always yields exactly that preset unless other
    flags say otherwise.
    """
    return (prefs or Preference()).override(flag_preference(opts))


def apply_args(prefs: Preference) -> Dict[str, Any]:
    """Arguments for display.night_light.apply."""
    args: Dict[str, Any] = {}
    if prefs.preset is not None:
        args["preset"] = prefs.preset
    if prefs.enable is not None:
        args["enable"] = prefs.enable
    if prefs.temperature is not None:
        args["temperature"] = prefs.temperature
    if prefs.effects is not None:
        args["effects"] = prefs.effects.names()
    elif prefs.clear_effects:
        args["effects"] = []
    return args


def _flag(value: bool) -> str:
    return "true" if value else "false"


def print_full(result: Dict[str, Any], out: TextIO) -> None:
    night_light = result["display"]["night_light"]
    out.write("Current Night Light Configuration:\n")
    out.write(f"  Enabled: {_flag(night_light['enabled'])}\n")
    out.write(f"  Temperature: {night_light['temperature']}K ({result['warmth']})\n")
    out.write(f"  Schedule automatic: {_flag(night_light['schedule_automatic'])}\n")
    if not night_light["schedule_automatic"]:
        out.write(f"  Schedule from: {night_light['schedule_from']:.1f}h\n")
        out.write(f"  Schedule to: {night_light['schedule_to']:.1f}h\n")
    out.write(f"  Text scaling: {result['interface']['text_scale']:g}x\n")


def print_actions(registry: ToolRegistry, out: TextIO) -> None:
    tools = registry.list_all()
    out.write(f"Total actions: {len(tools)}\n\n")
    for name, data in sorted(tools.items()):
        out.write(f"  {name}: [{data['capability_class']}] {data['description']}\n")


def _ask(prompt: str, input_fn: Callable[[str], str]) -> str:
    try:
        return input_fn(prompt).strip()
    except EOFError:
        return ""


def run_interactive(
    registry: ToolRegistry,
    input_fn: Callable[[str], str] = input,
    out: Optional[TextIO] = None,
) -> int:
    """Prompt for enable and temperature, keeping the current values as defaults."""
    out = out or sys.stdout
    out.write("Welcome to graindisplay! Let's configure your warm display.\n\n")

    current = registry.execute("display.night_light.show")
    if current["status"] != "success":
        out.write(f"❌ {current['error']}\n")
        return 1

    night_light = current["night_light"]
    out.write("Current settings:\n")
    out.write(f"  Enabled: {_flag(night_light['enabled'])}\n")
    out.write(f"  Temperature: {night_light['temperature']}K\n")
    out.write(f"  Schedule automatic: {_flag(night_light['schedule_automatic'])}\n\n")

    default_enable = "y" if night_light["enabled"] else "n"
    answer = _ask(f"Enable Night Light? (y/n, default: {default_enable}): ", input_fn)
    enabled = night_light["enabled"] if not answer else answer[0] in ("y", "Y")

    answer = _ask(
        f"Temperature in Kelvins (1700-4700, default: {night_light['temperature']}): ",
        input_fn,
    )
    if answer:
        try:
            temperature = _temperature(answer)
        except argparse.ArgumentTypeError as e:
            out.write(f"❌ {e}\n")
            return 1
    else:
        temperature = night_light["temperature"]

    result = registry.execute(
        "display.night_light.apply",
        {"enable": enabled, "temperature": temperature},
    )
    if result["status"] != "success":
        out.write(f"❌ {result['error']}\n")
        return 1

    out.write("\n✅ Configuration applied!\n")
    return 0


def run(
    argv: Optional[List[str]] = None,
    registry: Optional[ToolRegistry] = None,
    input_fn: Callable[[str], str] = input,
    out: Optional[TextIO] = None,
) -> int:
    out = out or sys.stdout
    parser = build_parser()
    opts = parser.parse_args(argv)

    configure_logging(opts.verbose)
    registry = registry or get_registry()

    if opts.list_actions:
        print_actions(registry, out)
        return 0

    if opts.full:
        result = registry.execute("system.config.show")
        if result["status"] != "success":
            out.write(f"❌ {result['error']}\n")
            return 1
        print_full(result, out)
        return 0

    if opts.interactive:
        return run_interactive(registry, input_fn=input_fn, out=out)

    try:
        prefs = load_preferences(opts)
    except OSError as e:
        logging.error(f"Failed to read preferences: {e}")
        out.write(f"❌ Could not read preferences: {e}\n")
        return 1

    try:
        merged = build_preference(prefs, opts)
    except UnknownPresetError as e:
        out.write(f"Unknown preset: {e.name}\n")
        out.write(f"Available presets: {', '.join(e.available)}\n")
        return 1

    result = registry.execute("display.night_light.apply", apply_args(merged))
    if result["status"] != "success":
        out.write(f"❌ {result['error']}\n")
        return 1

    if merged.font_scale is not None:
        interface = merged.merge_into_interface(InterfaceConfig())
        scaled = registry.execute("interface.text_scale.set", {"scale": interface.text_scale})
        if scaled["status"] != "success":
            out.write(f"❌ {scaled['error']}\n")
            return 1

    out.write("✅ Configuration applied!\n")
    if "note" in result:
        out.write(f"Note: {result['note']}\n")
    return 0


def main() -> int:
    try:
        return run()
    except KeyboardInterrupt:
        print("\n👋 Cancelled")
        return 130
    except GrainDisplayError as e:
        logging.error(f"graindisplay failed: {e}")
        print(f"❌ {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
