"""Settings CLI commands for Take Home.

Manages settings.json - tax year, tax rules directory, calculator defaults.
"""

import click
from pathlib import Path

from takehome.sdk import (
    CalculatorInput,
    ConfigError,
    KNOWN_SETTINGS,
    get_setting,
    get_settings_path,
    get_tax_rules_dir,
    get_tax_year,
    load_settings,
    set_setting,
    unset_setting,
)


@click.group()
def settings():
    """Manage settings (settings.json).

    Available settings:
    - tax_year: year of the tax rules to use (default 2025)
    - tax_rules_dir: directory holding <year>.yaml tax rules
    - defaults: calculator defaults (set via 'settings default')
    """
    pass


def _load():
    try:
        return load_settings()
    except ConfigError as e:
        raise click.ClickException(str(e))


@settings.command("show")
def settings_show():
    """Show current settings and their values."""
    settings_path = get_settings_path()
    current = _load()

    click.echo(f"Settings file: {settings_path}")
    click.echo(f"File exists: {settings_path.exists()}")
    click.echo()

    if not current:
        click.echo("No settings configured (using defaults).")
    else:
        click.echo("Current settings:")
        for key, value in current.items():
            if key == "defaults" and isinstance(value, dict):
                click.echo("  defaults:")
                for field, field_value in value.items():
                    click.echo(f"    {field}: {field_value}")
            else:
                click.echo(f"  {key}: {value}")

    click.echo()
    click.echo("Effective values:")
    click.echo(f"  tax_year: {get_tax_year()}")
    click.echo(f"  tax_rules_dir: {get_tax_rules_dir()}")


@settings.command("set")
@click.argument("key", type=click.Choice(["tax_year", "tax_rules_dir"]))
@click.argument("value")
def settings_set(key, value):
    """Set a setting.

    Examples:
        take-home settings set tax_year 2025
        take-home settings set tax_rules_dir ~/tax-rules
    """
    _load()
    if key == "tax_year" and (not value.isdigit() or len(value) != 4):
        raise click.BadParameter(f"Invalid year '{value}'. Must be 4 digits.", param_hint="VALUE")
    if key == "tax_rules_dir":
        rules_dir = Path(value).expanduser().resolve()
        if not rules_dir.is_dir():
            raise click.ClickException(f"Not a directory: {rules_dir}")
        value = str(rules_dir)

    path = set_setting(key, value)
    click.echo(f"Set {key}: {value}")
    click.echo(f"Saved to: {path}")


@settings.command("default")
@click.argument("field", type=click.Choice(sorted(CalculatorInput.model_fields)))
@click.argument("value")
def settings_default(field, value):
    """Set a calculator default (e.g. state, filing_status).

    VALUE is normalized the same way calculator input is, so an
    unrecognized value is stored as its fallback.

    Examples:
        take-home settings default state NY
        take-home settings default filing_status married
    """
    defaults = dict(_load().get("defaults") or {})
    normalized = getattr(CalculatorInput(**{field: value}), field)
    defaults[field] = normalized

    path = set_setting("defaults", defaults)
    click.echo(f"Set default {field}: {normalized}")
    click.echo(f"Saved to: {path}")


@settings.command("unset")
@click.argument("key", type=click.Choice(list(KNOWN_SETTINGS)))
def settings_unset(key):
    """Remove a setting and revert to its default."""
    _load()
    if unset_setting(key):
        click.echo(f"Cleared {key} setting.")
    else:
        click.echo(f"{key} was not set.")


@settings.command("get")
@click.argument("key", type=click.Choice(list(KNOWN_SETTINGS)))
def settings_get(key):
    """Print one setting."""
    _load()
    value = get_setting(key)
    if value is None:
        click.echo(f"{key} is not set.")
    else:
        click.echo(f"{key}: {value}")
