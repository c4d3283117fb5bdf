"""
Main CLI entry point for Vendorize.

Provides the command-line interface using Click.
"""

import json as _json
import logging as _logging
import typing as _typing

import click as _click
import yaml as _yaml

import vendorize
import vendorize.browsers as browsers
import vendorize.config as config
import vendorize.context as context_module
import vendorize.driver as driver
import vendorize.errors as errors
import vendorize.utils.frozen as frozen

# Custom Click context settings for better help formatting
CONTEXT_SETTINGS: dict[str, _typing.Any] = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 100,
}


def _parse_browser(pair: str) -> tuple[str, str]:
    """Split "chrome 20" into ("chrome", "20")."""
    name, _, version = pair.strip().partition(" ")
    if not name or not version.strip():
        raise _click.BadParameter(
            f"expected 'BROWSER VERSION', got {pair!r}", param_hint="--browser"
        )
    return name, version.strip()


def _get_context(ctx: _click.Context) -> context_module.PrefixContext:
    """Build the prefix context once per invocation."""
    if "context" not in ctx.obj:
        settings: config.Settings = ctx.obj["settings"]
        try:
            ctx.obj["context"] = context_module.create_context(settings)
        except errors.SeedFileError as e:
            _click.echo(f"Error: {e}", err=True)
            raise SystemExit(1) from None
    prefix_context: context_module.PrefixContext = ctx.obj["context"]
    return prefix_context


@_click.group(context_settings=CONTEXT_SETTINGS)
@_click.version_option(vendorize.__version__, "-v", "--version", prog_name="vendorize")
@_click.option(
    "--log-level",
    type=_click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Log level (default: VENDORIZE_LOG_LEVEL or WARNING)",
)
@_click.option(
    "--unknown",
    "unknown_property",
    type=_click.Choice(["passthrough", "silent", "error"]),
    default=None,
    help="What to do with properties no rule handles",
)
@_click.pass_context
def cli(
    ctx: _click.Context,
    log_level: str | None,
    unknown_property: str | None,
) -> None:
    """
    Vendorize - vendor prefixes for CSS declarations.

    \b
    Examples:
        vendorize prefix align-items flex-start -p -webkit- -p -ms-
        vendorize prefix break-inside avoid-column -b "chrome 50"
        vendorize rules
        vendorize config get remaps.align-content
    """
    overrides: dict[str, _typing.Any] = {}
    if log_level:
        overrides["log_level"] = log_level
    if unknown_property:
        overrides["unknown_property"] = unknown_property

    settings = config.Settings(**overrides)
    _logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


@cli.command()
@_click.argument("property_name", metavar="PROPERTY")
@_click.argument("value")
@_click.option(
    "-p",
    "--prefix",
    "prefixes",
    multiple=True,
    help="Prefix token, repeatable (use '' for unprefixed, '-webkit- 2009' for old flexbox)",
)
@_click.option(
    "-b",
    "--browser",
    "browser_specs",
    multiple=True,
    help="Target browser as 'NAME VERSION', repeatable",
)
@_click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@_click.pass_context
def prefix(
    ctx: _click.Context,
    property_name: str,
    value: str,
    prefixes: tuple[str, ...],
    browser_specs: tuple[str, ...],
    json_output: bool,
) -> None:
    """Print the declarations needed for PROPERTY: VALUE."""
    prefix_context = _get_context(ctx)

    tokens = list(prefixes)
    if browser_specs:
        pairs = [_parse_browser(spec) for spec in browser_specs]
        for token in browsers.prefixes_for(prefix_context.store, pairs):
            if token not in tokens:
                tokens.append(token)

    try:
        declarations = driver.Autoprefixer(prefix_context).autoprefix(
            property_name, value, tokens
        )
    except errors.UnregisteredPropertyError as e:
        _click.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from None

    if json_output:
        _click.echo(_json.dumps([d.to_dict() for d in declarations], indent=2))
        return
    for declaration in declarations:
        _click.echo(f"{declaration};")


@cli.command()
@_click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@_click.pass_context
def rules(ctx: _click.Context, json_output: bool) -> None:
    """List prefix rules and their feature toggles."""
    prefix_context = _get_context(ctx)
    rows = prefix_context.rules.to_dict()

    if json_output:
        _click.echo(_json.dumps(rows, indent=2))
        return

    for row in rows:
        status = "enabled" if row["enabled"] else "disabled"
        marker = "" if row["complete"] else " (generic)"
        _click.echo(f"{row['name']:<18} {status}{marker}")


@cli.group(name="config")
def config_cmd() -> None:
    """Inspect the config store."""


@config_cmd.command(name="get")
@_click.argument("path")
@_click.option("--defaults", "default_tier", is_flag=True, help="Read the defaults tier only")
@_click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@_click.pass_context
def config_get(ctx: _click.Context, path: str, default_tier: bool, json_output: bool) -> None:
    """Print the value stored at PATH."""
    prefix_context = _get_context(ctx)
    try:
        value = prefix_context.store.require(path, default_tier=default_tier)
    except errors.ConfigPathNotFoundError as e:
        _click.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from None

    plain = frozen.thaw(value)
    if json_output:
        _click.echo(_json.dumps(plain, indent=2))
    elif isinstance(plain, (dict, list)):
        _click.echo(_yaml.safe_dump(plain, default_flow_style=False, sort_keys=False).rstrip())
    else:
        _click.echo(plain)


@config_cmd.command(name="show")
@_click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@_click.pass_context
def config_show(ctx: _click.Context, json_output: bool) -> None:
    """Show both tiers of the config store."""
    prefix_context = _get_context(ctx)
    data = {
        "defaults": prefix_context.store.snapshot(default_tier=True),
        "overrides": prefix_context.store.snapshot(),
    }
    if json_output:
        _click.echo(_json.dumps(data, indent=2))
    else:
        _click.echo(_yaml.safe_dump(data, default_flow_style=False, sort_keys=False).rstrip())
