# uvws/cli/interface.py
import sys
import json
from pathlib import Path
from typing import Any, Dict

import click
from click_option_group import optgroup
import structlog

from uvws import __version__ as app_version
from uvws.config.settings import (
    ResolveConfig, OutputFormat,
    DEFAULT_CONFIG_FILENAME, DEFAULT_WORKSPACE_MARKER, DEFAULT_OUTPUT_FORMAT,
)
from uvws.config.loader import load_and_merge_configs, build_effective_options
from uvws.logging_setup import configure_logging, level_for_verbosity
from uvws.core.merge import build_pyright_payload, merge_extra_paths
from uvws.core.output import write_output
from uvws.core.pipeline import WorkspaceResolution, resolve_workspace
from uvws.cli.console_output import print_resolution_summary
from uvws.exceptions import UvwsError

log = structlog.get_logger(__name__)

# cli parameter name -> ResolveConfig attribute, for values that are layered over toml settings.
CLI_PARAM_TO_RESOLVECONFIG_ATTR_MAP: Dict[str, str] = {
    "config_filename": "config_filename",
    "marker": "marker",
    "apply_excludes": "apply_excludes",
    "absolute_paths": "absolute_paths",
    "existing_extra_paths": "existing_extra_paths",
    "output_format_str": "output_format",
    "output_file": "output_file",
    "console_show_summary": "console_show_summary",
}

def render_output(config: ResolveConfig, resolution: WorkspaceResolution) -> str:
    # lines: one merged path per line. json: the merged list. pyright: settings payload.
    if config.output_format == OutputFormat.PYRIGHT:
        payload = build_pyright_payload(resolution.extra_paths, config.existing_extra_paths)
        return json.dumps(payload, indent=2) + "\n"

    merged = merge_extra_paths(config.existing_extra_paths, resolution.extra_paths)
    if config.output_format == OutputFormat.JSON:
        return json.dumps(merged, indent=2) + "\n"
    return "".join(f"{p}\n" for p in merged)

def _run_resolution_flow(config: ResolveConfig):
    log.info("workspace_resolution_started", member_root=str(config.member_root))
    resolution = resolve_workspace(config.member_root, config)
    output_to_write = render_output(config, resolution)

    write_output(output_to_write, config.output_file)
    if config.output_file:
        click.echo(f"Info: Output written to: {config.output_file}", err=True)

    if config.console_show_summary:
        print_resolution_summary(resolution)


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.argument("member_root", required=False, type=click.Path(file_okay=False, path_type=Path))
@optgroup.group("Workspace Detection", help="How the workspace root and its members are recognized.")
@optgroup.option("--config-filename", "config_filename", default=None, help=f"Configuration file looked for in each ancestor. Default: {DEFAULT_CONFIG_FILENAME}.")
@optgroup.option("--marker", "marker", default=None, help=f"Text that marks a configuration as a workspace root. Default: {DEFAULT_WORKSPACE_MARKER}.")
@optgroup.option("--excludes/--no-excludes", "apply_excludes", default=None, help="Honor the workspace 'exclude' globs. Default: off.")
@optgroup.group("Output", help="What is printed and where.")
@optgroup.option("-F", "--output-format", "output_format_str", type=click.Choice([f.value for f in OutputFormat]), default=None, help=f"Output format. Default: {DEFAULT_OUTPUT_FORMAT.value}.")
@optgroup.option("--existing", "existing_extra_paths", multiple=True, metavar="PATH", help="Existing extraPaths entry to merge with (repeatable). Kept first, in order.")
@optgroup.option("--absolute-paths", "absolute_paths", is_flag=True, default=None, help="Emit absolute member directories instead of relative paths.")
@optgroup.option("-o", "--output", "output_file", type=click.Path(dir_okay=False, writable=True, path_type=Path), default=None, help="Path to write the output to.")
@optgroup.option("--summary/--no-summary", "console_show_summary", default=None, help="Show a resolution summary on stderr. Default: off.")
@optgroup.group("Application Behavior", help="Configuration profiles and logging.")
@optgroup.option("--config-profile", "active_config_profile_name", default=None, help="Load a profile from config file(s).")
@optgroup.option("--verbose", "-v", "verbosity_level", count=True, help="Verbosity: -v info, -vv debug.")
@optgroup.option("--force-json-logs", "force_json_logs_cli", is_flag=True, default=False, help="Force JSON logs.")
@click.version_option(version=app_version, package_name="uvws", prog_name="uvws", help="Show version and exit.")
@click.pass_context
def main_cli(ctx: click.Context, member_root: Any, **cli_params: Any):
    """uvws: print the paths from a uv workspace member to its sibling
    members, ready for a type checker's extraPaths setting."""

    configure_logging(log_level_str=level_for_verbosity(cli_params.get("verbosity_level", 0)), force_json_logs=cli_params.get("force_json_logs_cli", False))

    log.debug("cli_command_invoked", member_root=str(member_root), params=cli_params)

    try:
        raw_configs_from_toml_files = load_and_merge_configs()
        effective_options = build_effective_options(
            raw_configs_from_toml_files, cli_params.get("active_config_profile_name")
        )

        for cli_name, rc_attr in CLI_PARAM_TO_RESOLVECONFIG_ATTR_MAP.items():
            if ctx.get_parameter_source(cli_name) != click.core.ParameterSource.COMMANDLINE:
                continue
            value = cli_params[cli_name]
            if cli_name == "output_format_str":
                parsed = OutputFormat.from_string(value)
                if parsed: effective_options[rc_attr] = parsed
            elif cli_name == "existing_extra_paths":
                effective_options[rc_attr] = list(value)
            elif value is not None:
                effective_options[rc_attr] = value

        final_config = ResolveConfig(member_root=member_root, **effective_options)
        _run_resolution_flow(final_config)

    except UvwsError as e:
        log.error("handled_application_error_in_cli", error_type=type(e).__name__, message=str(e))
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)
    except click.ClickException as e:
        log.error("click_exception_in_cli", error_type=type(e).__name__, message=str(e))
        e.show(); sys.exit(e.exit_code)
    except Exception as e:
        log.critical("unexpected_critical_error_in_cli", message=str(e), exc_info=True)
        click.secho(f"Unexpected critical error: {e}. Please report this.", fg="red", err=True)
        sys.exit(1)
