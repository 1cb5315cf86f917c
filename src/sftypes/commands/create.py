"""Create command -- generate TypeScript types for sObjects.

Implements ``sftypes create``. With ``--sobject`` one object is described
and written to ``<name>.ts``; with ``--config`` every object listed in the
config file is described concurrently and written to ``sobjects.ts``, with
relationships between them resolved to concrete types. Both modes also
write the ``sobject.ts`` base interface and ``sobjectTypes.ts`` aliases.

All text is generated before anything is written, so a failed describe
leaves the output directory untouched.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from sftypes.config import atomic_write, load_batch_config
from sftypes.exceptions import InvalidUsageError, SftypesError
from sftypes.generator import assemble_batch, generate_single
from sftypes.generator.artifacts import (
    BASE_FILE_NAME,
    BASE_SOBJECT_MODULE,
    BATCH_FILE_NAME,
    SOBJECT_TYPES_MODULE,
    TYPES_FILE_NAME,
    module_file_name,
)
from sftypes.output import OutputFormat, get_output, info
from sftypes.commands.common import exit_on_error, open_schema_source, run_with_source


def create_command(
    sobject: Optional[str] = typer.Option(
        None, "--sobject", "-s", help="API name of a single sObject, e.g. Account."
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="JSON or YAML file with an 'sobjects' list to generate as a batch.",
    ),
    output_dir: Optional[Path] = typer.Option(
        None, "--outputdir", "-o", help="Output directory (default: ./src/types)."
    ),
    profile: Optional[str] = typer.Option(
        None, "--profile", "-p", help="Org profile name."
    ),
    instance_url: Optional[str] = typer.Option(
        None, "--instance-url", help="Override the profile's instance URL."
    ),
    describe_dir: Optional[Path] = typer.Option(
        None,
        "--describe-dir",
        help="Read describe JSON files from this directory instead of an org.",
    ),
    no_cache: bool = typer.Option(
        False, "--no-cache", help="Always fetch describes from the org."
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", "-n", help="Print the object module instead of writing files."
    ),
) -> None:
    """Create TypeScript types for one sObject or a batch of sObjects.

    Raises:
        typer.Exit: With the error's exit code when no selection is given
            (2), a describe fails, or configuration cannot be resolved.

    Example::

        sftypes create --sobject Account
        sftypes create --sobject MyCustomObject__c --outputdir types/ --profile myorg
        sftypes create --config sobjects.json
    """
    try:
        files = _create(
            sobject=sobject,
            config_file=config_file,
            output_dir=output_dir,
            profile=profile,
            instance_url=instance_url,
            describe_dir=describe_dir,
            no_cache=no_cache,
            dry_run=dry_run,
        )
    except SftypesError as exc:
        raise exit_on_error(exc) from None

    if dry_run:
        return
    _report(files)


def _create(
    sobject: Optional[str],
    config_file: Optional[Path],
    output_dir: Optional[Path],
    profile: Optional[str],
    instance_url: Optional[str],
    describe_dir: Optional[Path],
    no_cache: bool,
    dry_run: bool,
) -> list[str]:
    """Generate and write the artifacts; return the written paths."""
    if not sobject and config_file is None:
        raise InvalidUsageError("Please provide --sobject or --config.")

    batch: list[str] = []
    if not sobject:
        assert config_file is not None
        batch = load_batch_config(config_file).sobjects

    global_cfg, source, cache = open_schema_source(
        profile_name=profile,
        instance_url=instance_url,
        describe_dir=describe_dir,
        no_cache=no_cache,
    )

    if sobject:
        info(f"Generating types for {sobject}")
        text = run_with_source(source, cache, lambda s: generate_single(sobject, s.describe))
        file_name = module_file_name(sobject)
    else:
        info(f"Generating types for {len(batch)} sObjects")
        text = run_with_source(source, cache, lambda s: assemble_batch(batch, s.describe))
        file_name = BATCH_FILE_NAME

    if dry_run:
        get_output().print_source(text)
        return []

    target = output_dir or Path(global_cfg.output_dir)
    artifacts = [
        (BASE_FILE_NAME, BASE_SOBJECT_MODULE),
        (TYPES_FILE_NAME, SOBJECT_TYPES_MODULE),
        (file_name, text),
    ]
    created: list[str] = []
    for name, content in artifacts:
        path = target / name
        atomic_write(path, content)
        created.append(str(path))
    return created


def _report(files: list[str]) -> None:
    output = get_output()
    if output.format == OutputFormat.JSON:
        output.print_json({"files": files})
        return
    if not files:
        info("No types created.")
        return
    output.print_table(
        ["Output file path"], [[f] for f in files], title="Create types"
    )
