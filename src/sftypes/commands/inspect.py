"""Inspect commands -- show how an sObject maps to TypeScript.

Provides the ``sftypes inspect`` sub-command group with read-only commands
that describe one sObject and print its fields (with the declared type each
one gets) or its child relationships.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from sftypes.commands.common import exit_on_error, open_schema_source, run_with_source
from sftypes.exceptions import SftypesError
from sftypes.generator.field_mapper import map_field_type
from sftypes.models import ObjectDescription
from sftypes.output import print_table


inspect_app = typer.Typer(no_args_is_help=True)


def _describe(
    sobject: str,
    profile: Optional[str],
    describe_dir: Optional[Path],
) -> ObjectDescription:
    try:
        _, source, cache = open_schema_source(
            profile_name=profile, describe_dir=describe_dir
        )
        return run_with_source(source, cache, lambda s: s.describe(sobject))
    except SftypesError as exc:
        raise exit_on_error(exc) from None


@inspect_app.command("fields")
def inspect_fields(
    sobject: str = typer.Argument(help="API name of the sObject."),
    profile: Optional[str] = typer.Option(
        None, "--profile", "-p", help="Org profile name."
    ),
    describe_dir: Optional[Path] = typer.Option(
        None, "--describe-dir", help="Read describe files from this directory."
    ),
) -> None:
    """List an sObject's fields with their declared TypeScript types.

    Example::

        sftypes inspect fields Account
    """
    obj = _describe(sobject, profile, describe_dir)
    rows = [
        [
            field.name,
            field.primitive_type,
            map_field_type(field.primitive_type),
            ", ".join(field.reference_targets),
            field.relationship_name or "",
        ]
        for field in obj.fields
    ]
    print_table(
        ["Field", "Type", "Declared", "References", "Relationship"],
        rows,
        title=f"{obj.object_name} -- Fields ({len(rows)})",
    )


@inspect_app.command("children")
def inspect_children(
    sobject: str = typer.Argument(help="API name of the sObject."),
    profile: Optional[str] = typer.Option(
        None, "--profile", "-p", help="Org profile name."
    ),
    describe_dir: Optional[Path] = typer.Option(
        None, "--describe-dir", help="Read describe files from this directory."
    ),
) -> None:
    """List an sObject's child relationships.

    Unnamed relationships are junctions; their junction reference names are
    shown instead.

    Example::

        sftypes inspect children Account --describe-dir describes/
    """
    obj = _describe(sobject, profile, describe_dir)
    rows = [
        [
            child.relationship_name or "-",
            child.child_object_name,
            ", ".join(child.junction_reference_names),
        ]
        for child in obj.child_relationships
    ]
    print_table(
        ["Relationship", "Child sObject", "Junction references"],
        rows,
        title=f"{obj.object_name} -- Child relationships ({len(rows)})",
    )
