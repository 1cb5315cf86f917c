"""Init command -- create an org profile.

Implements ``sftypes init``: records the org's instance URL, API version
and access token source as a :class:`~sftypes.models.Profile`, and writes
a project-local ``sftypes.json`` selecting it as the default.
"""

from __future__ import annotations

import re
from typing import Optional
from urllib.parse import urlparse

import typer

from sftypes.output import info, success, suggest


def init_command(
    instance_url: str = typer.Option(
        ..., "--instance-url", "-u", help="Org instance URL."
    ),
    name: Optional[str] = typer.Option(
        None,
        "--name",
        "-n",
        help="Profile name (derived from the instance host if omitted).",
    ),
    api_version: str = typer.Option(
        "59.0", "--api-version", help="REST API version."
    ),
    token_source: str = typer.Option(
        "env:SF_ACCESS_TOKEN",
        "--token-source",
        help="Access token source: env:VAR, file:/path, or prompt.",
    ),
) -> None:
    """Create an org profile and make it the project default.

    Example::

        sftypes init --instance-url https://acme.my.salesforce.com
        sftypes init -u https://acme--dev.sandbox.my.salesforce.com --name dev \\
            --token-source file:~/.sf/dev-token
    """
    from sftypes.config import profile_exists, save_profile, save_project_config
    from sftypes.models import Profile

    profile_name = name or _profile_name_from_url(instance_url)

    if profile_exists(profile_name):
        info(f'Profile "{profile_name}" already exists and will be overwritten.')

    profile = Profile(
        name=profile_name,
        instance_url=instance_url.rstrip("/"),
        api_version=api_version,
        token_source=token_source,
    )
    save_profile(profile)
    save_project_config({"default_profile": profile_name})

    success(f'Profile "{profile_name}" created.')
    suggest(f"Inspect an object: sftypes inspect fields Account --profile {profile_name}")
    suggest("Generate types: sftypes create --sobject Account")


def _profile_name_from_url(url: str) -> str:
    """Use the first label of the instance host as a slug."""
    host = urlparse(url if "://" in url else f"https://{url}").hostname or ""
    slug = re.sub(r"[^a-z0-9]+", "-", host.split(".")[0].lower()).strip("-")
    return slug or "default"
