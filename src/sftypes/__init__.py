"""sftypes -- Generate TypeScript declarations from Salesforce sObject describes.

This package fetches sObject describe metadata (fields, field types, and
relationship metadata) and renders it as TypeScript interfaces. A single
object can be generated on its own, or a batch of objects can be generated
together so that relationships between them resolve to concrete types.

Typical workflow::

    sftypes init --instance-url https://example.my.salesforce.com
    sftypes create --sobject Account
    sftypes create --config sobjects.json --outputdir src/types

Modules:
    app: Typer application factory and CLI entry point.
    models: Pydantic models shared across the entire package.
    config: XDG-aware configuration and profile management.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes following clig.dev conventions.
    output: stdout/stderr formatting system with Rich support.
    generator: The schema-to-type mapping engine.
"""

__version__ = "0.1.0"
