"""CLI entry point to asyncapi-bindings library."""

from asyncapi_bindings.cli.main import cli

cli(prog_name="asyncapi-bindings")
