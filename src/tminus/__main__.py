from tminus.cli import cli

cli()
