# ABOUTME: Subcommands of the Livraria CLI, one module per command.
# ABOUTME: Each module exposes a click command registered by livraria.cli.
