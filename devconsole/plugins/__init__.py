"""Command modules discovered by devconsole.interface.loader."""
