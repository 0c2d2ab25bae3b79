"""Sub-command modules for the pdfrelay CLI."""
