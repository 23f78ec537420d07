"""Built-in commands, one subpackage per category (loaded by interface.loader)."""
