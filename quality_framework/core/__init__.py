"""Table model, configuration, constants, exceptions and logging setup."""
