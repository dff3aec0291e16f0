"""Pure drill functions and value types. No I/O, no configuration."""
