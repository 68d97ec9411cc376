"""Infrastructure adapters: console logging and report output."""
