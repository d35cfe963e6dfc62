"""Package filename parsing and version ordering."""
