"""schemas subpackage."""
