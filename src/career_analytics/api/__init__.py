"""HTTP interface over the analytics engine."""
