"""Room transport for the Schafkopf table."""
