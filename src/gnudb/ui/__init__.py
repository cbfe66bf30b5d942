"""User interfaces for gnudb."""
