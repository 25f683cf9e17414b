"""tictac — tic-tac-toe with time travel, plus a filterable product table."""

__version__ = "0.1.0"
