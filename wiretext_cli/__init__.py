"""wiretext command-line interface."""
