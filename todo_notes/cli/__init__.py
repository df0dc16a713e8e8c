"""Command-line interface: console I/O, the interactive menu and the entrypoint."""
