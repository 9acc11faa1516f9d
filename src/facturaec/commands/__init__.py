"""Sub-commands exposed through :mod:`facturaec.cli`."""
