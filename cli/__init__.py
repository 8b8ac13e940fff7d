"""Terminal driver for naipe games."""
