"""Domain services - pure access-control rules, no I/O."""
