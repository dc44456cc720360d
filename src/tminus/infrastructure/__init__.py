"""Infrastructure layer: timezone data and the system clock."""
