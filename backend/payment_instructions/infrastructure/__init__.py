"""Infrastructure Layer — logging setup and stage timing."""
