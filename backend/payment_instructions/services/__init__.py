"""Services Layer — imperative shell around the pure core (clock, timing, logging)."""
