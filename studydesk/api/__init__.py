"""HTTP adapter over the stores."""
