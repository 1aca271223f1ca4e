"""Human readable reporting of simulation runs."""
