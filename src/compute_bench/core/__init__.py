"""Numerical core: body state, pairwise gravity, integrator, diagnostics."""
