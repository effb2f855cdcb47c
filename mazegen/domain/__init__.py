"""Grid model, generation algorithms and solvers."""
