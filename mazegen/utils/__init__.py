"""Random source, maze factory and text rendering."""
