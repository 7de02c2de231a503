"""Rich text editor toolbar compiler."""
