"""stencil command line interface."""
