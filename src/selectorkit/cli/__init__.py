"""selectorkit command line interface."""
