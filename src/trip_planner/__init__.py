"""Trip planning client for the Grenoble urban transport network."""
