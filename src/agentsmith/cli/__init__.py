"""agentsmith command-line interface."""
